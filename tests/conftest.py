import pytest

from patternlab.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for var in ("PATTERNLAB_LOG_LEVEL", "PATTERNLAB_LOG_RING_SIZE", "PATTERNLAB_MENU_PATH", "PATTERNLAB_FORECAST_BASELINE"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
