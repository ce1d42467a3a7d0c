from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    log_level: LogLevel = Field("INFO", validation_alias="PATTERNLAB_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="PATTERNLAB_LOG_RING_SIZE", gt=0)

    # Alternative menu JSON; the packaged one is used when unset.
    menu_path: Optional[str] = Field(None, validation_alias="PATTERNLAB_MENU_PATH")

    forecast_baseline_pressure: float = Field(1013, validation_alias="PATTERNLAB_FORECAST_BASELINE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
