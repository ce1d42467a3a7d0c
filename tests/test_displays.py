"""Tests for the display state helpers and number formatting."""
import pytest

from patternlab.core.formatting import format_fixed, format_number
from patternlab.weather.displays import (
    IMPROVING,
    STEADY,
    WORSENING,
    CurrentConditions,
    PressureForecast,
    TemperatureStatistics,
)


@pytest.mark.parametrize(
    "value, expected",
    [(30, "30"), (30.0, "30"), (25.5, "25.5"), (-7.0, "-7"), (0, "0"), (1013.25, "1013.25")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_rejects_bool():
    with pytest.raises(TypeError):
        format_number(True)


def test_format_fixed():
    assert format_fixed(25.0) == "25.0"
    assert format_fixed(1.29, 2) == "1.29"
    with pytest.raises(ValueError):
        format_fixed(1.0, -1)


def test_current_conditions_record():
    state = CurrentConditions()
    state.record(21.0, 48.0)
    assert state.render() == "Current conditions: 21°C and 48% humidity"


def test_statistics_average():
    stats = TemperatureStatistics()
    assert stats.average is None
    for temp in (10, 20, 33):
        stats.record(temp)
    assert stats.num_readings == 3
    assert stats.average == 21
    assert stats.max_temp == 33
    assert stats.min_temp == 10
    assert stats.render() == "Avg/Max/Min temperature = 21.0/33/10"


def test_forecast_outlook():
    forecast = PressureForecast(baseline=1013)
    assert forecast.outlook == STEADY
    forecast.record(1014)
    assert forecast.outlook == IMPROVING
    forecast.record(1000)
    assert forecast.outlook == WORSENING
    assert forecast.last_pressure == 1014
