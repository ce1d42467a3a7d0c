"""
Rendering state for the weather displays.

Each class records what its display needs from a reading and formats it.
The push and pull displays feed these from the data they are given or fetch.
"""
from __future__ import annotations

from typing import Optional

from patternlab.config import get_settings
from patternlab.core.formatting import format_fixed, format_number

IMPROVING = "Improving weather on the way!"
STEADY = "More of the same"
WORSENING = "Watch out for cooler, rainy weather"


class CurrentConditions:
    def __init__(self) -> None:
        self.temperature: float = 0
        self.humidity: float = 0

    def record(self, temperature: float, humidity: float) -> None:
        self.temperature = temperature
        self.humidity = humidity

    def render(self) -> str:
        return (
            f"Current conditions: {format_number(self.temperature)}°C "
            f"and {format_number(self.humidity)}% humidity"
        )


class TemperatureStatistics:
    """Running average, maximum and minimum of every temperature seen."""

    def __init__(self) -> None:
        self.temp_sum: float = 0
        self.num_readings = 0
        self.max_temp: Optional[float] = None
        self.min_temp: Optional[float] = None

    def record(self, temperature: float) -> None:
        self.temp_sum += temperature
        self.num_readings += 1
        if self.max_temp is None or temperature > self.max_temp:
            self.max_temp = temperature
        if self.min_temp is None or temperature < self.min_temp:
            self.min_temp = temperature

    @property
    def average(self) -> Optional[float]:
        if not self.num_readings:
            return None
        return self.temp_sum / self.num_readings

    def render(self) -> str:
        average = self.average
        if average is None:
            return "Avg/Max/Min temperature = n/a"
        return (
            f"Avg/Max/Min temperature = {format_fixed(average, 1)}"
            f"/{format_number(self.max_temp)}/{format_number(self.min_temp)}"
        )


class PressureForecast:
    def __init__(self, baseline: Optional[float] = None) -> None:
        if baseline is None:
            baseline = get_settings().forecast_baseline_pressure
        self.last_pressure: float = baseline
        self.current_pressure: float = baseline

    def record(self, pressure: float) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = pressure

    @property
    def outlook(self) -> str:
        if self.current_pressure > self.last_pressure:
            return IMPROVING
        if self.current_pressure == self.last_pressure:
            return STEADY
        return WORSENING

    def render(self) -> str:
        return f"Forecast: {self.outlook}"
