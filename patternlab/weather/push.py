"""
Push-style weather station: observers receive the new ``WeatherData`` as the
argument of ``update``.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from patternlab.weather.base import BaseWeatherStation, Display, Subject
from patternlab.weather.displays import CurrentConditions, PressureForecast, TemperatureStatistics
from patternlab.weather.models import WeatherData

logger = logging.getLogger(__name__)


class Observer(ABC):
    @abstractmethod
    def update(self, data: WeatherData) -> None:
        ...


class WeatherStation(BaseWeatherStation[Observer]):
    def _notify_one(self, observer: Observer) -> None:
        observer.update(self.weather_data)


class CurrentConditionsDisplay(Observer, Display):
    def __init__(self, station: Subject[Observer]) -> None:
        self._state = CurrentConditions()
        self.weather_station = station
        self.weather_station.register_observer(self)

    def update(self, data: WeatherData) -> None:
        self._state.record(data.temperature, data.humidity)
        logger.debug(self.display())

    def display(self) -> str:
        return self._state.render()


class StatisticsDisplay(Observer, Display):
    def __init__(self, station: Subject[Observer]) -> None:
        self._state = TemperatureStatistics()
        self.weather_station = station
        self.weather_station.register_observer(self)

    def update(self, data: WeatherData) -> None:
        self._state.record(data.temperature)
        logger.debug(self.display())

    def display(self) -> str:
        return self._state.render()


class ForecastDisplay(Observer, Display):
    def __init__(self, station: Subject[Observer], baseline_pressure: Optional[float] = None) -> None:
        self._state = PressureForecast(baseline_pressure)
        self.weather_station = station
        self.weather_station.register_observer(self)

    def update(self, data: WeatherData) -> None:
        self._state.record(data.pressure)
        logger.debug(self.display())

    def display(self) -> str:
        return self._state.render()
