"""
Pull-style weather station: ``update`` carries no data, each observer asks the
station for the measurements it cares about.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from patternlab.weather.base import BaseWeatherStation, Display
from patternlab.weather.displays import CurrentConditions, PressureForecast, TemperatureStatistics

logger = logging.getLogger(__name__)


class Observer(ABC):
    @abstractmethod
    def update(self) -> None:
        ...


class WeatherStation(BaseWeatherStation[Observer]):
    def _notify_one(self, observer: Observer) -> None:
        observer.update()

    def get_temperature(self) -> float:
        return self.weather_data.temperature

    def get_humidity(self) -> float:
        return self.weather_data.humidity

    def get_pressure(self) -> float:
        return self.weather_data.pressure


class CurrentConditionsDisplay(Observer, Display):
    def __init__(self, station: WeatherStation) -> None:
        self._state = CurrentConditions()
        self.weather_station = station
        self.weather_station.register_observer(self)

    def update(self) -> None:
        self._state.record(self.weather_station.get_temperature(), self.weather_station.get_humidity())
        logger.debug(self.display())

    def display(self) -> str:
        return self._state.render()


class StatisticsDisplay(Observer, Display):
    def __init__(self, station: WeatherStation) -> None:
        self._state = TemperatureStatistics()
        self.weather_station = station
        self.weather_station.register_observer(self)

    def update(self) -> None:
        self._state.record(self.weather_station.get_temperature())
        logger.debug(self.display())

    def display(self) -> str:
        return self._state.render()


class ForecastDisplay(Observer, Display):
    def __init__(self, station: WeatherStation, baseline_pressure: Optional[float] = None) -> None:
        self._state = PressureForecast(baseline_pressure)
        self.weather_station = station
        self.weather_station.register_observer(self)

    def update(self) -> None:
        self._state.record(self.weather_station.get_pressure())
        logger.debug(self.display())

    def display(self) -> str:
        return self._state.render()
