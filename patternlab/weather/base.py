"""
Observer plumbing shared by the push and pull weather stations.

A station keeps its registered observers in registration order and calls
each of them on every new set of measurements. The two variants differ only
in how an observer is told about the change, see ``_notify_one``.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from patternlab.config import get_settings
from patternlab.core.logging import EventLog
from patternlab.weather.models import WeatherData

logger = logging.getLogger(__name__)

ObserverT = TypeVar("ObserverT")


class Subject(ABC, Generic[ObserverT]):
    @abstractmethod
    def register_observer(self, o: ObserverT) -> None:
        ...

    @abstractmethod
    def remove_observer(self, o: ObserverT) -> None:
        ...

    @abstractmethod
    def notify_observers(self) -> None:
        ...


class Display(ABC):
    @abstractmethod
    def display(self) -> str:
        ...


class BaseWeatherStation(Subject[ObserverT]):
    def __init__(self, ring_size: Optional[int] = None) -> None:
        self._observers: list[ObserverT] = []
        self._weather_data = WeatherData()
        self.events = EventLog(logger, max_entries=ring_size or get_settings().log_ring_size)

    @property
    def weather_data(self) -> WeatherData:
        return self._weather_data

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self._weather_data = WeatherData(temperature=temperature, humidity=humidity, pressure=pressure)
        self.events.log("measurements_changed", self._weather_data.model_dump())
        self.notify_observers()

    def register_observer(self, o: ObserverT) -> None:
        if any(existing is o for existing in self._observers):
            self.events.log("observer_already_registered", _describe(o), level=logging.DEBUG)
            return
        self._observers.append(o)
        self.events.log("observer_registered", _describe(o))

    def remove_observer(self, o: ObserverT) -> None:
        remaining = [existing for existing in self._observers if existing is not o]
        if len(remaining) != len(self._observers):
            self.events.log("observer_removed", _describe(o))
        self._observers = remaining

    def notify_observers(self) -> None:
        # Iterate over a copy: observers may unsubscribe while being notified.
        observers = list(self._observers)
        for observer in observers:
            self._notify_one(observer)
        self.events.log("observers_notified", {"count": len(observers)}, level=logging.DEBUG)

    def observers_count(self) -> int:
        return len(self._observers)

    def get_events(self) -> list[dict[str, Any]]:
        return self.events.get_events()

    @abstractmethod
    def _notify_one(self, observer: ObserverT) -> None:
        ...


def _describe(o: object) -> dict[str, Any]:
    return {"observer": type(o).__name__}
