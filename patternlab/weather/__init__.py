"""
Weather-O-Rama: the Observer demo.

Two flavours of the same station are provided. In ``push`` the station hands
each observer the new ``WeatherData``; in ``pull`` observers are only poked
and read the values they need from the station.
"""
from patternlab.weather import pull, push
from patternlab.weather.base import BaseWeatherStation, Display, Subject
from patternlab.weather.models import WeatherData

__all__ = ["pull", "push", "BaseWeatherStation", "Display", "Subject", "WeatherData"]
