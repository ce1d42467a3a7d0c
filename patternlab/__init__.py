from patternlab.config import Settings, get_settings
from patternlab.simuduck import Duck, create_duck
from patternlab.starbuzz import Beverage, load_menu, make_beverage
from patternlab.weather import WeatherData, pull, push
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Settings",
    "get_settings",
    "Duck",
    "create_duck",
    "Beverage",
    "load_menu",
    "make_beverage",
    "WeatherData",
    "pull",
    "push",
]

try:
    __version__ = version("patternlab")
except PackageNotFoundError:
    __version__ = "0.0.0"
