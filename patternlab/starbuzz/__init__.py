"""
StarBuzz coffee: the Decorator demo.

Base beverages (``HouseBlend``, ``DarkRoast``) are wrapped by condiment
decorators (``SteamedMilk``, ``Mocha``, ``Whip``); each wrapper adds its own
price and prefixes its label to the description of what it wraps.
"""
from patternlab.starbuzz.beverages import Beverage, Coffee, DarkRoast, HouseBlend
from patternlab.starbuzz.condiments import CondimentDecorator, Mocha, SteamedMilk, Whip
from patternlab.starbuzz.factory import make_beverage
from patternlab.starbuzz.menu import Menu, MenuError, MenuItem, MenuItemKind, MenuItemNotFoundError, load_menu

__all__ = [
    "Beverage",
    "Coffee",
    "DarkRoast",
    "HouseBlend",
    "CondimentDecorator",
    "Mocha",
    "SteamedMilk",
    "Whip",
    "make_beverage",
    "Menu",
    "MenuError",
    "MenuItem",
    "MenuItemKind",
    "MenuItemNotFoundError",
    "load_menu",
]
