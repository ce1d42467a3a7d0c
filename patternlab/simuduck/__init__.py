"""
SimUDuck: the Strategy demo.

Ducks delegate ``perform_fly`` to an interchangeable ``FlyBehaviour``.
"""
from patternlab.simuduck.behaviours import FLY_BEHAVIOURS, FlyBehaviour, FlyNoWay, FlyWithWings
from patternlab.simuduck.ducks import (
    Duck,
    MallardDuck,
    RedheadDuck,
    RubberDuck,
    UnknownDuckError,
    WoodenDuck,
    available_ducks,
    create_duck,
)

__all__ = [
    "FLY_BEHAVIOURS",
    "FlyBehaviour",
    "FlyNoWay",
    "FlyWithWings",
    "Duck",
    "MallardDuck",
    "RedheadDuck",
    "RubberDuck",
    "UnknownDuckError",
    "WoodenDuck",
    "available_ducks",
    "create_duck",
]
