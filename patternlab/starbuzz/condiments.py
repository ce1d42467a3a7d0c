"""Condiment decorators that wrap a beverage and add to its cost and description."""
from __future__ import annotations

from abc import abstractmethod
from typing import Optional

from patternlab.starbuzz.beverages import Beverage


class CondimentDecorator(Beverage):
    """Wraps a beverage. Subclasses set ``LABEL`` and ``PRICE_CENTS``."""

    @property
    @abstractmethod
    def LABEL(self) -> str:
        ...

    @property
    @abstractmethod
    def PRICE_CENTS(self) -> int:
        ...

    def __init__(
        self,
        beverage: Beverage,
        price_cents: Optional[int] = None,
        label: Optional[str] = None,
    ) -> None:
        if not isinstance(beverage, Beverage):
            raise TypeError(f"{type(self).__name__} can only wrap a Beverage, got {type(beverage).__name__}")
        if price_cents is not None and price_cents < 0:
            raise ValueError("price_cents must be non-negative")
        self.beverage = beverage
        self._price_cents = self.PRICE_CENTS if price_cents is None else price_cents
        self._label = label or self.LABEL

    def description(self) -> str:
        return f"{self._label} {self.beverage.description()}"

    def cost_cents(self) -> int:
        return self._price_cents + self.beverage.cost_cents()


class SteamedMilk(CondimentDecorator):
    name = "steamed_milk"
    LABEL = "Steamed Milk"
    PRICE_CENTS = 10


class Mocha(CondimentDecorator):
    name = "mocha"
    LABEL = "Mocha"
    PRICE_CENTS = 20


class Whip(CondimentDecorator):
    name = "whip"
    LABEL = "Whipped"
    PRICE_CENTS = 10


CONDIMENT_TYPES: dict[str, type[CondimentDecorator]] = {
    cls.name: cls for cls in (SteamedMilk, Mocha, Whip)
}
