"""
Base beverages for the StarBuzz ordering system.

Every beverage reports a description and a cost. Prices are held in whole
cents so that the totals of a long condiment chain stay exact; ``cost()``
converts to dollars only at the edge.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional


class Beverage(ABC):
    """A drink that can be served as-is or wrapped in condiments."""

    name: ClassVar[str] = ""

    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def cost_cents(self) -> int:
        ...

    def cost(self) -> float:
        """Return the price in dollars."""
        return self.cost_cents() / 100

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description()!r} {self.cost():.2f}>"


class Coffee(Beverage):
    """
    A plain brewed coffee with a fixed description and price.

    Subclasses declare their menu ``name`` and fill in the abstract
    ``DESCRIPTION`` and ``PRICE_CENTS`` with class constants. A price and
    display name loaded from the menu can be passed in to override them.
    """

    @property
    @abstractmethod
    def DESCRIPTION(self) -> str:
        ...

    @property
    @abstractmethod
    def PRICE_CENTS(self) -> int:
        ...

    def __init__(self, price_cents: Optional[int] = None, description: Optional[str] = None) -> None:
        if price_cents is not None and price_cents < 0:
            raise ValueError("price_cents must be non-negative")
        self._price_cents = self.PRICE_CENTS if price_cents is None else price_cents
        self._description = description or self.DESCRIPTION

    def description(self) -> str:
        return self._description

    def cost_cents(self) -> int:
        return self._price_cents


class HouseBlend(Coffee):
    name = "house_blend"
    DESCRIPTION = "House Blend"
    PRICE_CENTS = 89


class DarkRoast(Coffee):
    name = "dark_roast"
    DESCRIPTION = "Dark Roast"
    PRICE_CENTS = 99


BEVERAGE_TYPES: dict[str, type[Coffee]] = {cls.name: cls for cls in (HouseBlend, DarkRoast)}
