"""
StarBuzz menu: the names, display names and prices customers can order.

The menu is read from a JSON document with a ``beverages`` and a
``condiments`` object, each mapping a snake_case name to its
``display_name`` and ``price_cents``. Every name must have a matching
beverage or condiment class.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from patternlab.config import get_settings
from patternlab.resources import load_menu_data
from patternlab.starbuzz.beverages import BEVERAGE_TYPES
from patternlab.starbuzz.condiments import CONDIMENT_TYPES


class MenuError(ValueError):
    pass


class MenuItemNotFoundError(KeyError):
    pass


class MenuItemKind(str, Enum):
    BEVERAGE = "beverage"
    CONDIMENT = "condiment"


class MenuItem(BaseModel):
    """
    A single orderable item.

    Attributes:
        name: Machine-readable snake_case name.
        display_name: Text used when describing the drink.
        price_cents: Price in whole cents.
        kind: Whether this is a base beverage or a condiment.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    price_cents: int = Field(ge=0)
    kind: MenuItemKind

    @property
    def price(self) -> float:
        return self.price_cents / 100


class MenuEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    display_name: str
    price_cents: int = Field(ge=0)


class MenuDocument(BaseModel):
    """Shape of a menu JSON file."""

    currency: str = "USD"
    beverages: dict[str, MenuEntry] = Field(default_factory=dict)
    condiments: dict[str, MenuEntry] = Field(default_factory=dict)


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class Menu:
    """Read-only lookup over the menu items."""

    def __init__(self, items: Iterable[MenuItem], currency: str = "USD") -> None:
        self.currency = currency
        self._items: dict[str, MenuItem] = {}
        for item in items:
            if item.name in self._items:
                raise MenuError(f"Duplicate menu item '{item.name}'")
            self._items[item.name] = item

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Menu":
        if not data:
            raise MenuError("Menu is empty")
        try:
            document = MenuDocument.model_validate(data)
        except ValidationError as exc:
            raise MenuError(f"Invalid menu: {exc}") from exc

        known = {MenuItemKind.BEVERAGE: BEVERAGE_TYPES, MenuItemKind.CONDIMENT: CONDIMENT_TYPES}
        items: list[MenuItem] = []
        for section, entries in ((MenuItemKind.BEVERAGE, document.beverages), (MenuItemKind.CONDIMENT, document.condiments)):
            for raw_name, entry in entries.items():
                name = _normalize_name(raw_name)
                if name not in known[section]:
                    raise MenuError(f"No recipe for {section.value} '{raw_name}'. Known: {sorted(known[section])}")
                items.append(
                    MenuItem(name=name, kind=section, display_name=entry.display_name, price_cents=entry.price_cents)
                )
        if not items:
            raise MenuError("Menu has no beverages or condiments")
        return cls(items, currency=document.currency)

    def get(self, name: str) -> Optional[MenuItem]:
        return self._items.get(_normalize_name(name))

    def require(self, name: str, kind: Optional[MenuItemKind] = None) -> MenuItem:
        """
        Look up an item, raising when it is missing or of the wrong kind.

        Args:
            name: The item name (case and surrounding whitespace ignored).
            kind: Restrict the lookup to beverages or condiments.

        Returns:
            The matching ``MenuItem``.

        Raises:
            MenuItemNotFoundError: The name is not on the menu.
        """
        item = self.get(name)
        if item is None or (kind is not None and item.kind != kind):
            available = self.names(kind)
            label = kind.value if kind else "item"
            raise MenuItemNotFoundError(f"Unknown {label} '{name}'. Available: {available}")
        return item

    def names(self, kind: Optional[MenuItemKind] = None) -> list[str]:
        return sorted(name for name, item in self._items.items() if kind is None or item.kind == kind)

    def beverages(self) -> list[MenuItem]:
        return [self._items[name] for name in self.names(MenuItemKind.BEVERAGE)]

    def condiments(self) -> list[MenuItem]:
        return [self._items[name] for name in self.names(MenuItemKind.CONDIMENT)]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize_name(name) in self._items


def load_menu(path: Optional[str] = None) -> Menu:
    """Load the configured menu, or the one at ``path`` when given."""
    if path is None:
        path = get_settings().menu_path
    try:
        data = load_menu_data(path)
    except FileNotFoundError as exc:
        raise MenuError(f"Menu file not found: {path}") from exc
    except OSError as exc:
        raise MenuError(f"Menu file could not be read: {path}: {exc}") from exc
    except ValueError as exc:
        raise MenuError(f"Menu file is not valid JSON: {path}") from exc
    return Menu.from_dict(data)
