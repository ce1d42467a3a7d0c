from __future__ import annotations

import logging
from typing import Iterable, Optional

from patternlab.starbuzz.beverages import BEVERAGE_TYPES, Beverage
from patternlab.starbuzz.condiments import CONDIMENT_TYPES
from patternlab.starbuzz.menu import Menu, MenuItemKind, load_menu

logger = logging.getLogger(__name__)


def make_beverage(
    name: str,
    condiments: Iterable[str] = (),
    menu: Optional[Menu] = None,
) -> Beverage:
    """
    Build a beverage from menu names, wrapping it in each condiment in turn.

    The first condiment wraps the base beverage, the last one is outermost:
    ``make_beverage("dark_roast", ["mocha", "whip"])`` is
    ``Whip(Mocha(DarkRoast()))``.

    Args:
        name: The base beverage name, e.g. ``"dark_roast"``.
        condiments: Condiment names applied in order.
        menu: The menu supplying prices and display names. Defaults to the
            configured menu.

    Returns:
        The decorated beverage.
    """
    if menu is None:
        menu = load_menu()
    base = menu.require(name, MenuItemKind.BEVERAGE)
    beverage: Beverage = BEVERAGE_TYPES[base.name](price_cents=base.price_cents, description=base.display_name)
    for condiment_name in condiments:
        item = menu.require(condiment_name, MenuItemKind.CONDIMENT)
        beverage = CONDIMENT_TYPES[item.name](beverage, price_cents=item.price_cents, label=item.display_name)
    logger.debug("built beverage %r", beverage)
    return beverage
