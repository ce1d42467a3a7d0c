"""Tests for the StarBuzz menu and beverage factory."""
import json

import pytest
from pydantic import ValidationError

from patternlab.starbuzz import (
    DarkRoast,
    Menu,
    MenuError,
    MenuItemKind,
    MenuItemNotFoundError,
    Mocha,
    Whip,
    load_menu,
    make_beverage,
)


def _write_menu(tmp_path, data) -> str:
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_packaged_menu_contents():
    menu = load_menu()
    assert len(menu) == 5
    assert [b.name for b in menu.beverages()] == ["dark_roast", "house_blend"]
    assert [c.name for c in menu.condiments()] == ["mocha", "steamed_milk", "whip"]
    assert menu.currency == "USD"


def test_get_item():
    menu = load_menu()
    item = menu.get("dark_roast")
    assert item is not None
    assert item.display_name == "Dark Roast"
    assert item.price_cents == 99
    assert item.price == 0.99
    assert item.kind == MenuItemKind.BEVERAGE


def test_get_normalizes_name():
    menu = load_menu()
    assert menu.get("  Steamed Milk ").name == "steamed_milk"
    assert "Dark-Roast" in menu
    assert "unicorn_latte" not in menu
    assert 42 not in menu


def test_require_unknown_lists_available():
    menu = load_menu()
    with pytest.raises(MenuItemNotFoundError) as excinfo:
        menu.require("unicorn_latte", MenuItemKind.BEVERAGE)
    assert "dark_roast" in str(excinfo.value)


def test_require_wrong_kind():
    menu = load_menu()
    with pytest.raises(MenuItemNotFoundError):
        menu.require("mocha", MenuItemKind.BEVERAGE)


def test_menu_item_is_frozen():
    item = load_menu().get("mocha")
    with pytest.raises(ValidationError):
        item.price_cents = 0


def test_make_beverage_matches_hand_built():
    built = make_beverage("dark_roast", ["mocha", "whip"])
    by_hand = Whip(Mocha(DarkRoast()))
    assert built.description() == by_hand.description() == "Whipped Mocha Dark Roast"
    assert built.cost() == by_hand.cost() == 1.29
    assert isinstance(built, Whip)
    assert isinstance(built.beverage, Mocha)


def test_make_beverage_without_condiments():
    beverage = make_beverage("house_blend")
    assert beverage.description() == "House Blend"
    assert beverage.cost() == 0.89


def test_make_beverage_unknown_condiment():
    with pytest.raises(MenuItemNotFoundError):
        make_beverage("dark_roast", ["sprinkles"])


def test_custom_menu_prices(tmp_path):
    path = _write_menu(tmp_path, {
        "beverages": {"dark_roast": {"display_name": "Dark Roast", "price_cents": 120}},
        "condiments": {"mocha": {"display_name": "Chocolate", "price_cents": 30}},
    })
    menu = load_menu(path)
    beverage = make_beverage("dark_roast", ["mocha"], menu=menu)
    assert beverage.description() == "Chocolate Dark Roast"
    assert beverage.cost() == 1.5


def test_menu_path_from_settings(tmp_path, monkeypatch):
    path = _write_menu(tmp_path, {
        "beverages": {"house_blend": {"display_name": "House", "price_cents": 50}},
    })
    monkeypatch.setenv("PATTERNLAB_MENU_PATH", path)
    menu = load_menu()
    assert menu.names() == ["house_blend"]


def test_negative_price_rejected():
    with pytest.raises(MenuError):
        Menu.from_dict({"beverages": {"dark_roast": {"display_name": "Dark Roast", "price_cents": -1}}})


def test_unknown_recipe_rejected():
    with pytest.raises(MenuError):
        Menu.from_dict({"beverages": {"espresso": {"display_name": "Espresso", "price_cents": 199}}})


def test_empty_menu_rejected():
    with pytest.raises(MenuError):
        Menu.from_dict({})


def test_missing_menu_file(tmp_path):
    with pytest.raises(MenuError):
        load_menu(str(tmp_path / "nope.json"))


def test_invalid_json_menu_file(tmp_path):
    path = tmp_path / "menu.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MenuError):
        load_menu(str(path))


def test_make_beverage_uses_given_empty_menu():
    with pytest.raises(MenuItemNotFoundError):
        make_beverage("dark_roast", menu=Menu([]))


def test_menu_without_items_rejected():
    with pytest.raises(MenuError):
        Menu.from_dict({"currency": "USD", "beverages": {}})


@pytest.mark.parametrize(
    "data",
    [
        {"beverages": ["dark_roast"]},
        {"beverages": {"dark_roast": 5}},
        {"beverages": {"dark_roast": None}},
        {"beverages": {"dark_roast": {"display_name": "Dark Roast", "price_cents": 99, "name": "x"}}},
        {"condiments": {"mocha": {"display_name": "Mocha", "price_cents": 20, "kind": "beverage"}}},
        {"beverages": {"dark_roast": {"price_cents": 99}}},
    ],
)
def test_malformed_menu_rejected(data):
    with pytest.raises(MenuError):
        Menu.from_dict(data)


def test_unreadable_menu_path(tmp_path):
    with pytest.raises(MenuError):
        load_menu(str(tmp_path))
