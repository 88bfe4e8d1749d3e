"""
Inventory tests: catalog seeding, lookup and dispensing
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from vending_core.errors import OutOfStock, UnknownCode
from vending_core.inventory import Category, Inventory, Item, SEED_CATALOG


def test_seeded_catalog_order_and_values():
    inventory = Inventory()
    items = inventory.list_items()

    assert inventory.codes() == (101, 102, 201, 202, 301, 302)
    assert [(i.code, i.name, i.category, i.price, i.stock) for i in items] == list(SEED_CATALOG)
    assert items[0].name == "Water 500ml"
    assert items[-1].category is Category.CHOCOLATE


def test_each_inventory_gets_its_own_items():
    first = Inventory()
    second = Inventory()

    first.decrement(first.find(101))

    assert first.find(101).stock == 4
    assert second.find(101).stock == 5


def test_find_returns_live_entry_or_none():
    inventory = Inventory()

    item = inventory.find(202)
    assert item is inventory.list_items()[3]
    assert inventory.find(999) is None


def test_decrement_reduces_only_that_item():
    inventory = Inventory()
    before = {i.code: i.stock for i in inventory.list_items()}

    inventory.decrement(inventory.find(201))

    after = {i.code: i.stock for i in inventory.list_items()}
    assert after[201] == before[201] - 1
    assert {c: s for c, s in after.items() if c != 201} == \
        {c: s for c, s in before.items() if c != 201}


def test_decrement_never_goes_negative():
    inventory = Inventory([Item(1, "Gum", Category.SNACK, 50, 1)])
    gum = inventory.find(1)

    inventory.decrement(gum)
    with pytest.raises(OutOfStock) as excinfo:
        inventory.decrement(gum)

    assert gum.stock == 0
    assert str(excinfo.value) == 'Sorry, "Gum"is out of stock.'
    assert len(inventory.history) == 1


def test_decrement_rejects_foreign_item():
    inventory = Inventory()
    stranger = Item(101, "Water 500ml", Category.DRINK, 100, 5)

    with pytest.raises(UnknownCode):
        inventory.decrement(stranger)

    assert inventory.find(101).stock == 5


@pytest.mark.parametrize("field, value", [
    ("code", 999),
    ("name", "Free Water"),
    ("category", Category.SNACK),
    ("price", 1),
])
def test_item_identity_is_read_only(field, value):
    inventory = Inventory()
    water = inventory.find(101)

    with pytest.raises(AttributeError):
        setattr(water, field, value)

    assert (water.code, water.name, water.category, water.price) == \
        (101, "Water 500ml", Category.DRINK, 100)


def test_sales_history_and_summary():
    inventory = Inventory()
    inventory.decrement(inventory.find(101))
    inventory.decrement(inventory.find(101))
    inventory.decrement(inventory.find(302))

    assert inventory.get_sold_summary() == {101: 2, 302: 1}
    assert inventory.get_total_sales() == 100 + 100 + 450
    assert inventory.history[-1]['name'] == "White Chocolate Bar"


@pytest.mark.parametrize("items, message", [
    ([Item(1, "A", Category.DRINK, 10, 1), Item(1, "B", Category.SNACK, 10, 1)], "Duplicate"),
    ([Item(0, "A", Category.DRINK, 10, 1)], "positive"),
    ([Item(1, " ", Category.DRINK, 10, 1)], "empty name"),
    ([Item(1, "A", "Drink", 10, 1)], "category"),
    ([Item(1, "A", Category.DRINK, 0, 1)], "price"),
    ([Item(1, "A", Category.DRINK, 10, -1)], "negative stock"),
])
def test_malformed_catalog_is_rejected(items, message):
    with pytest.raises(ValueError, match=message):
        Inventory(items)
