"""
Inventory: Fixed product catalog of the vending machine

Items are seeded once at construction. The only runtime mutation is
dispensing a single unit, which is recorded in the sales history.
"""

import logging
import time
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import OutOfStock, UnknownCode


class Category(Enum):
    """Product categories"""
    DRINK = "Drink"
    SNACK = "Snack"
    CHOCOLATE = "Chocolate"


@dataclass(frozen=True)
class Product:
    """What is sold: identity and price in pence"""
    code: int
    name: str
    category: Category
    price: int


class Item:
    """
    A product slot: a fixed Product plus the units left

    Only stock changes; code, name, category and price are read-only.
    """

    def __init__(self, code: int, name: str, category: Category, price: int, stock: int):
        self.product = Product(code, name, category, price)
        self.stock = stock

    @property
    def code(self) -> int:
        return self.product.code

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def category(self) -> Category:
        return self.product.category

    @property
    def price(self) -> int:
        return self.product.price

    def __repr__(self):
        return (f"Item(code={self.code}, name={self.name!r}, category={self.category!r}, "
                f"price={self.price}, stock={self.stock})")


# (code, name, category, price in pence, stock)
SEED_CATALOG = (
    (101, "Water 500ml", Category.DRINK, 100, 5),
    (102, "Coca Cola Can", Category.DRINK, 300, 4),
    (201, "Potato Crisps", Category.SNACK, 350, 6),
    (202, "Salted Peanuts", Category.SNACK, 300, 5),
    (301, "Milk Chocolate Bar", Category.CHOCOLATE, 400, 5),
    (302, "White Chocolate Bar", Category.CHOCOLATE, 450, 4),
)


def seeded_items() -> List[Item]:
    """Fresh Item objects for the standard catalog"""
    return [Item(*row) for row in SEED_CATALOG]


class Inventory:
    """
    Manages the product catalog

    Features:
    - Keeps items in display order
    - Looks items up by code
    - Dispenses one unit at a time, never below zero
    - Tracks dispense history for the end-of-session summary
    """

    def __init__(self, items: Optional[Iterable[Item]] = None):
        """
        Initialize Inventory

        Args:
            items: Catalog entries in display order (default: seeded catalog)

        Raises:
            ValueError: If codes repeat or an entry is malformed
        """
        self.logger = logging.getLogger(__name__)

        self._items: List[Item] = list(items) if items is not None else seeded_items()
        self._validate()

        # Dispense records: {code, name, price, timestamp}
        self.history = []

        self.logger.debug("Inventory loaded with %d items", len(self._items))

    def _validate(self):
        seen = set()
        for item in self._items:
            if item.code <= 0:
                raise ValueError(f"Item code must be positive: {item.code}")
            if item.code in seen:
                raise ValueError(f"Duplicate item code: {item.code}")
            if not item.name.strip():
                raise ValueError(f"Item {item.code} has an empty name")
            if not isinstance(item.category, Category):
                raise ValueError(f"Item {item.code} has an unknown category: {item.category!r}")
            if item.price <= 0:
                raise ValueError(f"Item {item.code} must have a positive price")
            if item.stock < 0:
                raise ValueError(f"Item {item.code} has negative stock")
            seen.add(item.code)

    def list_items(self) -> Tuple[Item, ...]:
        """Items in display order, with their current stock"""
        return tuple(self._items)

    def codes(self) -> Tuple[int, ...]:
        return tuple(item.code for item in self._items)

    def find(self, code: int) -> Optional[Item]:
        """
        Look up an item by code

        Args:
            code: Product code typed by the user

        Returns:
            The live catalog entry, or None if no item has that code
        """
        for item in self._items:
            if item.code == code:
                return item
        return None

    def decrement(self, item: Item):
        """
        Dispense one unit of an item

        Args:
            item: Entry previously returned by find()

        Raises:
            UnknownCode: If the item is not part of this inventory
            OutOfStock: If no units are left
        """
        if not any(entry is item for entry in self._items):
            raise UnknownCode(item.code)
        if item.stock < 1:
            self.logger.warning("Dispense refused: %s has no stock", item.name)
            raise OutOfStock(item.name)

        item.stock -= 1

        self.history.append({
            'code': item.code,
            'name': item.name,
            'price': item.price,
            'timestamp': time.time()
        })

        self.logger.info("Dispensed %d (%s), %d left", item.code, item.name, item.stock)

    def get_sold_summary(self) -> Dict[int, int]:
        """
        Units dispensed per product code

        Returns:
            Dictionary mapping code -> units sold
        """
        summary = defaultdict(int)
        for record in self.history:
            summary[record['code']] += 1
        return dict(summary)

    def get_total_sales(self) -> int:
        """Value of everything dispensed, in pence"""
        return sum(record['price'] for record in self.history)

    def log_summary(self):
        """Log remaining stock and units sold"""
        self.logger.info("=" * 58)
        self.logger.info("INVENTORY SUMMARY")
        self.logger.info("=" * 58)

        sold = self.get_sold_summary()
        for item in self._items:
            self.logger.info("%d %-22s stock %d, sold %d",
                             item.code, item.name, item.stock, sold.get(item.code, 0))

        self.logger.info("=" * 58)
