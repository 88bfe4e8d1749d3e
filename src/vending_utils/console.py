"""
Console presentation: token input reader and text renderer

The session controller only talks to ConsoleIO; swapping it out
changes the look of the machine without touching the core.
"""

import logging
import re
import sys
from collections import deque
from typing import Iterable, List, Optional, TextIO

from vending_core.errors import EndOfInput, InvalidInput
from vending_core.inventory import Item
from vending_core.money import format_money

CATALOG_TITLE_RULE = "----------------- AVAILABLE ITEMS ------------------------"
HEADER_RULE = "-" * 58
FOOTER_RULE = "=" * 58


class TokenReader:
    """
    Reads whitespace-delimited integers from a text stream

    A successful read consumes one token; the rest of the line stays
    queued for the next prompt. A failed read discards the rest of the
    current line so the next prompt starts on fresh input.
    """

    INTEGER = re.compile(r"[+-]?[0-9]+")

    # 32-bit signed range; anything wider is a parse failure
    MIN_VALUE = -2 ** 31
    MAX_VALUE = 2 ** 31 - 1

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.logger = logging.getLogger(__name__)
        self._pending = deque()

    def read_int(self) -> int:
        """
        Read the next integer token

        Returns:
            Parsed integer

        Raises:
            InvalidInput: Token is not a base-10 integer in the 32-bit
                signed range (line discarded)
            EndOfInput: Stream exhausted
        """
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise EndOfInput()
            self._pending.extend(line.split())

        token = self._pending.popleft()
        value = None
        if self.INTEGER.fullmatch(token):
            try:
                value = int(token)
            except ValueError:
                value = None

        if value is None or not self.MIN_VALUE <= value <= self.MAX_VALUE:
            self.logger.debug("Rejected token %r", token[:40])
            self.discard_line()
            raise InvalidInput(token)

        return value

    def discard_line(self):
        """Drop whatever is left of the current input line"""
        self._pending.clear()


class ConsoleRenderer:
    """Writes menus, tables and messages to a text stream"""

    def __init__(self, stream: Optional[TextIO] = None, title: str = "VENDING MACHINE"):
        self.stream = stream if stream is not None else sys.stdout
        self.title = title

    def write(self, text: str):
        self.stream.write(text)
        self.stream.flush()

    def line(self, text: str = ""):
        self.write(text + "\n")

    def lines(self, texts: Iterable[str]):
        for text in texts:
            self.line(text)

    def prompt(self, text: str):
        self.write(text)

    def menu(self, balance: int):
        self.line()
        self.line(f"==== {self.title} ====")
        self.line(f"Current credit: {format_money(balance)}")
        self.line()
        self.line("1 - Insert money")
        self.line("2 - Buy item")
        self.line("3 - Return change")
        self.line("4 - Exit")
        self.prompt("Choose an option: ")

    def catalog(self, items: Iterable[Item]):
        self.line(CATALOG_TITLE_RULE)
        self.line(f"{'Code':<8}{'Product':<22}{'Category':<12}{'Price':<10}Stock")
        self.line(HEADER_RULE)
        for item in items:
            self.line(self.catalog_row(item))
        self.line(FOOTER_RULE)

    @staticmethod
    def catalog_row(item: Item) -> str:
        return (f"{item.code:<8}{item.name:<22}{item.category.value:<12}"
                f"{format_money(item.price)}  ({item.stock})")

    def deposit_accepted(self, balance: int):
        self.line("Money inserted successfully.")
        self.line(f"Current credit: {format_money(balance)}")

    def dispensed(self, item: Item, balance: int, suggestions: List[str]):
        self.line()
        self.line(f"Dispensing: {item.name}...")
        self.line("Purchase successful.")
        self.line(f"Remaining credit: {format_money(balance)}")
        self.line()
        self.line("Suggested combo:")
        self.lines(suggestions)

    def change_returned(self, amount: int):
        self.line()
        self.line(f"Returning change: {format_money(amount)}")

    def farewell(self):
        self.line()
        self.line("Thank you for using the Vending Machine.")


class ConsoleIO:
    """Reader and renderer bound to one terminal"""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 title: str = "VENDING MACHINE"):
        self.reader = TokenReader(stdin)
        self.renderer = ConsoleRenderer(stdout, title=title)

    def read_int(self) -> int:
        return self.reader.read_int()
