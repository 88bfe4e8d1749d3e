"""
Session Controller: The interactive menu loop

Reads menu choices, validates input and runs the insert / buy /
change / exit transactions against the Inventory and Wallet.
"""

import logging
from typing import Dict, Optional

from .combo import suggest
from .errors import (
    EndOfInput,
    InsufficientCredit,
    InvalidInput,
    InvalidMenuOption,
    NoChange,
    NoCredit,
    OutOfStock,
    UnknownCode,
    VendingError,
)
from .inventory import Inventory, Item
from .state_machine import MenuOption, SessionState, StateMachine
from .wallet import Wallet


class SessionController:
    """
    One user's session at the machine

    Every purchase check runs before any state changes, so a rejected
    transaction leaves credit and stock exactly as they were.
    """

    def __init__(self, console,
                 inventory: Optional[Inventory] = None,
                 wallet: Optional[Wallet] = None):
        """
        Initialize Session Controller

        Args:
            console: Terminal I/O exposing read_int() and a renderer
            inventory: Product catalog (default: seeded catalog)
            wallet: Credit holder (default: empty wallet)
        """
        self.logger = logging.getLogger(__name__)

        self.inventory = inventory if inventory is not None else Inventory()
        self.wallet = wallet if wallet is not None else Wallet()
        self.console = console
        self.renderer = self.console.renderer

        self.state_machine = StateMachine()
        self.state_machine.register_callback(SessionState.EXITED, self._on_exit)

        self.handlers = {
            MenuOption.INSERT_MONEY: self.insert_money,
            MenuOption.BUY_ITEM: self.buy_item,
            MenuOption.RETURN_CHANGE: self.return_change,
            MenuOption.EXIT: self.exit,
        }

    def run(self) -> int:
        """
        Main loop, until Exit is chosen or input runs out

        Returns:
            Process exit status
        """
        self.logger.info("Session started")

        while self.state_machine.is_running():
            self.renderer.menu(self.wallet.balance())

            try:
                choice = self.console.read_int()
                self.handle_choice(choice)
            except InvalidInput as e:
                self._reject(e, "Try again.")
            except EndOfInput:
                self.logger.info("End of input, closing session")
                self.renderer.line()
                self.exit()

        return 0

    def handle_choice(self, choice: int):
        """
        Dispatch one menu choice

        Raises:
            EndOfInput: If input ran out inside a sub-prompt
        """
        try:
            option = MenuOption(choice)
        except ValueError:
            self._reject(InvalidMenuOption(choice))
            return

        self.handlers[option]()

    def insert_money(self):
        self.renderer.line()
        self.renderer.prompt("Enter the value in pence (example 200 = GBP 2.00): ")

        try:
            value = self.console.read_int()
        except InvalidInput as e:
            self._reject(e, "No money added.")
            return

        try:
            self.wallet.deposit(value)
        except VendingError as e:
            self._reject(e)
            return

        self.renderer.deposit_accepted(self.wallet.balance())

    def buy_item(self):
        if self.wallet.balance() <= 0:
            self.renderer.line()
            self._reject(NoCredit())
            return

        self.renderer.catalog(self.inventory.list_items())
        self.renderer.prompt("Enter product code: ")

        try:
            code = self.console.read_int()
        except InvalidInput as e:
            self._reject(e, "Try again.")
            return

        try:
            item = self.select_item(code)
        except VendingError as e:
            self._reject(e)
            return

        self.wallet.debit(item.price)
        self.inventory.decrement(item)

        self.logger.info("Sold %d (%s) for %d", item.code, item.name, item.price)
        self.renderer.dispensed(item, self.wallet.balance(), suggest(item.category))

    def select_item(self, code: int) -> Item:
        """
        Check every purchase precondition without mutating anything

        Args:
            code: Product code typed by the user

        Returns:
            The item that can be sold

        Raises:
            NoCredit, UnknownCode, OutOfStock, InsufficientCredit
        """
        balance = self.wallet.balance()
        if balance <= 0:
            raise NoCredit()

        item = self.inventory.find(code)
        if item is None:
            raise UnknownCode(code)
        if item.stock <= 0:
            raise OutOfStock(item.name)
        if balance < item.price:
            raise InsufficientCredit(missing=item.price - balance, name=item.name)

        return item

    def return_change(self):
        if self.wallet.balance() <= 0:
            self.renderer.line()
            self._reject(NoChange())
            return

        self.renderer.change_returned(self.wallet.drain())

    def exit(self):
        if self.wallet.balance() > 0:
            self.renderer.line()
            self.renderer.line("You still have credit.")
            self.return_change()

        self.renderer.farewell()
        self.state_machine.transition_to(SessionState.EXITED, self.totals())

    def totals(self) -> Dict[str, int]:
        """Money flow of the session so far, in pence"""
        return {
            'deposited': self.wallet.total_deposited,
            'sold': self.inventory.get_total_sales(),
            'returned': self.wallet.total_returned,
            'credit': self.wallet.balance(),
        }

    def _reject(self, error: VendingError, tail: Optional[str] = None):
        message = str(error) if tail is None else f"{error} {tail}"
        self.logger.info("Rejected: %s (%s)", type(error).__name__, message.replace("\n", " "))
        self.renderer.line(message)

    def _on_exit(self, totals: Optional[Dict]):
        self.inventory.log_summary()
        if totals:
            self.logger.info("Deposited %d, sold %d, returned %d, credit %d",
                             totals['deposited'], totals['sold'],
                             totals['returned'], totals['credit'])
