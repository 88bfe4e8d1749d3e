"""
Wallet: Credit inserted by the user

Holds a single non-negative balance in pence.
"""

import logging

from .errors import InsufficientCredit, NonPositiveAmount


def _check_amount(value: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Money amounts must be integer pence, got {type(value).__name__}")
    if value <= 0:
        raise NonPositiveAmount(value)


class Wallet:
    """
    Inserted credit

    Besides the balance, keeps running totals so that
    total_spent + balance + total_returned == total_deposited.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._balance = 0

        self.total_deposited = 0
        self.total_spent = 0
        self.total_returned = 0

    def balance(self) -> int:
        return self._balance

    def deposit(self, value: int):
        """
        Add credit

        Args:
            value: Amount in pence, must be > 0

        Raises:
            NonPositiveAmount: If value <= 0
        """
        _check_amount(value)

        self._balance += value
        self.total_deposited += value

        self.logger.info("Deposit %d, balance %d", value, self._balance)

    def debit(self, value: int):
        """
        Take credit for a purchase

        Args:
            value: Amount in pence, must satisfy 0 < value <= balance

        Raises:
            NonPositiveAmount: If value <= 0
            InsufficientCredit: If value exceeds the balance
        """
        _check_amount(value)
        if value > self._balance:
            raise InsufficientCredit(missing=value - self._balance)

        self._balance -= value
        self.total_spent += value

        self.logger.info("Debit %d, balance %d", value, self._balance)

    def drain(self) -> int:
        """
        Return all credit as change

        Returns:
            The balance before draining (0 if empty)
        """
        amount = self._balance
        self._balance = 0
        self.total_returned += amount

        if amount:
            self.logger.info("Returned %d as change", amount)

        return amount
