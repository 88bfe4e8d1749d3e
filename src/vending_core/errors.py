"""
Vending Errors: Every recoverable failure a session can hit

Each exception carries the message shown to the user as str(exc).
None of them is raised after state has been mutated.
"""

from typing import Optional

from .money import format_money


class VendingError(Exception):
    """Base class for user-facing vending failures"""

    message = ""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidInput(VendingError):
    """A prompt received a token that is not a base-10 integer"""

    message = "Invalid input."

    def __init__(self, token: str = ""):
        self.token = token
        super().__init__()


class EndOfInput(VendingError):
    """Standard input is exhausted"""

    message = "End of input."


class NonPositiveAmount(VendingError):
    message = "Value must be greater than zero."

    def __init__(self, value: int = 0):
        self.value = value
        super().__init__()


class NoCredit(VendingError):
    message = "You must insert money before buying."


class UnknownCode(VendingError):
    message = "Invalid code. Product not found."

    def __init__(self, code: int):
        self.code = code
        super().__init__()


class OutOfStock(VendingError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Sorry, "{name}"is out of stock.')


class InsufficientCredit(VendingError):
    """
    Credit does not cover a debit

    Args:
        missing: Amount still required (pence)
        name: Product being bought, if the debit is a purchase
    """

    def __init__(self, missing: int, name: Optional[str] = None):
        self.missing = missing
        self.name = name
        lines = []
        if name is not None:
            lines.append(f'Not enough credit to buy "{name}".')
        lines.append(f"Missing {format_money(missing)}")
        super().__init__("\n".join(lines))


class NoChange(VendingError):
    message = "No change available."


class InvalidMenuOption(VendingError):
    message = "Invalid option. Choose 1 to 4."

    def __init__(self, choice: int):
        self.choice = choice
        super().__init__()
