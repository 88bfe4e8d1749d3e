"""
Money formatting

All amounts are integer pence. Conversion to pounds happens here only,
with integer division so no float rounding can creep in.
"""

CURRENCY = "GBP"


def format_money(pence: int) -> str:
    """
    Format pence as 'GBP D.CC'

    Args:
        pence: Amount in minor units

    Returns:
        Formatted string, e.g. 350 -> 'GBP 3.50'
    """
    sign = "-" if pence < 0 else ""
    pounds, rest = divmod(abs(pence), 100)
    return f"{CURRENCY} {sign}{pounds}.{rest:02d}"
