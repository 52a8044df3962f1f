import re
from decimal import Decimal

from utils.errors import PageAssertionError

MONEY_PATTERN = re.compile(r"\$(\d+(?:\.\d+)?)")


def parse_money(text: str) -> Decimal:
    """
    Extract the amount from a rendered price, e.g. 'Item total: $39.98' -> Decimal('39.98').

    Raises:
        PageAssertionError: If the text holds no dollar amount.
    """
    match = MONEY_PATTERN.search(text)
    if not match:
        raise PageAssertionError('price text', 'a $ amount', text)
    return Decimal(match.group(1))
