"""Money parsing and formatting utilities.

Amounts are stored and transmitted as decimal strings. They are converted to
``Decimal`` only for arithmetic, never to ``float``.
"""
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from fintrack.constants import CURRENCIES, ZERO_DECIMAL_CURRENCIES

ZERO = Decimal("0")

# Plain notation only: up to 12 integer digits and 2 fractional digits
AMOUNT_PATTERN = re.compile(r"^\d{1,12}(\.\d{1,2})?$")


def parse_amount(value: Union[str, Decimal, int]) -> Decimal:
    """
    Parse a decimal-string amount.

    Args:
        value: Amount such as "12.50"

    Returns:
        Decimal value

    Raises:
        ValueError: If the value is not a finite decimal number
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip()
        if not text:
            raise ValueError("Amount is required")
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}")

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def validate_amount(value: str, allow_zero: bool = False) -> str:
    """Check an amount string and return it unchanged (apart from whitespace)."""
    amount = parse_amount(value)
    if allow_zero and amount < 0:
        raise ValueError("Amount must not be negative")
    if not allow_zero and amount <= 0:
        raise ValueError("Amount must be greater than 0")

    text = str(value).strip()
    if not AMOUNT_PATTERN.match(text):
        raise ValueError(
            "Amount must be a plain decimal with at most 12 integer digits and 2 decimal places"
        )
    return text


def add_amounts(a: str, b: str) -> str:
    """Add two decimal strings, returning a plain decimal string."""
    return format(parse_amount(a) + parse_amount(b), "f")


def format_currency(amount: Union[str, Decimal], currency: str = "USD") -> str:
    """
    Format an amount for display, e.g. ``Decimal("3000") -> "$3,000.00"``.

    Unknown currency codes are shown as a code prefix ("CHF 12.00").
    """
    value = parse_amount(amount)
    places = 0 if currency in ZERO_DECIMAL_CURRENCIES else 2
    quantized = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

    if currency in CURRENCIES:
        symbol = CURRENCIES[currency][1]
    else:
        symbol = f"{currency} "

    sign = "-" if quantized < 0 else ""
    return f"{sign}{symbol}{abs(quantized):,.{places}f}"
