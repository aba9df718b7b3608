from .money import parse_amount, validate_amount, add_amounts, format_currency
from .dates import parse_date, current_month, validate_month

__all__ = [
    "parse_amount",
    "validate_amount",
    "add_amounts",
    "format_currency",
    "parse_date",
    "current_month",
    "validate_month",
]
