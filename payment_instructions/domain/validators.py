"""Field-level predicates for amounts, currencies, account ids and dates"""

from typing import Optional
from payment_instructions.utils.date_utils import days_in_month

SUPPORTED_CURRENCIES = ("NGN", "USD", "GBP", "GHS")

ACCOUNT_ID_SYMBOLS = "-.@"


def _is_ascii_digits(value: str) -> bool:
    return value != "" and all("0" <= ch <= "9" for ch in value)


def is_positive_integer(token: Optional[str]) -> bool:
    """Digits only (no sign, no decimal point) and greater than zero"""
    if not token or not _is_ascii_digits(token):
        return False
    return int(token) > 0


def is_supported_currency(token: Optional[str]) -> bool:
    return bool(token) and token.upper() in SUPPORTED_CURRENCIES


def is_valid_account_id(token: Optional[str]) -> bool:
    """ASCII letters, digits, '-', '.' and '@' only"""
    if not token:
        return False
    for ch in token:
        if not (ch.isascii() and ch.isalnum()) and ch not in ACCOUNT_ID_SYMBOLS:
            return False
    return True


def is_valid_date(value: Optional[str]) -> bool:
    """
    Strict YYYY-MM-DD check.

    4/2/2 digit groups, month in 1..12 and day within the month length
    (leap years included).
    """
    if not value:
        return False

    parts = value.split("-")
    if len(parts) != 3:
        return False

    year_str, month_str, day_str = parts
    if len(year_str) != 4 or len(month_str) != 2 or len(day_str) != 2:
        return False
    if not all(_is_ascii_digits(part) for part in parts):
        return False

    year, month, day = int(year_str), int(month_str), int(day_str)
    if month < 1 or month > 12:
        return False

    return 1 <= day <= days_in_month(year, month)
