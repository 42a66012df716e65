"""Calendar arithmetic for execution dates"""

from datetime import date, datetime, timezone
from typing import Tuple


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule"""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, accounting for leap years"""
    month_days = [31, 29 if is_leap_year(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    return month_days[month - 1]


def utc_today() -> date:
    """Current calendar date in UTC"""
    return datetime.now(timezone.utc).date()


def split_iso_date(value: str) -> Tuple[int, int, int]:
    """Split an already validated YYYY-MM-DD string into (year, month, day)"""
    year, month, day = value.split("-")
    return int(year), int(month), int(day)


def compare_to_day(value: str, reference: date) -> int:
    """
    Compare a YYYY-MM-DD string against a reference calendar date.

    Compares year, then month, then day. Time of day never matters.

    Returns:
        -1 if value is earlier, 0 if same day, 1 if later
    """
    parts = split_iso_date(value)
    ref = (reference.year, reference.month, reference.day)
    if parts < ref:
        return -1
    if parts > ref:
        return 1
    return 0
