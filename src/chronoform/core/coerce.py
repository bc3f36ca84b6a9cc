"""Coercion of loosely typed inputs to CalendarDateTime.

Every public operation that takes a date accepts the DateInput union and
funnels it through to_date(). Coercion never raises: unsupported inputs
become INVALID_DATE.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias
from datetime import date, datetime

from .validators import is_valid_number
from .value import INVALID_DATE, CalendarDateTime

__all__ = ["DateInput", "to_date"]

DateInput: TypeAlias = CalendarDateTime | datetime | date | int | float | str


def to_date(value: object) -> CalendarDateTime:
    """Coerce a supported input to CalendarDateTime.

    Accepted inputs:
        - CalendarDateTime: returned unchanged (invalid stays invalid)
        - datetime / date: via CalendarDateTime.from_datetime()
        - int / float: milliseconds on the local timeline (bool rejected)
        - str: ISO 8601 via datetime.fromisoformat()

    Args:
        value: Input to coerce

    Returns:
        CalendarDateTime, or INVALID_DATE for unsupported or malformed input

    Examples:
        >>> to_date(datetime(2024, 1, 15, 9, 30)).hour
        9
        >>> to_date("2024-01-15").day
        15
        >>> to_date("not a date").is_valid
        False
        >>> to_date(None) is INVALID_DATE
        True
    """
    if isinstance(value, CalendarDateTime):
        return value
    if isinstance(value, (datetime, date)):
        return CalendarDateTime.from_datetime(value)
    if is_valid_number(value):
        return CalendarDateTime.from_epoch_milliseconds(value)
    if isinstance(value, str):
        try:
            return CalendarDateTime.from_datetime(datetime.fromisoformat(value))
        except ValueError:
            return INVALID_DATE
    return INVALID_DATE
