"""Enumerations for chronoform type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenSymbol(StrEnum):
    """Pattern letters recognized by the pattern compiler.

    The set is closed: the compiler emits token segments only for members of
    this enum, and both engines dispatch on it. Any other letter in a pattern
    is literal text.
    """

    ERA = "G"
    """Era designator: AD, Anno Domini, A"""

    YEAR = "y"
    """Calendar year: 2024, 24, 0024"""

    MONTH = "M"
    """Month: 1, 01, Jan, January, J"""

    DAY = "d"
    """Day of month: 5, 05"""

    DAY_OF_YEAR = "D"
    """Day of year: 1, 032, 366"""

    WEEKDAY = "E"
    """Day of week name: Mon, Monday, M"""

    HOUR = "H"
    """Hour of day 0-23"""

    HOUR12 = "h"
    """Hour of half-day 1-12"""

    MINUTE = "m"
    """Minute 0-59"""

    SECOND = "s"
    """Second 0-59"""

    FRACTION = "S"
    """Fractional second, truncated to milliseconds"""

    DAY_PERIOD = "a"
    """AM/PM marker"""


class LocaleWidth(StrEnum):
    """Rendering width of a locale name.

    StrEnum provides automatic string conversion: str(LocaleWidth.WIDE) == "wide"
    """

    NARROW = "narrow"
    """Shortest form: J, M, A"""

    ABBREVIATED = "abbreviated"
    """Abbreviated form: Jan, Mon, AD"""

    WIDE = "wide"
    """Full form: January, Monday, Anno Domini"""


class TimeUnit(StrEnum):
    """Calendar unit used by arithmetic, truncation and comparison helpers.

    Members are ordered from the largest to the smallest unit.
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"


__all__ = [
    "LocaleWidth",
    "TimeUnit",
    "TokenSymbol",
]
