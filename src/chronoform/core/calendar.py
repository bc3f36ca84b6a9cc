"""Proleptic Gregorian calendar arithmetic.

Integer-only conversions between (year, month, day) triples and day counts
relative to 1970-01-01. Years are astronomical (year 0 is 1 BC), so every
function here is total over negative years. Python floor division gives the
correct era for negative inputs without sign adjustments.

All leap-year decisions in chronoform go through is_leap_year().

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "civil_from_days",
    "day_of_week",
    "day_of_year",
    "days_from_civil",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
]

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar.
_EPOCH_OFFSET_DAYS: int = 719_468

# Days in one 400-year Gregorian cycle.
_DAYS_PER_ERA: int = 146_097

# 1970-01-01 was a Thursday (Sunday = 0).
_EPOCH_WEEKDAY: int = 4

_MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if the astronomical year has 366 days.

    Example:
        >>> is_leap_year(2024), is_leap_year(1900), is_leap_year(2000), is_leap_year(0)
        (True, False, True, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, else 365."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in month (1-12) of year.

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}"
        raise ValueError(msg)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01.

    month must be 1-12; day may exceed the month length or be below 1, in
    which case the result rolls into neighbouring months (day 0 is the last
    day of the previous month).

    Example:
        >>> days_from_civil(1970, 1, 1), days_from_civil(2000, 3, 1)
        (0, 11017)
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_PER_ERA + doe - _EPOCH_OFFSET_DAYS


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a (year, month, day) triple.

    Inverse of days_from_civil() for in-range days.

    Example:
        >>> civil_from_days(0), civil_from_days(-719_528)
        ((1970, 1, 1), (0, 1, 1))
    """
    z = days + _EPOCH_OFFSET_DAYS
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def day_of_week(days: int) -> int:
    """Weekday of a day count, 0 = Sunday ... 6 = Saturday."""
    return (days + _EPOCH_WEEKDAY) % 7


def day_of_year(year: int, month: int, day: int) -> int:
    """1-based ordinal of the date within its year."""
    return days_from_civil(year, month, day) - days_from_civil(year, 1, 1) + 1
