"""Calendar arithmetic.

Adding, subtracting, differencing and truncating date-time values by
calendar unit. Every operation accepts anything to_date() accepts and never
raises for data: invalid dates or non-finite amounts yield INVALID_DATE (or
None from diff()).

Year and month steps are calendar steps: the day is clamped to the length of
the target month, so January 31 plus one month is the last day of February.
Day and smaller steps are fixed-length steps on the local timeline.

Only unit names raise: an unknown unit string is a programmer error
(ValueError from TimeUnit).

Python 3.13+. Zero external dependencies.
"""

import math
from collections.abc import Mapping
from types import MappingProxyType

from chronoform.constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from chronoform.core.calendar import days_in_month
from chronoform.core.coerce import to_date
from chronoform.core.validators import is_valid_number
from chronoform.core.value import INVALID_DATE, CalendarDateTime, CalendarFields
from chronoform.enums import TimeUnit

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Add / subtract
    "add",
    "add_years",
    "add_months",
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "add_milliseconds",
    "subtract",
    "sub_years",
    "sub_months",
    "sub_days",
    "sub_hours",
    "sub_minutes",
    "sub_seconds",
    "sub_milliseconds",
    # Difference
    "diff",
    "diff_years",
    "diff_months",
    "diff_days",
    "diff_hours",
    "diff_minutes",
    "diff_seconds",
    "diff_milliseconds",
    # Truncation
    "truncate_to_unit",
    "start_of",
    "end_of",
    # Field setters
    "set_year",
    "set_month",
    "set_day",
    "set_hours",
    "set_minutes",
    "set_seconds",
    "set_milliseconds",
    "is_exists",
]

_FIXED_UNIT_MS: Mapping[TimeUnit, int] = MappingProxyType(
    {
        TimeUnit.DAY: MS_PER_DAY,
        TimeUnit.HOUR: MS_PER_HOUR,
        TimeUnit.MINUTE: MS_PER_MINUTE,
        TimeUnit.SECOND: MS_PER_SECOND,
        TimeUnit.MILLISECOND: 1,
    }
)


def _with_month_offset(fields: CalendarFields, months: int) -> CalendarDateTime:
    """Move by whole months, clamping the day to the target month."""
    year, month_index = divmod(fields.year * 12 + fields.month - 1 + months, 12)
    day = min(fields.day, days_in_month(year, month_index + 1))
    return CalendarDateTime.from_fields(
        year,
        month_index + 1,
        day,
        fields.hour,
        fields.minute,
        fields.second,
        fields.millisecond,
    )


def _shift(value: object, amount: object, unit: TimeUnit | str, sign: int) -> CalendarDateTime:
    unit = TimeUnit(unit)
    date = to_date(value)
    fields = date.fields()
    if fields is None or date.epoch_ms is None or not is_valid_number(amount):
        return INVALID_DATE
    steps = sign * math.trunc(amount)
    match unit:
        case TimeUnit.YEAR:
            return _with_month_offset(fields, steps * 12)
        case TimeUnit.MONTH:
            return _with_month_offset(fields, steps)
        case _:
            return CalendarDateTime.from_epoch_milliseconds(
                date.epoch_ms + steps * _FIXED_UNIT_MS[unit]
            )


# ============================================================================
# ADD / SUBTRACT
# ============================================================================


def add(value: object, amount: int | float, unit: TimeUnit | str) -> CalendarDateTime:
    """Add amount units to value.

    Fractional amounts truncate toward zero.

    Examples:
        >>> add(CalendarDateTime.from_fields(2024, 1, 31), 1, "month")
        CalendarDateTime(2024-02-29T00:00:00.000)
        >>> add(CalendarDateTime.from_fields(2024, 1, 31), 1.9, TimeUnit.DAY).day
        1
        >>> add("garbage", 1, "day") is INVALID_DATE
        True
    """
    return _shift(value, amount, unit, 1)


def subtract(value: object, amount: int | float, unit: TimeUnit | str) -> CalendarDateTime:
    """Subtract amount units from value."""
    return _shift(value, amount, unit, -1)


def add_years(value: object, amount: int | float) -> CalendarDateTime:
    return add(value, amount, TimeUnit.YEAR)


def add_months(value: object, amount: int | float) -> CalendarDateTime:
    return add(value, amount, TimeUnit.MONTH)


def add_days(value: object, amount: int | float) -> CalendarDateTime:
    return add(value, amount, TimeUnit.DAY)


def add_hours(value: object, amount: int | float) -> CalendarDateTime:
    return add(value, amount, TimeUnit.HOUR)


def add_minutes(value: object, amount: int | float) -> CalendarDateTime:
    return add(value, amount, TimeUnit.MINUTE)


def add_seconds(value: object, amount: int | float) -> CalendarDateTime:
    return add(value, amount, TimeUnit.SECOND)


def add_milliseconds(value: object, amount: int | float) -> CalendarDateTime:
    return add(value, amount, TimeUnit.MILLISECOND)


def sub_years(value: object, amount: int | float) -> CalendarDateTime:
    return subtract(value, amount, TimeUnit.YEAR)


def sub_months(value: object, amount: int | float) -> CalendarDateTime:
    return subtract(value, amount, TimeUnit.MONTH)


def sub_days(value: object, amount: int | float) -> CalendarDateTime:
    return subtract(value, amount, TimeUnit.DAY)


def sub_hours(value: object, amount: int | float) -> CalendarDateTime:
    return subtract(value, amount, TimeUnit.HOUR)


def sub_minutes(value: object, amount: int | float) -> CalendarDateTime:
    return subtract(value, amount, TimeUnit.MINUTE)


def sub_seconds(value: object, amount: int | float) -> CalendarDateTime:
    return subtract(value, amount, TimeUnit.SECOND)


def sub_milliseconds(value: object, amount: int | float) -> CalendarDateTime:
    return subtract(value, amount, TimeUnit.MILLISECOND)


# ============================================================================
# TRUNCATION
# ============================================================================


def truncate_to_unit(value: object, unit: TimeUnit | str) -> CalendarDateTime:
    """Drop every field smaller than unit.

    Example:
        >>> truncate_to_unit(CalendarDateTime.from_fields(2024, 5, 17, 13, 45), "month")
        CalendarDateTime(2024-05-01T00:00:00.000)
    """
    unit = TimeUnit(unit)
    f = to_date(value).fields()
    if f is None:
        return INVALID_DATE
    match unit:
        case TimeUnit.YEAR:
            return CalendarDateTime.from_fields(f.year)
        case TimeUnit.MONTH:
            return CalendarDateTime.from_fields(f.year, f.month)
        case TimeUnit.DAY:
            return CalendarDateTime.from_fields(f.year, f.month, f.day)
        case TimeUnit.HOUR:
            return CalendarDateTime.from_fields(f.year, f.month, f.day, f.hour)
        case TimeUnit.MINUTE:
            return CalendarDateTime.from_fields(f.year, f.month, f.day, f.hour, f.minute)
        case TimeUnit.SECOND:
            return CalendarDateTime.from_fields(
                f.year, f.month, f.day, f.hour, f.minute, f.second
            )
        case _:
            return to_date(value)


start_of = truncate_to_unit


def end_of(value: object, unit: TimeUnit | str) -> CalendarDateTime:
    """Last millisecond of the unit containing value.

    Example:
        >>> end_of(CalendarDateTime.from_fields(2023, 2, 10), "month")
        CalendarDateTime(2023-02-28T23:59:59.999)
    """
    start = truncate_to_unit(value, unit)
    next_start = add(start, 1, unit)
    if next_start.epoch_ms is None:
        return INVALID_DATE
    return CalendarDateTime.from_epoch_milliseconds(next_start.epoch_ms - 1)


# ============================================================================
# DIFFERENCE
# ============================================================================


def diff(left: object, right: object, unit: TimeUnit | str) -> int | None:
    """Whole units from right to left (positive when left is later).

    Both operands are truncated to unit first, so diff() counts calendar
    boundaries crossed: 23:59 and 00:01 the next day are one day apart.

    Returns:
        Signed unit count, or None when either operand is invalid

    Example:
        >>> a = CalendarDateTime.from_fields(2024, 3, 1, 0, 1)
        >>> b = CalendarDateTime.from_fields(2024, 2, 29, 23, 59)
        >>> diff(a, b, "day"), diff(a, b, "month"), diff(b, a, "hour")
        (1, 1, -1)
    """
    unit = TimeUnit(unit)
    lhs = truncate_to_unit(left, unit)
    rhs = truncate_to_unit(right, unit)
    lf, rf = lhs.fields(), rhs.fields()
    if lf is None or rf is None or lhs.epoch_ms is None or rhs.epoch_ms is None:
        return None
    match unit:
        case TimeUnit.YEAR:
            return lf.year - rf.year
        case TimeUnit.MONTH:
            return (lf.year * 12 + lf.month) - (rf.year * 12 + rf.month)
        case _:
            return (lhs.epoch_ms - rhs.epoch_ms) // _FIXED_UNIT_MS[unit]


def diff_years(left: object, right: object) -> int | None:
    return diff(left, right, TimeUnit.YEAR)


def diff_months(left: object, right: object) -> int | None:
    return diff(left, right, TimeUnit.MONTH)


def diff_days(left: object, right: object) -> int | None:
    return diff(left, right, TimeUnit.DAY)


def diff_hours(left: object, right: object) -> int | None:
    return diff(left, right, TimeUnit.HOUR)


def diff_minutes(left: object, right: object) -> int | None:
    return diff(left, right, TimeUnit.MINUTE)


def diff_seconds(left: object, right: object) -> int | None:
    return diff(left, right, TimeUnit.SECOND)


def diff_milliseconds(left: object, right: object) -> int | None:
    return diff(left, right, TimeUnit.MILLISECOND)


# ============================================================================
# FIELD SETTERS
# ============================================================================


def _replace(value: object, field: str, amount: object) -> CalendarDateTime:
    """Replace one field; the others keep their values, overflow carries."""
    f = to_date(value).fields()
    if f is None or not is_valid_number(amount):
        return INVALID_DATE
    new_value = math.trunc(amount)
    match field:
        case "year":
            day = min(f.day, days_in_month(new_value, f.month))
            return CalendarDateTime.from_fields(
                new_value, f.month, day, f.hour, f.minute, f.second, f.millisecond
            )
        case "month":
            return _with_month_offset(f, new_value - f.month)
        case _:
            return CalendarDateTime.from_fields(*f._replace(**{field: new_value}))


def set_year(value: object, year: int | float) -> CalendarDateTime:
    """Set the year; February 29 becomes February 28 in common years."""
    return _replace(value, "year", year)


def set_month(value: object, month: int | float) -> CalendarDateTime:
    """Set the month (1-12, overflow carries into the year), clamping the day."""
    return _replace(value, "month", month)


def set_day(value: object, day: int | float) -> CalendarDateTime:
    """Set the day of month; days past the month end roll into the next month."""
    return _replace(value, "day", day)


def set_hours(value: object, hours: int | float) -> CalendarDateTime:
    return _replace(value, "hour", hours)


def set_minutes(value: object, minutes: int | float) -> CalendarDateTime:
    return _replace(value, "minute", minutes)


def set_seconds(value: object, seconds: int | float) -> CalendarDateTime:
    return _replace(value, "second", seconds)


def set_milliseconds(value: object, milliseconds: int | float) -> CalendarDateTime:
    return _replace(value, "millisecond", milliseconds)


def is_exists(year: object, month: object, day: object) -> bool:
    """True if year-month-day (month 1-12) is a real calendar date.

    Example:
        >>> is_exists(2024, 2, 29), is_exists(2023, 2, 29), is_exists(2024, 13, 1)
        (True, False, False)
    """
    if not (is_valid_number(year) and is_valid_number(month) and is_valid_number(day)):
        return False
    y, m, d = math.trunc(year), math.trunc(month), math.trunc(day)
    return 1 <= m <= 12 and 1 <= d <= days_in_month(y, m)
