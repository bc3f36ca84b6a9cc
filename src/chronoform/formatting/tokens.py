"""Token formatters.

One formatter per TokenSymbol, each rendering a single field of a
broken-down date-time at a given token width:

    (fields, width, locale) -> str

fields is None for the invalid sentinel; every formatter then returns
INVALID_FIELD, including the text-bearing ones.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias
from collections.abc import Callable, Mapping
from types import MappingProxyType

from chronoform.constants import INVALID_FIELD
from chronoform.core.calendar import day_of_week, day_of_year, days_from_civil
from chronoform.core.value import CalendarFields
from chronoform.enums import TokenSymbol
from chronoform.locales.data import LocaleData
from chronoform.locales.resolver import (
    get_day_period_name,
    get_era_name,
    get_month_name,
    get_weekday_name,
    name_width_for,
)

__all__ = [
    "FORMATTERS",
    "FieldFormatter",
    "display_year",
    "format_day",
    "format_day_of_year",
    "format_day_period",
    "format_era",
    "format_fraction",
    "format_hour",
    "format_hour12",
    "format_minute",
    "format_month",
    "format_second",
    "format_weekday",
    "format_year",
]

FieldFormatter: TypeAlias = Callable[[CalendarFields | None, int, LocaleData], str]


def _pad(number: int, width: int) -> str:
    return str(number).zfill(width)


def display_year(year: int) -> int:
    """Year as written alongside an era: 0 -> 1 (BC), -1 -> 2 (BC)."""
    return year if year > 0 else 1 - year


def format_era(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """G: era name, index 1 for years after 0."""
    if fields is None:
        return INVALID_FIELD
    return get_era_name(locale, 1 if fields.year > 0 else 0, name_width_for(width))


def format_year(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """y: display year.

    y is unpadded, yy is the last two digits, and longer runs pad to width.

    Examples:
        >>> f = CalendarFields(2024, 1, 1, 0, 0, 0, 0)
        >>> format_year(f, 1, EN_US), format_year(f, 2, EN_US), format_year(f, 5, EN_US)
        ('2024', '24', '02024')
    """
    if fields is None:
        return INVALID_FIELD
    year = display_year(fields.year)
    if width == 2:
        return _pad(year % 100, 2)
    return _pad(year, width)


def format_month(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """M: month number for widths 1-2, month name for 3 and above."""
    if fields is None:
        return INVALID_FIELD
    if width <= 2:
        return _pad(fields.month, width)
    return get_month_name(locale, fields.month - 1, name_width_for(width))


def format_day(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """d: day of month."""
    if fields is None:
        return INVALID_FIELD
    return _pad(fields.day, width)


def format_day_of_year(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """D: day of year."""
    if fields is None:
        return INVALID_FIELD
    return _pad(day_of_year(fields.year, fields.month, fields.day), width)


def format_weekday(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """E: weekday name."""
    if fields is None:
        return INVALID_FIELD
    weekday = day_of_week(days_from_civil(fields.year, fields.month, fields.day))
    return get_weekday_name(locale, weekday, name_width_for(width))


def format_hour(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """H: hour 0-23."""
    if fields is None:
        return INVALID_FIELD
    return _pad(fields.hour, width)


def format_hour12(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """h: hour 1-12."""
    if fields is None:
        return INVALID_FIELD
    return _pad(fields.hour % 12 or 12, width)


def format_minute(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    if fields is None:
        return INVALID_FIELD
    return _pad(fields.minute, width)


def format_second(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    if fields is None:
        return INVALID_FIELD
    return _pad(fields.second, width)


def format_fraction(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """S: fractional seconds.

    S is tenths, SS hundredths, SSS milliseconds; longer runs append zeros
    since precision stops at the millisecond.

    Examples:
        >>> f = CalendarFields(2024, 1, 1, 0, 0, 0, 45)
        >>> [format_fraction(f, n, EN_US) for n in (1, 2, 3, 5)]
        ['0', '04', '045', '04500']
    """
    if fields is None:
        return INVALID_FIELD
    ms = fields.millisecond
    match width:
        case 1:
            return str(ms // 100)
        case 2:
            return _pad(ms // 10, 2)
        case _:
            return _pad(ms, 3).ljust(width, "0")


def format_day_period(fields: CalendarFields | None, width: int, locale: LocaleData) -> str:
    """a: am for hours before noon, pm otherwise."""
    if fields is None:
        return INVALID_FIELD
    return get_day_period_name(locale, 0 if fields.hour < 12 else 1, name_width_for(width))


FORMATTERS: Mapping[TokenSymbol, FieldFormatter] = MappingProxyType(
    {
        TokenSymbol.ERA: format_era,
        TokenSymbol.YEAR: format_year,
        TokenSymbol.MONTH: format_month,
        TokenSymbol.DAY: format_day,
        TokenSymbol.DAY_OF_YEAR: format_day_of_year,
        TokenSymbol.WEEKDAY: format_weekday,
        TokenSymbol.HOUR: format_hour,
        TokenSymbol.HOUR12: format_hour12,
        TokenSymbol.MINUTE: format_minute,
        TokenSymbol.SECOND: format_second,
        TokenSymbol.FRACTION: format_fraction,
        TokenSymbol.DAY_PERIOD: format_day_period,
    }
)
