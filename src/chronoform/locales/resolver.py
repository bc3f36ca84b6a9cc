"""Locale resolution and name lookup.

The single point where "a locale or nothing" becomes concrete LocaleData,
and where pattern widths become LocaleWidth values. Both engines go through
here for every text-bearing token.

Python 3.13+.
"""

from typing import TypeAlias
from chronoform.constants import INVALID_FIELD
from chronoform.diagnostics import ErrorTemplate
from chronoform.enums import LocaleWidth

from .data import DEFAULT_LOCALE, LocaleData, NameTable
from .loading import load_locale

__all__ = [
    "LocaleInput",
    "get_day_period_name",
    "get_era_name",
    "get_month_name",
    "get_weekday_name",
    "name_width_for",
    "resolve_locale",
]

LocaleInput: TypeAlias = LocaleData | str | None


def resolve_locale(locale: LocaleInput) -> LocaleData:
    """Resolve a locale argument to LocaleData.

    Args:
        locale: LocaleData (used as-is), a locale code (loaded through Babel),
            or None (built-in en-US)

    Returns:
        LocaleData to render or match names with

    Raises:
        TypeError: If locale is of any other type
    """
    if locale is None:
        return DEFAULT_LOCALE
    if isinstance(locale, LocaleData):
        return locale
    if isinstance(locale, str):
        return load_locale(locale)
    raise TypeError(ErrorTemplate.locale_not_supported(type(locale).__name__))


def name_width_for(width: int) -> LocaleWidth:
    """Map a pattern token width to a name width.

    4 letters select the wide form, 5 the narrow form, anything else the
    abbreviated form.

    Example:
        >>> name_width_for(4)
        <LocaleWidth.WIDE: 'wide'>
        >>> name_width_for(6)
        <LocaleWidth.ABBREVIATED: 'abbreviated'>
    """
    if width == 4:
        return LocaleWidth.WIDE
    if width == 5:
        return LocaleWidth.NARROW
    return LocaleWidth.ABBREVIATED


def _lookup(table: NameTable, index: int | None, width: LocaleWidth) -> str:
    names = table.for_width(width)
    if index is None or not 0 <= index < len(names):
        return INVALID_FIELD
    return names[index]


def get_era_name(
    locale: LocaleInput, era: int | None, width: LocaleWidth = LocaleWidth.ABBREVIATED
) -> str:
    """Era name for index 0 (BC) or 1 (AD); INVALID_FIELD when out of range."""
    return _lookup(resolve_locale(locale).era, era, width)


def get_month_name(
    locale: LocaleInput, month: int | None, width: LocaleWidth = LocaleWidth.ABBREVIATED
) -> str:
    """Month name for index 0 (January) ... 11 (December).

    Example:
        >>> get_month_name(None, 0, LocaleWidth.WIDE)
        'January'
        >>> get_month_name(None, 12)
        'NaN'
    """
    return _lookup(resolve_locale(locale).month, month, width)


def get_weekday_name(
    locale: LocaleInput, weekday: int | None, width: LocaleWidth = LocaleWidth.ABBREVIATED
) -> str:
    """Weekday name for index 0 (Sunday) ... 6 (Saturday)."""
    return _lookup(resolve_locale(locale).weekday, weekday, width)


def get_day_period_name(
    locale: LocaleInput, period: int | None, width: LocaleWidth = LocaleWidth.ABBREVIATED
) -> str:
    """Day period name for index 0 (am) or 1 (pm)."""
    return _lookup(resolve_locale(locale).day_period, period, width)
