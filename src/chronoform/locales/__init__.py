"""Locale name tables for eras, months, weekdays and day periods.

The built-in DEFAULT_LOCALE (en-US) needs no CLDR data; load_locale() builds
tables for any other locale from Babel.

Python 3.13+.
"""

from .data import DEFAULT_LOCALE, EN_US, ENGLISH_ERA_ALIASES, LocaleData, NameTable
from .loading import clear_locale_cache, load_locale
from .resolver import (
    LocaleInput,
    get_day_period_name,
    get_era_name,
    get_month_name,
    get_weekday_name,
    name_width_for,
    resolve_locale,
)

__all__ = [
    "DEFAULT_LOCALE",
    "ENGLISH_ERA_ALIASES",
    "EN_US",
    "LocaleData",
    "LocaleInput",
    "NameTable",
    "clear_locale_cache",
    "get_day_period_name",
    "get_era_name",
    "get_month_name",
    "get_weekday_name",
    "load_locale",
    "name_width_for",
    "resolve_locale",
]
