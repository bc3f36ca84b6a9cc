"""Locale loading from Babel CLDR data.

Builds LocaleData tables from the format-context calendar names Babel ships
for every CLDR locale. Loading never fails: unknown or malformed locale codes
log a warning and fall back to the built-in en-US data, matching the
lenient behavior of the rest of the engine.

Babel indexes weekdays Monday-first (0 = Monday); the tables here are
re-indexed Sunday-first so weekday indices match CalendarDateTime.day_of_week.

Python 3.13+. Uses Babel for CLDR data.
"""

import functools
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from babel import Locale, UnknownLocaleError

from chronoform.constants import DEFAULT_LOCALE_CODE, MAX_LOCALE_CACHE_SIZE
from chronoform.enums import LocaleWidth
from chronoform.locale_utils import get_babel_locale, normalize_locale

from .data import DEFAULT_LOCALE, LocaleData, NameTable

__all__ = ["clear_locale_cache", "load_locale"]

logger = logging.getLogger(__name__)

# Width substitution order when CLDR lacks a width for a field.
_WIDTH_PREFERENCE: tuple[LocaleWidth, ...] = (
    LocaleWidth.ABBREVIATED,
    LocaleWidth.WIDE,
    LocaleWidth.NARROW,
)

# Babel keys, in table order.
_ERA_KEYS: tuple[int, ...] = (0, 1)
_MONTH_KEYS: tuple[int, ...] = tuple(range(1, 13))
_WEEKDAY_KEYS: tuple[int, ...] = (6, 0, 1, 2, 3, 4, 5)
_DAY_PERIOD_KEYS: tuple[str, ...] = ("am", "pm")


def load_locale(locale_code: str) -> LocaleData:
    """Load locale name tables for a locale code.

    Accepts BCP-47 ("ja-JP") or POSIX ("ja_JP") codes. The default locale
    code returns the built-in en-US tables without consulting Babel.

    Thread-safe; results are cached per normalized code.

    Args:
        locale_code: Locale identifier

    Returns:
        LocaleData for the locale, or DEFAULT_LOCALE for unknown codes

    Examples:
        >>> load_locale("ja-JP").month.wide[0]
        '1月'
        >>> load_locale("xx_UNKNOWN") is DEFAULT_LOCALE  # warning logged
        True
    """
    normalized = normalize_locale(locale_code)
    if normalized.casefold() == DEFAULT_LOCALE_CODE.casefold():
        return DEFAULT_LOCALE
    return _load_normalized(normalized)


def clear_locale_cache() -> None:
    """Clear cached LocaleData instances built from Babel."""
    _load_normalized.cache_clear()
    get_babel_locale.cache_clear()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _load_normalized(locale_code: str) -> LocaleData:
    try:
        babel_locale = get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE_CODE
        )
        return DEFAULT_LOCALE
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s",
            locale_code,
            e,
            DEFAULT_LOCALE_CODE,
        )
        return DEFAULT_LOCALE
    return _build_locale_data(babel_locale)


def _build_locale_data(babel_locale: Locale) -> LocaleData:
    code = str(babel_locale)
    return LocaleData(
        code=code,
        era=_build_table(
            babel_locale.eras, _ERA_KEYS, DEFAULT_LOCALE.era, code, "era"
        ),
        month=_build_table(
            babel_locale.months.get("format", {}),
            _MONTH_KEYS,
            DEFAULT_LOCALE.month,
            code,
            "month",
        ),
        weekday=_build_table(
            babel_locale.days.get("format", {}),
            _WEEKDAY_KEYS,
            DEFAULT_LOCALE.weekday,
            code,
            "weekday",
        ),
        day_period=_build_table(
            babel_locale.day_periods.get("format", {}),
            _DAY_PERIOD_KEYS,
            DEFAULT_LOCALE.day_period,
            code,
            "day period",
        ),
    )


def _build_table(
    source: Mapping[str, Any],
    keys: Sequence[int | str],
    fallback: NameTable,
    locale_code: str,
    field_name: str,
) -> NameTable:
    """Collect one field's names in every width, substituting missing widths."""
    names_by_width: dict[LocaleWidth, tuple[str, ...]] = {}
    for width in LocaleWidth:
        names = _lookup_names(source, width, keys)
        if names is None:
            for alternative in _WIDTH_PREFERENCE:
                names = _lookup_names(source, alternative, keys)
                if names is not None:
                    logger.debug(
                        "Locale '%s' has no %s %s names; using %s",
                        locale_code,
                        width,
                        field_name,
                        alternative,
                    )
                    break
            else:
                logger.debug(
                    "Locale '%s' has no %s names; using %s",
                    locale_code,
                    field_name,
                    DEFAULT_LOCALE_CODE,
                )
                names = fallback.for_width(width)
        names_by_width[width] = names
    return NameTable(
        narrow=names_by_width[LocaleWidth.NARROW],
        abbreviated=names_by_width[LocaleWidth.ABBREVIATED],
        wide=names_by_width[LocaleWidth.WIDE],
    )


def _lookup_names(
    source: Mapping[str, Any], width: LocaleWidth, keys: Sequence[int | str]
) -> tuple[str, ...] | None:
    names = source.get(str(width))
    if not names:
        return None
    try:
        return tuple(str(names[key]) for key in keys)
    except KeyError:
        return None
