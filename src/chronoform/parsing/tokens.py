"""Token parsers.

One parser per TokenSymbol:

    (text, position, width, locale, acc) -> new position | None

A parser reads from text at position, writes what it matched into the
accumulator and returns the position after the match. None is a hard
failure for the whole parse; there is no backtracking.

Numeric parsers read ASCII digits greedily up to the field maximum and
require at least the token width. Text parsers compare case-insensitively
and try longer names first so "BCE" wins over "BC".

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias
import functools
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from chronoform.constants import MAX_DIGIT_RUN, TWO_DIGIT_YEAR_PIVOT
from chronoform.enums import LocaleWidth, TokenSymbol
from chronoform.locales.data import ENGLISH_ERA_ALIASES, LocaleData, NameTable
from chronoform.locales.resolver import name_width_for

from .accumulator import ComponentAccumulator

__all__ = [
    "PARSERS",
    "FieldParser",
    "match_name",
    "parse_day",
    "parse_day_of_year",
    "parse_day_period",
    "parse_era",
    "parse_fraction",
    "parse_hour",
    "parse_hour12",
    "parse_minute",
    "parse_month",
    "parse_second",
    "parse_weekday",
    "parse_year",
    "read_digits",
]

FieldParser: TypeAlias = Callable[[str, int, int, LocaleData, ComponentAccumulator], int | None]

_Candidates: TypeAlias = tuple[tuple[str, int], ...]

_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")


# ============================================================================
# SHARED MATCHERS
# ============================================================================


def read_digits(
    text: str, position: int, min_digits: int, max_digits: int | None
) -> tuple[int, int] | None:
    """Read a run of ASCII digits.

    Args:
        text: Input string
        position: Offset to start reading at
        min_digits: Fewest digits accepted
        max_digits: Most digits consumed (None for up to MAX_DIGIT_RUN)

    Returns:
        (value, new position), or None if fewer than min_digits are present
        or the run is longer than MAX_DIGIT_RUN

    Examples:
        >>> read_digits("2024-01", 0, 1, 4)
        (2024, 4)
        >>> read_digits("123", 0, 2, 2)
        (12, 2)
        >>> read_digits("x1", 0, 1, 2) is None
        True
        >>> read_digits("1" * 5000, 0, 1, None) is None
        True
    """
    # Scan one past the cap so an over-long run is detected, not truncated
    run_limit = MAX_DIGIT_RUN + 1 if max_digits is None else min(max_digits, MAX_DIGIT_RUN + 1)
    limit = min(len(text), position + run_limit)
    end = position
    while end < limit and text[end] in _ASCII_DIGITS:
        end += 1
    length = end - position
    if length < min_digits or length > MAX_DIGIT_RUN:
        return None
    return int(text[position:end]), end


def match_name(text: str, position: int, candidates: _Candidates) -> tuple[int, int] | None:
    """Match the longest candidate name at position, ignoring case.

    Args:
        text: Input string
        position: Offset to match at
        candidates: (name, index) pairs, longest first

    Returns:
        (index, new position), or None if nothing matches
    """
    for name, index in candidates:
        end = position + len(name)
        if text[position:end].casefold() == name.casefold():
            return index, end
    return None


def _longest_first(pairs: Iterable[tuple[str, int]]) -> _Candidates:
    # sorted() is stable: equal lengths keep table order
    return tuple(sorted((p for p in pairs if p[0]), key=lambda p: len(p[0]), reverse=True))


def _indexed(names: tuple[str, ...]) -> Iterable[tuple[str, int]]:
    return ((name, index) for index, name in enumerate(names))


@functools.lru_cache(maxsize=256)
def _width_candidates(table: NameTable, width: LocaleWidth) -> _Candidates:
    return _longest_first(_indexed(table.for_width(width)))


@functools.lru_cache(maxsize=256)
def _lenient_candidates(table: NameTable, width: LocaleWidth) -> _Candidates:
    """Active width first, then the remaining widths."""
    widths = [width, *(w for w in LocaleWidth if w != width)]
    return _longest_first(
        pair for w in widths for pair in _indexed(table.for_width(w))
    )


@functools.lru_cache(maxsize=256)
def _era_candidates(locale: LocaleData, width: LocaleWidth) -> _Candidates:
    pairs = list(_lenient_candidates(locale.era, width))
    for aliases in (locale.era_aliases, ENGLISH_ERA_ALIASES):
        for index, names in enumerate(aliases):
            pairs.extend((name, index) for name in names)
    return _longest_first(pairs)


def _parse_ranged(
    text: str, position: int, width: int, max_digits: int, low: int, high: int
) -> tuple[int, int] | None:
    result = read_digits(text, position, width, max(width, max_digits))
    if result is None or not low <= result[0] <= high:
        return None
    return result


# ============================================================================
# PARSERS
# ============================================================================


def parse_era(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """G: era name or alias in any width."""
    match = match_name(text, position, _era_candidates(locale, name_width_for(width)))
    if match is None:
        return None
    index, end = match
    acc.era_negative = index == 0
    acc.reset_day()
    return end


def parse_year(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """y: year digits.

    y reads a run of up to MAX_DIGIT_RUN digits, yy exactly two (pivoted
    into 1950-2049), yyy and yyyy one to four, and longer runs exactly
    width digits.
    """
    match width:
        case 1:
            result = read_digits(text, position, 1, None)
        case 2:
            result = read_digits(text, position, 2, 2)
        case 3 | 4:
            result = read_digits(text, position, 1, 4)
        case _:
            result = read_digits(text, position, width, width)
    if result is None:
        return None
    year, end = result
    if width == 2:
        year += 2000 if year < TWO_DIGIT_YEAR_PIVOT else 1900
    acc.year = year
    return end


def parse_month(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """M: month number (widths 1-2) or month name (3 and above)."""
    if width <= 2:
        result = _parse_ranged(text, position, width, 2, 1, 12)
        if result is None:
            return None
        month, end = result
        acc.month = month - 1
    else:
        match = match_name(text, position, _width_candidates(locale.month, name_width_for(width)))
        if match is None:
            return None
        acc.month, end = match
    acc.reset_day()
    return end


def parse_day(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """d: day of month 1-31; fit to the month is checked at resolution."""
    result = _parse_ranged(text, position, width, 2, 1, 31)
    if result is None:
        return None
    acc.day, end = result
    acc.day_parsed = True
    return end


def parse_day_of_year(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """D: day of year 1-366; fit to the year is checked at resolution."""
    result = _parse_ranged(text, position, width, 3, 1, 366)
    if result is None:
        return None
    acc.day_of_year, end = result
    acc.day_parsed = True
    return end


def parse_weekday(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """E: weekday name. Validated only; the date comes from other fields."""
    match = match_name(text, position, _width_candidates(locale.weekday, name_width_for(width)))
    return None if match is None else match[1]


def parse_hour(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """H: hour 0-23."""
    result = _parse_ranged(text, position, width, 2, 0, 23)
    if result is None:
        return None
    acc.hour, end = result
    return end


def parse_hour12(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """h: hour 1-12, combined with the day period at resolution."""
    result = _parse_ranged(text, position, width, 2, 1, 12)
    if result is None:
        return None
    acc.hour12, end = result
    return end


def parse_minute(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    result = _parse_ranged(text, position, width, 2, 0, 59)
    if result is None:
        return None
    acc.minute, end = result
    return end


def parse_second(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    result = _parse_ranged(text, position, width, 2, 0, 59)
    if result is None:
        return None
    acc.second, end = result
    return end


def parse_fraction(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """S: exactly width digits of fractional second, kept to milliseconds.

    Examples:
        >>> acc = ComponentAccumulator()
        >>> parse_fraction("5", 0, 1, EN_US, acc), acc.millisecond
        (1, 500)
        >>> parse_fraction("123456", 0, 6, EN_US, acc), acc.millisecond
        (6, 123)
    """
    end = position + width
    digits = text[position:end]
    if len(digits) != width or not all(c in _ASCII_DIGITS for c in digits):
        return None
    acc.millisecond = int(digits[:3].ljust(3, "0"))
    return end


def parse_day_period(
    text: str, position: int, width: int, locale: LocaleData, acc: ComponentAccumulator
) -> int | None:
    """a: am/pm name; the other widths are accepted too."""
    match = match_name(
        text, position, _lenient_candidates(locale.day_period, name_width_for(width))
    )
    if match is None:
        return None
    index, end = match
    acc.is_pm = index == 1
    return end


PARSERS: Mapping[TokenSymbol, FieldParser] = MappingProxyType(
    {
        TokenSymbol.ERA: parse_era,
        TokenSymbol.YEAR: parse_year,
        TokenSymbol.MONTH: parse_month,
        TokenSymbol.DAY: parse_day,
        TokenSymbol.DAY_OF_YEAR: parse_day_of_year,
        TokenSymbol.WEEKDAY: parse_weekday,
        TokenSymbol.HOUR: parse_hour,
        TokenSymbol.HOUR12: parse_hour12,
        TokenSymbol.MINUTE: parse_minute,
        TokenSymbol.SECOND: parse_second,
        TokenSymbol.FRACTION: parse_fraction,
        TokenSymbol.DAY_PERIOD: parse_day_period,
    }
)
