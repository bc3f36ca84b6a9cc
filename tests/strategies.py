"""Hypothesis strategies for generating calendar values and patterns.

Provides custom strategies for property-based testing of the calendar math,
the pattern engines, and the arithmetic helpers.
"""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.strategies import composite

from chronoform.constants import MAX_EPOCH_MS
from chronoform.core.calendar import days_in_month
from chronoform.core.value import CalendarDateTime, CalendarFields

# Patterns whose output carries every field they parse back.
# Pattern -> smallest unit the pattern carries.
ROUND_TRIP_PATTERNS: dict[str, str] = {
    "yyyy-MM-dd": "day",
    "yyyy-MM-dd HH:mm:ss": "second",
    "yyyy-MM-dd'T'HH:mm:ss.SSS": "millisecond",
    "dd.MM.yyyy HH:mm": "minute",
    "EEEE, MMMM d, yyyy h:mm:ss a": "second",
    "MMM d yyyy hh:mm a": "minute",
    "yyyy DDD HH:mm": "minute",
    "d MMMM yyyy G HH:mm:ss": "second",
}

# Name-bearing patterns used for locale round trips.
LOCALE_ROUND_TRIP_PATTERNS: dict[str, str] = {
    "EEEE, MMMM d, yyyy h:mm:ss a": "second",
    "MMM d yyyy hh:mm a": "minute",
}

LOCALE_CODES = ["en-US", "de-DE", "fr-FR", "ja-JP", "pl-PL", "fi"]


@composite
def calendar_fields(
    draw: st.DrawFn, min_year: int = 1, max_year: int = 9999
) -> CalendarFields:
    """Generate broken-down fields of a real calendar moment."""
    year = draw(st.integers(min_value=min_year, max_value=max_year))
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=days_in_month(year, month)))
    return CalendarFields(
        year,
        month,
        day,
        draw(st.integers(min_value=0, max_value=23)),
        draw(st.integers(min_value=0, max_value=59)),
        draw(st.integers(min_value=0, max_value=59)),
        draw(st.integers(min_value=0, max_value=999)),
    )


@composite
def calendar_datetimes(
    draw: st.DrawFn, min_year: int = 1, max_year: int = 9999
) -> CalendarDateTime:
    """Generate valid values between min_year and max_year."""
    fields = draw(calendar_fields(min_year=min_year, max_year=max_year))
    return CalendarDateTime.from_fields(*fields)


def epoch_milliseconds() -> st.SearchStrategy[int]:
    """Any millisecond count in the representable range."""
    return st.integers(min_value=-MAX_EPOCH_MS, max_value=MAX_EPOCH_MS)


def day_counts() -> st.SearchStrategy[int]:
    """Day counts relative to 1970-01-01 spanning several 400-year cycles."""
    return st.integers(min_value=-3_000_000, max_value=3_000_000)
