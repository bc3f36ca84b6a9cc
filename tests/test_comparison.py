"""Tests for comparison predicates and ordering helpers.

Python 3.13+.
"""

from __future__ import annotations

import functools
from datetime import datetime, timedelta

import pytest
from hypothesis import given, settings

from chronoform.arithmetic import add_days
from chronoform.comparison import (
    clamp,
    compare,
    is_after,
    is_after_or_equal,
    is_before,
    is_before_or_equal,
    is_between,
    is_equal,
    is_future,
    is_past,
    is_same,
    is_same_day,
    is_same_hour,
    is_same_minute,
    is_same_month,
    is_same_second,
    is_same_year,
    max_date,
    min_date,
)
from chronoform.core.value import INVALID_DATE, CalendarDateTime

from tests.strategies import calendar_datetimes

EARLY = CalendarDateTime.from_fields(2024, 1, 1)
LATE = CalendarDateTime.from_fields(2024, 12, 31)
MIDDLE = CalendarDateTime.from_fields(2024, 6, 15)


class TestOrdering:
    """Strict and non-strict predicates."""

    def test_before_after(self) -> None:
        assert is_before(EARLY, LATE)
        assert not is_before(LATE, EARLY)
        assert is_after(LATE, EARLY)
        assert not is_before(EARLY, EARLY)

    def test_or_equal(self) -> None:
        assert is_before_or_equal(EARLY, EARLY)
        assert is_after_or_equal(EARLY, EARLY)
        assert not is_after_or_equal(EARLY, LATE)

    def test_equal_across_input_types(self) -> None:
        assert is_equal(EARLY, datetime(2024, 1, 1))
        assert is_equal("2024-01-01", EARLY.epoch_ms)

    @pytest.mark.parametrize(
        "predicate",
        [is_before, is_after, is_before_or_equal, is_after_or_equal, is_equal],
    )
    def test_invalid_operands_are_false(self, predicate: object) -> None:
        assert predicate(INVALID_DATE, EARLY) is False  # type: ignore[operator]
        assert predicate(EARLY, "garbage") is False  # type: ignore[operator]
        assert predicate(INVALID_DATE, INVALID_DATE) is False  # type: ignore[operator]


class TestCompare:
    """compare() drives sorting."""

    def test_ascending(self) -> None:
        assert compare(EARLY, LATE) == -1
        assert compare(LATE, EARLY) == 1
        assert compare(EARLY, EARLY) == 0

    @pytest.mark.parametrize("order", ["DESC", "desc", "Desc"])
    def test_descending(self, order: str) -> None:
        assert compare(EARLY, LATE, order) == 1

    @pytest.mark.parametrize("order", ["ASC", "", "down", 42])
    def test_anything_else_is_ascending(self, order: object) -> None:
        assert compare(EARLY, LATE, order) == -1  # type: ignore[arg-type]

    def test_invalid_is_none(self) -> None:
        assert compare(EARLY, INVALID_DATE) is None

    def test_sorting(self) -> None:
        values = [LATE, EARLY, MIDDLE]
        assert sorted(values, key=functools.cmp_to_key(compare)) == [EARLY, MIDDLE, LATE]

    @given(left=calendar_datetimes(), right=calendar_datetimes())
    @settings(max_examples=200)
    def test_matches_epoch_order(self, left: CalendarDateTime, right: CalendarDateTime) -> None:
        assert left.epoch_ms is not None
        assert right.epoch_ms is not None
        expected = (left.epoch_ms > right.epoch_ms) - (left.epoch_ms < right.epoch_ms)
        assert compare(left, right) == expected
        assert compare(left, right, "DESC") == -expected


class TestSameUnit:
    """is_same_*() compare truncated values."""

    def test_same_day(self) -> None:
        assert is_same_day(datetime(2024, 1, 15, 0, 0), datetime(2024, 1, 15, 23, 59))
        assert not is_same_day(datetime(2024, 1, 15, 23, 59), datetime(2024, 1, 16, 0, 0))

    def test_each_unit(self) -> None:
        base = datetime(2024, 5, 17, 13, 45, 12, 345_000)
        assert is_same_year(base, datetime(2024, 12, 31))
        assert is_same_month(base, datetime(2024, 5, 1))
        assert is_same_hour(base, base.replace(minute=0))
        assert is_same_minute(base, base.replace(second=59))
        assert is_same_second(base, base.replace(microsecond=999_000))
        assert not is_same_second(base, base + timedelta(seconds=1))

    def test_generic(self) -> None:
        assert is_same(EARLY, LATE, "year")
        assert not is_same(EARLY, LATE, "month")

    def test_invalid(self) -> None:
        assert not is_same(EARLY, "garbage", "year")


class TestRelativeToNow:
    """is_past() / is_future()."""

    def test_far_values(self) -> None:
        assert is_past(CalendarDateTime.from_fields(1900))
        assert is_future(CalendarDateTime.from_fields(3000))
        assert not is_future(CalendarDateTime.from_fields(1900))

    def test_invalid(self) -> None:
        assert not is_past(INVALID_DATE)
        assert not is_future(INVALID_DATE)


class TestBetween:
    """is_between() bound handling."""

    @pytest.mark.parametrize(
        ("bounds", "at_start", "at_end"),
        [("()", False, False), ("[]", True, True), ("[)", True, False), ("(]", False, True)],
    )
    def test_bounds(self, bounds: str, at_start: bool, at_end: bool) -> None:
        assert is_between(EARLY, EARLY, LATE, bounds) is at_start  # type: ignore[arg-type]
        assert is_between(LATE, EARLY, LATE, bounds) is at_end  # type: ignore[arg-type]
        assert is_between(MIDDLE, EARLY, LATE, bounds) is True  # type: ignore[arg-type]

    def test_outside(self) -> None:
        assert not is_between(add_days(LATE, 1), EARLY, LATE, "[]")

    def test_unbounded_sides(self) -> None:
        assert is_between(MIDDLE, None, LATE)
        assert is_between(MIDDLE, EARLY, None)
        assert is_between(MIDDLE, None, None)
        assert not is_between(LATE, None, MIDDLE)

    def test_unknown_bounds_string(self) -> None:
        assert not is_between(MIDDLE, EARLY, LATE, "<>")  # type: ignore[arg-type]

    def test_invalid_operands(self) -> None:
        assert not is_between(INVALID_DATE, EARLY, LATE)
        assert not is_between(MIDDLE, "garbage", LATE)


class TestClampAndExtremes:
    """clamp(), min_date(), max_date()."""

    def test_clamp(self) -> None:
        assert clamp(MIDDLE, EARLY, LATE) == MIDDLE
        assert clamp(CalendarDateTime.from_fields(2023), EARLY, LATE) == EARLY
        assert clamp(CalendarDateTime.from_fields(2025), EARLY, LATE) == LATE

    def test_clamp_swaps_reversed_bounds(self) -> None:
        assert clamp(CalendarDateTime.from_fields(2025), LATE, EARLY) == LATE

    def test_clamp_invalid(self) -> None:
        assert clamp(MIDDLE, INVALID_DATE, LATE) is INVALID_DATE

    def test_min_max(self) -> None:
        assert min_date(LATE, EARLY, MIDDLE) == EARLY
        assert max_date(LATE, "2024-01-01", datetime(2024, 6, 15)) == LATE

    def test_empty_is_invalid(self) -> None:
        assert min_date() is INVALID_DATE
        assert max_date() is INVALID_DATE

    def test_any_invalid_is_invalid(self) -> None:
        assert max_date(EARLY, "garbage") is INVALID_DATE
