"""Comparison predicates and ordering helpers.

Predicates return False when any operand does not coerce to a valid date;
compare() returns None instead. Bounded helpers (clamp, min_date, max_date)
return INVALID_DATE.

Python 3.13+. Zero external dependencies.
"""

from typing import Literal, TypeAlias

from chronoform.core.coerce import to_date
from chronoform.core.value import INVALID_DATE, CalendarDateTime, now
from chronoform.enums import TimeUnit

from .arithmetic import diff

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Ordering
    "is_before",
    "is_after",
    "is_before_or_equal",
    "is_after_or_equal",
    "is_equal",
    "compare",
    # Same-unit
    "is_same",
    "is_same_year",
    "is_same_month",
    "is_same_day",
    "is_same_hour",
    "is_same_minute",
    "is_same_second",
    # Relative to now
    "is_past",
    "is_future",
    # Ranges
    "BetweenBounds",
    "is_between",
    "clamp",
    "min_date",
    "max_date",
]

BetweenBounds: TypeAlias = Literal["()", "[]", "[)", "(]"]

_VALID_BOUNDS: frozenset[str] = frozenset({"()", "[]", "[)", "(]"})


def _ms(value: object) -> int | None:
    return to_date(value).epoch_ms


def _ms_pair(left: object, right: object) -> tuple[int, int] | None:
    lhs, rhs = _ms(left), _ms(right)
    if lhs is None or rhs is None:
        return None
    return lhs, rhs


# ============================================================================
# ORDERING
# ============================================================================


def is_before(left: object, right: object) -> bool:
    pair = _ms_pair(left, right)
    return pair is not None and pair[0] < pair[1]


def is_after(left: object, right: object) -> bool:
    pair = _ms_pair(left, right)
    return pair is not None and pair[0] > pair[1]


def is_before_or_equal(left: object, right: object) -> bool:
    pair = _ms_pair(left, right)
    return pair is not None and pair[0] <= pair[1]


def is_after_or_equal(left: object, right: object) -> bool:
    pair = _ms_pair(left, right)
    return pair is not None and pair[0] >= pair[1]


def is_equal(left: object, right: object) -> bool:
    """True if both operands are valid and denote the same millisecond."""
    pair = _ms_pair(left, right)
    return pair is not None and pair[0] == pair[1]


def compare(left: object, right: object, order: str = "ASC") -> int | None:
    """Three-way comparison for sorting.

    Args:
        left: First operand
        right: Second operand
        order: "DESC" (any case) reverses the result; anything else is ascending

    Returns:
        -1, 0 or 1, or None when either operand is invalid

    Example:
        >>> values = [datetime(2024, 3, 1), datetime(2023, 1, 1), datetime(2024, 1, 1)]
        >>> sorted(values, key=functools.cmp_to_key(compare))[0].year
        2023
        >>> compare(datetime(2024, 1, 1), datetime(2023, 1, 1), "desc")
        -1
    """
    pair = _ms_pair(left, right)
    if pair is None:
        return None
    result = (pair[0] > pair[1]) - (pair[0] < pair[1])
    return -result if isinstance(order, str) and order.upper() == "DESC" else result


# ============================================================================
# SAME-UNIT
# ============================================================================


def is_same(left: object, right: object, unit: TimeUnit | str) -> bool:
    """True if both operands fall in the same calendar unit.

    Example:
        >>> is_same(datetime(2024, 1, 15, 0, 0), datetime(2024, 1, 15, 23, 59), "day")
        True
    """
    return diff(left, right, unit) == 0


def is_same_year(left: object, right: object) -> bool:
    return is_same(left, right, TimeUnit.YEAR)


def is_same_month(left: object, right: object) -> bool:
    return is_same(left, right, TimeUnit.MONTH)


def is_same_day(left: object, right: object) -> bool:
    return is_same(left, right, TimeUnit.DAY)


def is_same_hour(left: object, right: object) -> bool:
    return is_same(left, right, TimeUnit.HOUR)


def is_same_minute(left: object, right: object) -> bool:
    return is_same(left, right, TimeUnit.MINUTE)


def is_same_second(left: object, right: object) -> bool:
    return is_same(left, right, TimeUnit.SECOND)


# ============================================================================
# RELATIVE TO NOW
# ============================================================================


def is_past(value: object) -> bool:
    """True if value is strictly before now()."""
    return is_before(value, now())


def is_future(value: object) -> bool:
    """True if value is strictly after now()."""
    return is_after(value, now())


# ============================================================================
# RANGES
# ============================================================================


def is_between(
    value: object,
    start: object | None,
    end: object | None,
    bounds: BetweenBounds = "()",
) -> bool:
    """True if value lies between start and end.

    Args:
        value: Date to test
        start: Lower bound, or None for unbounded
        end: Upper bound, or None for unbounded
        bounds: "(" / ")" exclude the bound, "[" / "]" include it

    Returns:
        False for invalid operands or unknown bounds

    Example:
        >>> start, end = datetime(2024, 1, 1), datetime(2024, 12, 31)
        >>> is_between(start, start, end), is_between(start, start, end, "[]")
        (False, True)
    """
    if bounds not in _VALID_BOUNDS:
        return False
    target = _ms(value)
    if target is None:
        return False
    if start is not None:
        low = _ms(start)
        if low is None or target < low or (bounds[0] == "(" and target == low):
            return False
    if end is not None:
        high = _ms(end)
        if high is None or target > high or (bounds[1] == ")" and target == high):
            return False
    return True


def clamp(value: object, lower: object, upper: object) -> CalendarDateTime:
    """Limit value to [lower, upper]; reversed bounds are swapped.

    Example:
        >>> clamp(datetime(2025, 6, 1), datetime(2024, 12, 31), datetime(2024, 1, 1))
        CalendarDateTime(2024-12-31T00:00:00.000)
    """
    target, low, high = to_date(value), to_date(lower), to_date(upper)
    if target.epoch_ms is None or low.epoch_ms is None or high.epoch_ms is None:
        return INVALID_DATE
    if low.epoch_ms > high.epoch_ms:
        low, high = high, low
    if target.epoch_ms < low.epoch_ms:  # type: ignore[operator]
        return low
    if target.epoch_ms > high.epoch_ms:  # type: ignore[operator]
        return high
    return target


def _extreme(values: tuple[object, ...], *, latest: bool) -> CalendarDateTime:
    dates = [to_date(v) for v in values]
    if not dates or any(not d.is_valid for d in dates):
        return INVALID_DATE
    pick = max if latest else min
    return pick(dates, key=lambda d: d.epoch_ms or 0)


def min_date(*values: object) -> CalendarDateTime:
    """Earliest of the values; INVALID_DATE if any is invalid or none given."""
    return _extreme(values, latest=False)


def max_date(*values: object) -> CalendarDateTime:
    """Latest of the values; INVALID_DATE if any is invalid or none given."""
    return _extreme(values, latest=True)
