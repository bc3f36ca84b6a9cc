"""Type guard functions for date-time inputs.

Provides TypeIs-based type guards so mypy can narrow accepted inputs.
All guards accept arbitrary objects and never raise.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from chronoform.core.validators import is_valid_date
    >>> value = parse_datetime("2024-01-15", "yyyy-MM-dd")
    >>> if is_valid_date(value):
    ...     # mypy knows value is CalendarDateTime
    ...     print(value.year)
    2024
"""

from __future__ import annotations

import math
from datetime import date
from typing import TYPE_CHECKING

from .value import CalendarDateTime

if TYPE_CHECKING:
    from typing import TypeIs

__all__ = [
    "is_valid_date",
    "is_valid_date_input",
    "is_valid_date_or_number",
    "is_valid_number",
]


def is_valid_date(value: object) -> TypeIs[CalendarDateTime]:
    """Type guard: CalendarDateTime that is not the invalid sentinel.

    Args:
        value: Any object

    Returns:
        True if value is a valid CalendarDateTime, False otherwise
    """
    return isinstance(value, CalendarDateTime) and value.is_valid


def is_valid_number(value: object) -> TypeIs[int | float]:
    """Type guard: finite int or float (bool excluded).

    Args:
        value: Any object

    Returns:
        True if value is a finite number, False otherwise
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_date_or_number(value: object) -> TypeIs[CalendarDateTime | int | float]:
    """Type guard: valid CalendarDateTime or finite number."""
    return is_valid_date(value) or is_valid_number(value)


def is_valid_date_input(value: object) -> bool:
    """Check whether to_date() would produce a valid value.

    Accepts valid CalendarDateTime values, stdlib date/datetime objects,
    finite numbers within range, and ISO 8601 strings.
    """
    if isinstance(value, date) or is_valid_date(value):
        return True
    from .coerce import to_date  # noqa: PLC0415 - circular

    return (is_valid_number(value) or isinstance(value, str)) and to_date(value).is_valid
