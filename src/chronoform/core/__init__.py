"""Core value layer shared by the pattern engines and arithmetic helpers.

This package provides the calendar date-time value and the helpers that
every other layer depends on:

    core <- locales <- pattern <- formatting / parsing <- arithmetic

Exports:
    CalendarDateTime: Immutable point on the local calendar timeline
    INVALID_DATE: The invalid sentinel value
    now: Current local moment
    to_date: Coercion of loosely typed inputs
    is_valid_*: Type guards for accepted inputs

Python 3.13+.
"""

from .coerce import DateInput, to_date
from .validators import (
    is_valid_date,
    is_valid_date_input,
    is_valid_date_or_number,
    is_valid_number,
)
from .value import INVALID_DATE, CalendarDateTime, CalendarFields, now

__all__ = [
    "INVALID_DATE",
    "CalendarDateTime",
    "CalendarFields",
    "DateInput",
    "is_valid_date",
    "is_valid_date_input",
    "is_valid_date_or_number",
    "is_valid_number",
    "now",
    "to_date",
]
