"""Calendar date-time value.

CalendarDateTime is an opaque point on the local wall-clock timeline,
represented as a signed count of milliseconds since 1970-01-01T00:00:00.000.
Fields (year, month, day, ...) are derived from the count against the
proleptic Gregorian calendar. There is no UTC offset and no DST handling:
the timeline is the host's local calendar as read off a wall clock.

A value is either valid (integer count within MAX_EPOCH_MS of the epoch) or
the invalid sentinel INVALID_DATE. Field reads on the sentinel return None
and nothing derived from it raises.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import NamedTuple

from chronoform.constants import (
    MAX_EPOCH_MS,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)

from .calendar import civil_from_days, day_of_week, day_of_year, days_from_civil

__all__ = ["INVALID_DATE", "CalendarDateTime", "CalendarFields", "now"]


class CalendarFields(NamedTuple):
    """Broken-down fields of a valid CalendarDateTime."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


@dataclass(frozen=True, slots=True)
class CalendarDateTime:
    """Immutable point on the local calendar timeline.

    Prefer the constructors (from_fields, from_datetime, from_epoch_milliseconds):
    they map out-of-range input to INVALID_DATE, while direct construction raises.

    Attributes:
        epoch_ms: Milliseconds since 1970-01-01T00:00 local, or None when invalid

    Example:
        >>> value = CalendarDateTime.from_fields(2024, 1, 15, 14, 30)
        >>> value.year, value.month, value.day, value.hour, value.minute
        (2024, 1, 15, 14, 30)
        >>> value.day_of_week  # Monday
        1
        >>> CalendarDateTime.from_fields(2024, 1, 32).day  # rolls into February
        1
    """

    epoch_ms: int | None

    def __post_init__(self) -> None:
        """Validate the millisecond count at construction time.

        Raises:
            TypeError: If epoch_ms is neither an int nor None
            ValueError: If epoch_ms lies beyond MAX_EPOCH_MS of the epoch
        """
        if self.epoch_ms is None:
            return
        if not isinstance(self.epoch_ms, int) or isinstance(self.epoch_ms, bool):
            msg = f"epoch_ms must be an int or None, got {type(self.epoch_ms).__name__}"
            raise TypeError(msg)
        if abs(self.epoch_ms) > MAX_EPOCH_MS:
            msg = f"epoch_ms must be within {MAX_EPOCH_MS} of the epoch, got {self.epoch_ms}"
            raise ValueError(msg)

    @classmethod
    def invalid(cls) -> CalendarDateTime:
        """Return the invalid sentinel."""
        return INVALID_DATE

    @classmethod
    def from_epoch_milliseconds(cls, epoch_ms: int | float) -> CalendarDateTime:
        """Create a value from a millisecond count on the local timeline.

        Fractional milliseconds are truncated toward zero. NaN, infinities and
        counts beyond MAX_EPOCH_MS yield INVALID_DATE.
        """
        if isinstance(epoch_ms, float):
            if not math.isfinite(epoch_ms):
                return INVALID_DATE
            epoch_ms = math.trunc(epoch_ms)
        if abs(epoch_ms) > MAX_EPOCH_MS:
            return INVALID_DATE
        return cls(epoch_ms)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> CalendarDateTime:
        """Assemble a value from calendar fields, normalizing overflow.

        This is the single constructive path shared by arithmetic and parse
        resolution. Out-of-range fields carry into the next larger unit:
        month 13 is January of the following year, day 0 is the last day of
        the previous month, hour 24 is midnight of the next day.

        Returns:
            The assembled value, or INVALID_DATE if it leaves the valid range
        """
        carry_years, month_index = divmod(month - 1, 12)
        days = days_from_civil(year + carry_years, month_index + 1, 1) + day - 1
        total = (
            days * MS_PER_DAY
            + hour * MS_PER_HOUR
            + minute * MS_PER_MINUTE
            + second * MS_PER_SECOND
            + millisecond
        )
        return cls.from_epoch_milliseconds(total)

    @classmethod
    def from_datetime(cls, value: datetime | date) -> CalendarDateTime:
        """Convert a stdlib datetime or date.

        Aware datetimes are first converted to the host's local time; the
        result keeps only wall-clock fields. Microseconds are truncated to
        milliseconds. A plain date maps to local midnight.
        """
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone()
            return cls.from_fields(
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
                value.microsecond // 1000,
            )
        return cls.from_fields(value.year, value.month, value.day)

    @property
    def is_valid(self) -> bool:
        """True unless this is the invalid sentinel."""
        return self.epoch_ms is not None

    def fields(self) -> CalendarFields | None:
        """Broken-down calendar fields, or None for the invalid sentinel."""
        if self.epoch_ms is None:
            return None
        days, ms_of_day = divmod(self.epoch_ms, MS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, rest = divmod(ms_of_day, MS_PER_HOUR)
        minute, rest = divmod(rest, MS_PER_MINUTE)
        second, millisecond = divmod(rest, MS_PER_SECOND)
        return CalendarFields(year, month, day, hour, minute, second, millisecond)

    @property
    def year(self) -> int | None:
        """Astronomical year (0 = 1 BC)."""
        f = self.fields()
        return None if f is None else f.year

    @property
    def month(self) -> int | None:
        """Month 1-12."""
        f = self.fields()
        return None if f is None else f.month

    @property
    def day(self) -> int | None:
        """Day of month 1-31."""
        f = self.fields()
        return None if f is None else f.day

    @property
    def hour(self) -> int | None:
        """Hour 0-23."""
        f = self.fields()
        return None if f is None else f.hour

    @property
    def minute(self) -> int | None:
        f = self.fields()
        return None if f is None else f.minute

    @property
    def second(self) -> int | None:
        f = self.fields()
        return None if f is None else f.second

    @property
    def millisecond(self) -> int | None:
        f = self.fields()
        return None if f is None else f.millisecond

    @property
    def day_of_week(self) -> int | None:
        """Weekday 0 = Sunday ... 6 = Saturday (locale table order)."""
        if self.epoch_ms is None:
            return None
        return day_of_week(self.epoch_ms // MS_PER_DAY)

    @property
    def day_of_year(self) -> int | None:
        """1-based day within the year."""
        f = self.fields()
        return None if f is None else day_of_year(f.year, f.month, f.day)

    def to_datetime(self) -> datetime:
        """Convert to a naive stdlib datetime.

        Raises:
            ValueError: If the value is invalid or its year is outside 1..9999
        """
        f = self.fields()
        if f is None:
            msg = "Cannot convert the invalid date to datetime"
            raise ValueError(msg)
        return datetime(
            f.year, f.month, f.day, f.hour, f.minute, f.second, f.millisecond * 1000
        )

    def __repr__(self) -> str:
        f = self.fields()
        if f is None:
            return "CalendarDateTime(<invalid>)"
        return (
            f"CalendarDateTime({f.year:04d}-{f.month:02d}-{f.day:02d}"
            f"T{f.hour:02d}:{f.minute:02d}:{f.second:02d}.{f.millisecond:03d})"
        )


INVALID_DATE: CalendarDateTime = CalendarDateTime(None)


def now() -> CalendarDateTime:
    """Current local wall-clock moment, truncated to milliseconds."""
    return CalendarDateTime.from_datetime(datetime.now())
