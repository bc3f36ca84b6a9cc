"""Component accumulator.

Mutable record of the fields a parse has seen so far. One accumulator is
created per parse call and owned by that call; token parsers write into it
and the engine resolves it into a CalendarDateTime once every segment has
matched.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["ComponentAccumulator"]


@dataclass(slots=True)
class ComponentAccumulator:
    """Parsed components, all unset until a token parser writes them.

    Attributes:
        era_negative: A negative era (BC) was matched; applied at resolution
        year: Year as written in the input
        month: Month index 0-11
        day: Day of month
        day_of_year: Day of year 1-366
        hour: Hour 0-23 from an H token
        hour12: Hour 1-12 from an h token
        is_pm: Day period was pm
        minute: Minute 0-59
        second: Second 0-59
        millisecond: Millisecond 0-999
        day_parsed: day or day_of_year came from the input
    """

    era_negative: bool = False
    year: int | None = None
    month: int | None = None
    day: int | None = None
    day_of_year: int | None = None
    hour: int | None = None
    hour12: int | None = None
    is_pm: bool = False
    minute: int | None = None
    second: int | None = None
    millisecond: int | None = None
    day_parsed: bool = False

    def reset_day(self) -> None:
        """Reset day to 1 unless a day was parsed explicitly.

        Month and era tokens move the date to the start of the month, so
        "MMMM" on "January" with a mid-month reference lands on January 1.
        """
        if not self.day_parsed:
            self.day = 1
