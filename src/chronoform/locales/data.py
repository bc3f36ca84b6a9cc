"""Locale name tables.

A LocaleData bundles the four name tables the engines need (eras, months,
weekdays, day periods). Tables are plain tuples indexed exactly as the
engines index them:

    era:        0 = before the epoch of the era (BC), 1 = AD
    month:      0 = January ... 11 = December
    weekday:    0 = Sunday ... 6 = Saturday
    day_period: 0 = am, 1 = pm

EN_US is built in and always available without touching CLDR data. Other
locales are built from Babel by chronoform.locales.loading.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from chronoform.constants import DEFAULT_LOCALE_CODE
from chronoform.enums import LocaleWidth

__all__ = [
    "DEFAULT_LOCALE",
    "EN_US",
    "ENGLISH_ERA_ALIASES",
    "LocaleData",
    "NameTable",
]


@dataclass(frozen=True, slots=True)
class NameTable:
    """Names of one calendar field in all three widths.

    Attributes:
        narrow: Shortest forms ("J", "M")
        abbreviated: Abbreviated forms ("Jan", "Mon")
        wide: Full forms ("January", "Monday")
    """

    narrow: tuple[str, ...]
    abbreviated: tuple[str, ...]
    wide: tuple[str, ...]

    def for_width(self, width: LocaleWidth) -> tuple[str, ...]:
        """Return the names for one width."""
        match width:
            case LocaleWidth.NARROW:
                return self.narrow
            case LocaleWidth.WIDE:
                return self.wide
            case _:
                return self.abbreviated

    def all_widths(self) -> tuple[tuple[str, ...], ...]:
        """All width tuples, abbreviated first."""
        return (self.abbreviated, self.wide, self.narrow)


@dataclass(frozen=True, slots=True)
class LocaleData:
    """Immutable locale name data shared by reference across calls.

    Attributes:
        code: POSIX locale code the tables were built for
        era: Era names (2 entries per width)
        month: Month names (12 entries per width)
        weekday: Weekday names, Sunday first (7 entries per width)
        day_period: am/pm names (2 entries per width)
        era_aliases: Extra era designators accepted by the parser,
            as (negative era aliases, positive era aliases)
    """

    code: str
    era: NameTable
    month: NameTable
    weekday: NameTable
    day_period: NameTable
    era_aliases: tuple[tuple[str, ...], tuple[str, ...]] = field(default=((), ()))


# Accepted by the era parser for every locale.
ENGLISH_ERA_ALIASES: tuple[tuple[str, ...], tuple[str, ...]] = (
    ("BC", "BCE", "B.C.", "B.C.E.", "Before Christ", "Before Common Era"),
    ("AD", "CE", "A.D.", "C.E.", "Anno Domini", "Common Era"),
)

EN_US: LocaleData = LocaleData(
    code=DEFAULT_LOCALE_CODE,
    era=NameTable(
        narrow=("B", "A"),
        abbreviated=("BC", "AD"),
        wide=("Before Christ", "Anno Domini"),
    ),
    month=NameTable(
        narrow=("J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
        abbreviated=(
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        wide=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
    ),
    weekday=NameTable(
        narrow=("S", "M", "T", "W", "T", "F", "S"),
        abbreviated=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        wide=(
            "Sunday", "Monday", "Tuesday", "Wednesday",
            "Thursday", "Friday", "Saturday",
        ),
    ),
    day_period=NameTable(
        narrow=("a", "p"),
        abbreviated=("AM", "PM"),
        wide=("AM (morning)", "PM (afternoon)"),
    ),
    era_aliases=ENGLISH_ERA_ALIASES,
)

DEFAULT_LOCALE: LocaleData = EN_US
