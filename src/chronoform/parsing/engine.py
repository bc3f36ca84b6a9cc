"""Parse engine.

Walks a compiled pattern over an input string with a single cursor:

    - a literal segment must appear verbatim at the cursor
    - a token segment is handed to the parser registered for its symbol
    - after the last segment the cursor must sit at the end of the input

The accumulated components are then resolved against a reference date.
Malformed input never raises; it yields INVALID_DATE, and
try_parse_datetime() additionally reports why.

Python 3.13+.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from chronoform.core.calendar import days_in_month, days_in_year
from chronoform.core.coerce import to_date
from chronoform.core.value import INVALID_DATE, CalendarDateTime, now
from chronoform.diagnostics import ChronoParseError, Diagnostic, ErrorTemplate
from chronoform.locales.data import LocaleData
from chronoform.locales.resolver import LocaleInput, resolve_locale
from chronoform.pattern.compiler import LiteralSegment, Segment, TokenSegment, compile_pattern

from .accumulator import ComponentAccumulator
from .options import ParseOptions
from .tokens import PARSERS

__all__ = [
    "DateParser",
    "create_parser",
    "parse_datetime",
    "try_parse_datetime",
]

logger = logging.getLogger(__name__)


class _Failure(NamedTuple):
    diagnostic: Diagnostic
    segment_index: int = -1


def _match_segments(
    text: str, segments: Sequence[Segment], locale: LocaleData, acc: ComponentAccumulator
) -> _Failure | None:
    position = 0
    for index, segment in enumerate(segments):
        match segment:
            case LiteralSegment(text=literal):
                if not text.startswith(literal, position):
                    return _Failure(ErrorTemplate.literal_mismatch(literal, position), index)
                position += len(literal)
            case TokenSegment(symbol=symbol, width=width):
                parser = PARSERS.get(symbol)
                if parser is None:
                    return _Failure(ErrorTemplate.unknown_token(segment.token, position), index)
                end = parser(text, position, width, locale, acc)
                if end is None:
                    return _Failure(ErrorTemplate.token_mismatch(segment.token, position), index)
                position = end
    if position != len(text):
        return _Failure(ErrorTemplate.trailing_input(position, text[position:]))
    return None


def _resolve(
    acc: ComponentAccumulator, reference: CalendarDateTime
) -> CalendarDateTime | _Failure:
    """Turn accumulated components into a value.

    Unset year, month and day come from the reference date; unset time
    fields are zero.
    """
    ref = reference.fields()
    if ref is None and (acc.year is None or (acc.day_of_year is None and acc.month is None)):
        return _Failure(ErrorTemplate.reference_invalid())

    year = acc.year if acc.year is not None else ref.year  # type: ignore[union-attr]
    if acc.era_negative and year > 0:
        year = 1 - year

    if acc.hour12 is not None:
        hour = acc.hour12 % 12 + (12 if acc.is_pm else 0)
    else:
        hour = acc.hour or 0

    if acc.day_of_year is not None:
        if acc.day_of_year > days_in_year(year):
            return _Failure(ErrorTemplate.day_of_year_out_of_range(year, acc.day_of_year))
        month, day = 1, acc.day_of_year
    else:
        month = acc.month + 1 if acc.month is not None else ref.month  # type: ignore[union-attr]
        last_day = days_in_month(year, month)
        if acc.day is not None:
            day = acc.day
        elif ref is not None:
            day = min(ref.day, last_day)
        else:
            day = 1
        if day > last_day:
            return _Failure(ErrorTemplate.day_out_of_range(year, month, day))

    value = CalendarDateTime.from_fields(
        year, month, day, hour, acc.minute or 0, acc.second or 0, acc.millisecond or 0
    )
    if not value.is_valid:
        return _Failure(ErrorTemplate.out_of_range())
    return value


def _run(
    text: object,
    pattern: str,
    segments: Sequence[Segment],
    options: ParseOptions,
) -> tuple[CalendarDateTime, tuple[ChronoParseError, ...]]:
    locale = resolve_locale(options.locale)

    if not isinstance(text, str):
        outcome: CalendarDateTime | _Failure = _Failure(
            ErrorTemplate.input_not_string(type(text).__name__)
        )
    else:
        acc = ComponentAccumulator()
        failure = _match_segments(text, segments, locale, acc)
        if failure is not None:
            outcome = failure
        else:
            reference = (
                now() if options.reference_date is None else to_date(options.reference_date)
            )
            outcome = _resolve(acc, reference)

    if isinstance(outcome, CalendarDateTime):
        return (outcome, ())

    diagnostic, segment_index = outcome
    logger.debug(
        "Parse of %r with pattern %r failed: %s", text, pattern, diagnostic.message
    )
    error = ChronoParseError(
        diagnostic,
        input_value=str(text),
        pattern=pattern,
        position=-1 if diagnostic.position is None else diagnostic.position,
        segment_index=segment_index,
    )
    return (INVALID_DATE, (error,))


def try_parse_datetime(
    text: str,
    pattern: str,
    *,
    locale: LocaleInput = None,
    reference_date: object = None,
) -> tuple[CalendarDateTime, tuple[ChronoParseError, ...]]:
    """Parse a string with a pattern, reporting why parsing failed.

    Never raises for malformed input. Errors are returned in tuple.

    Args:
        text: Input string
        pattern: Date-time pattern
        locale: LocaleData, locale code, or None for en-US
        reference_date: Supplies year, month and day missing from the
            pattern (default: now())

    Returns:
        Tuple of (result, errors):
        - result: Parsed value, or INVALID_DATE if parsing failed
        - errors: Tuple of ChronoParseError (empty tuple on success)

    Raises:
        PatternTypeError: If pattern is not a str
        TypeError: If locale is not LocaleData, str or None

    Examples:
        >>> value, errors = try_parse_datetime("2024-01-15", "yyyy-MM-dd")
        >>> value.day, errors
        (15, ())

        >>> value, errors = try_parse_datetime("2024/01/15", "yyyy-MM-dd")
        >>> value.is_valid
        False
        >>> errors[0].diagnostic.code.name, errors[0].position
        ('LITERAL_MISMATCH', 4)
    """
    segments = compile_pattern(pattern)
    return _run(text, pattern, segments, ParseOptions(locale, reference_date))


def parse_datetime(
    text: str,
    pattern: str,
    *,
    locale: LocaleInput = None,
    reference_date: object = None,
) -> CalendarDateTime:
    """Parse a string with a pattern.

    Fields the pattern does not supply are filled in: year, month and day
    from reference_date (default: now()), time fields with zero.

    Args:
        text: Input string
        pattern: Date-time pattern
        locale: LocaleData, locale code, or None for en-US
        reference_date: Anything to_date() accepts

    Returns:
        Parsed value, or INVALID_DATE if the input does not match

    Raises:
        PatternTypeError: If pattern is not a str
        TypeError: If locale is not LocaleData, str or None

    Examples:
        >>> parse_datetime("January 14:30", "MMMM HH:mm", reference_date="2024-06-15")
        CalendarDateTime(2024-01-01T14:30:00.000)
        >>> parse_datetime("0100 BC", "yyyy G").year
        -99
        >>> parse_datetime("2024-02-30", "yyyy-MM-dd").is_valid
        False
    """
    value, _ = try_parse_datetime(text, pattern, locale=locale, reference_date=reference_date)
    return value


@dataclass(frozen=True, slots=True)
class DateParser:
    """Reusable parser bound to one compiled pattern.

    Created by create_parser(). Per-call options override the factory
    options field by field.

    Attributes:
        pattern: Source pattern
        segments: Compiled pattern
        options: Factory defaults
    """

    pattern: str
    segments: tuple[Segment, ...]
    options: ParseOptions

    def __call__(
        self, text: str, *, locale: LocaleInput = None, reference_date: object = None
    ) -> CalendarDateTime:
        """Parse text; INVALID_DATE on failure."""
        value, _ = self.try_parse(text, locale=locale, reference_date=reference_date)
        return value

    def try_parse(
        self, text: str, *, locale: LocaleInput = None, reference_date: object = None
    ) -> tuple[CalendarDateTime, tuple[ChronoParseError, ...]]:
        """Parse text, returning (result, errors) like try_parse_datetime()."""
        options = self.options.merged(ParseOptions(locale, reference_date))
        return _run(text, self.pattern, self.segments, options)


def create_parser(
    pattern: str, *, locale: LocaleInput = None, reference_date: object = None
) -> DateParser:
    """Create a reusable parser for a pattern.

    The pattern is validated and compiled once, up front.

    Args:
        pattern: Date-time pattern
        locale: Default locale for every call
        reference_date: Default reference date for every call

    Returns:
        DateParser callable

    Raises:
        PatternTypeError: If pattern is not a str
        TypeError: If locale is not LocaleData, str or None

    Example:
        >>> parse = create_parser("dd.MM.yyyy")
        >>> parse("15.01.2024").month
        1
        >>> parse("15/01/2024").is_valid
        False
    """
    segments = compile_pattern(pattern)
    resolve_locale(locale)
    return DateParser(
        pattern=pattern,
        segments=segments,
        options=ParseOptions(locale=locale, reference_date=reference_date),
    )
