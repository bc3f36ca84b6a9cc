"""Format engine.

Renders a date-time value through a compiled pattern: literal segments are
copied verbatim, token segments go through the formatter registered for
their symbol.

Python 3.13+.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from chronoform.core.coerce import to_date
from chronoform.core.value import CalendarFields
from chronoform.locales.data import LocaleData
from chronoform.locales.resolver import LocaleInput, resolve_locale
from chronoform.pattern.compiler import LiteralSegment, Segment, TokenSegment, compile_pattern

from .tokens import FORMATTERS

__all__ = ["DateFormatter", "create_formatter", "format_datetime"]

logger = logging.getLogger(__name__)


def _render(
    segments: Sequence[Segment], fields: CalendarFields | None, locale: LocaleData
) -> str:
    parts: list[str] = []
    for segment in segments:
        match segment:
            case LiteralSegment(text=text):
                parts.append(text)
            case TokenSegment(symbol=symbol, width=width):
                parts.append(FORMATTERS[symbol](fields, width, locale))
    return "".join(parts)


def format_datetime(value: object, pattern: str, *, locale: LocaleInput = None) -> str:
    """Format a date-time value with a pattern.

    Total for any string pattern: an input that does not coerce to a valid
    date renders every token as "NaN" while literals are kept.

    Args:
        value: Anything to_date() accepts
        pattern: Date-time pattern (e.g., "yyyy-MM-dd HH:mm")
        locale: LocaleData, locale code, or None for en-US

    Returns:
        Formatted string

    Raises:
        PatternTypeError: If pattern is not a str
        TypeError: If locale is not LocaleData, str or None

    Examples:
        >>> value = CalendarDateTime.from_fields(2024, 1, 15, 14, 30)
        >>> format_datetime(value, "EEEE, MMMM d, yyyy h:mm a")
        'Monday, January 15, 2024 2:30 PM'
        >>> format_datetime(INVALID_DATE, "yyyy-MM-dd")
        'NaN-NaN-NaN'
    """
    segments = compile_pattern(pattern)
    return _render(segments, to_date(value).fields(), resolve_locale(locale))


@dataclass(frozen=True, slots=True)
class DateFormatter:
    """Reusable formatter bound to one compiled pattern.

    Created by create_formatter(). Calling it formats a value exactly as
    format_datetime() would, so invalid inputs render "NaN" fields.

    Attributes:
        pattern: Source pattern
        segments: Compiled pattern
        locale: Locale used when a call does not supply one
    """

    pattern: str
    segments: tuple[Segment, ...]
    locale: LocaleData

    def __call__(self, value: object, *, locale: LocaleInput = None) -> str:
        """Format value, optionally overriding the locale for this call."""
        fields = to_date(value).fields()
        if fields is None:
            logger.debug("Formatter for %r received invalid input %r", self.pattern, value)
        active = self.locale if locale is None else resolve_locale(locale)
        return _render(self.segments, fields, active)


def create_formatter(pattern: str, *, locale: LocaleInput = None) -> DateFormatter:
    """Create a reusable formatter for a pattern.

    The pattern is validated and compiled once, up front.

    Args:
        pattern: Date-time pattern
        locale: Default locale for every call

    Returns:
        DateFormatter callable

    Raises:
        PatternTypeError: If pattern is not a str
        TypeError: If locale is not LocaleData, str or None

    Example:
        >>> fmt = create_formatter("yyyy/MM/dd")
        >>> fmt(datetime(2024, 3, 5))
        '2024/03/05'
        >>> fmt("garbage")
        'NaN/NaN/NaN'
    """
    segments = compile_pattern(pattern)
    return DateFormatter(pattern=pattern, segments=segments, locale=resolve_locale(locale))
