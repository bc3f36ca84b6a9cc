"""chronoform - calendar date-time toolkit with a bidirectional pattern engine.

Formats date-time values to strings and parses strings back through the same
token patterns ("yyyy-MM-dd HH:mm:ss", "EEEE, MMMM d, y G"), with CLDR
locale names for eras, months, weekdays and day periods. Around the engine
sit calendar arithmetic, truncation and comparison helpers.

Public API:
    format_datetime - Format a value with a pattern
    create_formatter - Reusable formatter bound to one pattern
    parse_datetime - Parse a string with a pattern (INVALID_DATE on failure)
    try_parse_datetime - Parse returning (result, errors)
    create_parser - Reusable parser bound to one pattern
    compile_pattern - Pattern to segment tuple (cached)
    CalendarDateTime - Immutable point on the local calendar timeline
    load_locale - Locale name tables from Babel CLDR data

Exceptions:
    ChronoError - Base exception class
    PatternTypeError - Pattern argument is not a string
    ChronoParseError - Parse failure description (returned, never raised)

Submodules:
    chronoform.arithmetic - add / subtract / diff / truncate / set helpers
    chronoform.comparison - is_before / is_same_* / is_between / clamp / compare
    chronoform.locales - Locale name tables and resolution
    chronoform.diagnostics - Error types and diagnostic codes
"""

from .arithmetic import (
    add,
    add_days,
    add_hours,
    add_milliseconds,
    add_minutes,
    add_months,
    add_seconds,
    add_years,
    diff,
    diff_days,
    diff_hours,
    diff_milliseconds,
    diff_minutes,
    diff_months,
    diff_seconds,
    diff_years,
    end_of,
    is_exists,
    set_day,
    set_hours,
    set_milliseconds,
    set_minutes,
    set_month,
    set_seconds,
    set_year,
    start_of,
    sub_days,
    sub_hours,
    sub_milliseconds,
    sub_minutes,
    sub_months,
    sub_seconds,
    sub_years,
    subtract,
    truncate_to_unit,
)
from .comparison import (
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
from .core import (
    INVALID_DATE,
    CalendarDateTime,
    is_valid_date,
    is_valid_date_input,
    is_valid_date_or_number,
    is_valid_number,
    now,
    to_date,
)
from .diagnostics import ChronoError, ChronoParseError, PatternTypeError
from .enums import LocaleWidth, TimeUnit, TokenSymbol
from .formatting import create_formatter, format_datetime
from .locales import DEFAULT_LOCALE, LocaleData, load_locale
from .parsing import ParseOptions, create_parser, parse_datetime, try_parse_datetime
from .pattern import compile_pattern

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("chronoform")
except PackageNotFoundError:
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE",
    "INVALID_DATE",
    "CalendarDateTime",
    "ChronoError",
    "ChronoParseError",
    "LocaleData",
    "LocaleWidth",
    "ParseOptions",
    "PatternTypeError",
    "TimeUnit",
    "TokenSymbol",
    "__version__",
    "add",
    "add_days",
    "add_hours",
    "add_milliseconds",
    "add_minutes",
    "add_months",
    "add_seconds",
    "add_years",
    "clamp",
    "compare",
    "compile_pattern",
    "create_formatter",
    "create_parser",
    "diff",
    "diff_days",
    "diff_hours",
    "diff_milliseconds",
    "diff_minutes",
    "diff_months",
    "diff_seconds",
    "diff_years",
    "end_of",
    "format_datetime",
    "is_after",
    "is_after_or_equal",
    "is_before",
    "is_before_or_equal",
    "is_between",
    "is_equal",
    "is_exists",
    "is_future",
    "is_past",
    "is_same",
    "is_same_day",
    "is_same_hour",
    "is_same_minute",
    "is_same_month",
    "is_same_second",
    "is_same_year",
    "is_valid_date",
    "is_valid_date_input",
    "is_valid_date_or_number",
    "is_valid_number",
    "load_locale",
    "max_date",
    "min_date",
    "now",
    "parse_datetime",
    "set_day",
    "set_hours",
    "set_milliseconds",
    "set_minutes",
    "set_month",
    "set_seconds",
    "set_year",
    "start_of",
    "sub_days",
    "sub_hours",
    "sub_milliseconds",
    "sub_minutes",
    "sub_months",
    "sub_seconds",
    "sub_years",
    "subtract",
    "to_date",
    "truncate_to_unit",
    "try_parse_datetime",
]
