"""Pattern-based date-time parsing.

parse_datetime() returns INVALID_DATE on failure; try_parse_datetime()
follows the (result, errors) tuple convention and never raises for data.
"""

from .accumulator import ComponentAccumulator
from .engine import DateParser, create_parser, parse_datetime, try_parse_datetime
from .options import ParseOptions
from .tokens import PARSERS, FieldParser

__all__ = [
    "PARSERS",
    "ComponentAccumulator",
    "DateParser",
    "FieldParser",
    "ParseOptions",
    "create_parser",
    "parse_datetime",
    "try_parse_datetime",
]
