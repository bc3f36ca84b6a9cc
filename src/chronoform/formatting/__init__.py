"""Pattern-based date-time formatting."""

from .engine import DateFormatter, create_formatter, format_datetime
from .tokens import FORMATTERS, FieldFormatter

__all__ = [
    "FORMATTERS",
    "DateFormatter",
    "FieldFormatter",
    "create_formatter",
    "format_datetime",
]
