"""Diagnostic system for chronoform errors.

Provides structured error diagnostics with codes, positions and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ChronoError, ChronoParseError, PatternTypeError
from .templates import ErrorTemplate

__all__ = [
    "ChronoError",
    "ChronoParseError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "PatternTypeError",
]
