"""chronoform exception hierarchy with structured diagnostics.

Two disjoint error classes:
    - Programmer errors (wrong argument types) are raised immediately.
    - Data invalidity (malformed input strings) is never raised; the parse
      engine returns the invalid sentinel and, on request, ChronoParseError
      instances in a tuple.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ChronoError(Exception):
    """Base exception for all chronoform errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ChronoError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PatternTypeError(ChronoError, TypeError):
    """Pattern argument is not a string.

    Raised eagerly by every entry point that accepts a pattern. Subclasses
    TypeError so callers can treat it as an ordinary argument-type error.
    """


class ChronoParseError(ChronoError):
    """Description of a failed pattern parse.

    Returned (never raised) by try_parse_datetime(), mirroring the
    tuple-return convention of the parsing API.

    Attributes:
        input_value: The string that failed to parse
        pattern: The pattern it was parsed against
        position: Input offset where the failure was detected (-1 if unknown)
        segment_index: Index of the failing compiled segment (-1 if not segment-specific)

    Example:
        >>> value, errors = try_parse_datetime("2024-13-01", "yyyy-MM-dd")
        >>> if errors:
        ...     print(errors[0].diagnostic.code.name, errors[0].position)
        TOKEN_MISMATCH 5
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        pattern: str = "",
        position: int = -1,
        segment_index: int = -1,
    ) -> None:
        """Initialize ChronoParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            pattern: The pattern used for parsing
            position: Input offset where the failure was detected
            segment_index: Index of the failing compiled segment
        """
        super().__init__(message)
        self.input_value = input_value
        self.pattern = pattern
        self.position = position
        self.segment_index = segment_index
