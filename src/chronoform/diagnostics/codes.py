"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for pattern parsing failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Parse failures (input does not match the pattern)
        4100-4199: Resolution failures (components do not form a valid date)
    """

    # Parse failures (4000-4099)
    LITERAL_MISMATCH = 4001
    TOKEN_MISMATCH = 4002
    TRAILING_INPUT = 4003
    UNKNOWN_TOKEN = 4004
    INPUT_NOT_STRING = 4008

    # Resolution failures (4100-4199)
    DAY_OUT_OF_RANGE = 4105
    DAY_OF_YEAR_OUT_OF_RANGE = 4106
    OUT_OF_RANGE = 4107
    REFERENCE_INVALID = 4108


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Input offset where the failure was detected (None if not applicable)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[LITERAL_MISMATCH]: Expected '-' at position 4
              --> position 4
              = help: Check separators against the pattern

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  --> position {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
