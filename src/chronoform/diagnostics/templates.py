"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistently formatted, and documents
    every failure case in one place.
    """

    @staticmethod
    def pattern_not_string(received_type: str) -> str:
        """Pattern argument was not a string (programmer error).

        Args:
            received_type: Name of the type that was passed

        Returns:
            Message for PatternTypeError
        """
        return f"Pattern must be a string, got {received_type}"

    @staticmethod
    def locale_not_supported(received_type: str) -> str:
        """locale= argument was neither LocaleData, str nor None.

        Args:
            received_type: Name of the type that was passed

        Returns:
            Message for TypeError
        """
        return f"locale must be LocaleData, str or None, got {received_type}"

    @staticmethod
    def input_not_string(received_type: str) -> Diagnostic:
        """Parse input was not a string.

        Args:
            received_type: Name of the type that was passed

        Returns:
            Diagnostic for INPUT_NOT_STRING
        """
        msg = f"Expected string input, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.INPUT_NOT_STRING,
            message=msg,
            hint="Convert the value to str before parsing",
        )

    @staticmethod
    def literal_mismatch(literal: str, position: int) -> Diagnostic:
        """Input does not contain the pattern literal at the cursor.

        Args:
            literal: Literal text the pattern requires
            position: Cursor offset in the input

        Returns:
            Diagnostic for LITERAL_MISMATCH
        """
        msg = f"Expected {literal!r} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.LITERAL_MISMATCH,
            message=msg,
            position=position,
            hint="Check separators and quoted text against the pattern",
        )

    @staticmethod
    def token_mismatch(token: str, position: int) -> Diagnostic:
        """Token parser could not match at the cursor.

        Args:
            token: Pattern token (e.g., "MM", "yyyy")
            position: Cursor offset in the input

        Returns:
            Diagnostic for TOKEN_MISMATCH
        """
        msg = f"Input does not match token {token!r} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_MISMATCH,
            message=msg,
            position=position,
            hint="Check digit counts, value ranges, and locale names",
        )

    @staticmethod
    def unknown_token(token: str, position: int) -> Diagnostic:
        """No parser registered for a token symbol.

        Args:
            token: Pattern token
            position: Cursor offset in the input

        Returns:
            Diagnostic for UNKNOWN_TOKEN
        """
        msg = f"No parser for token {token!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TOKEN,
            message=msg,
            position=position,
        )

    @staticmethod
    def trailing_input(position: int, remainder: str) -> Diagnostic:
        """Pattern finished before the input was consumed.

        Args:
            position: Offset where unconsumed input starts
            remainder: The unconsumed text

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        msg = f"Unexpected trailing input {remainder!r} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=msg,
            position=position,
            hint="Remove the extra text or extend the pattern",
        )

    @staticmethod
    def day_out_of_range(year: int, month: int, day: int) -> Diagnostic:
        """Parsed day does not exist in the resolved month.

        Args:
            year: Resolved year
            month: Resolved month (1-12)
            day: Parsed day of month

        Returns:
            Diagnostic for DAY_OUT_OF_RANGE
        """
        msg = f"Day {day} does not exist in {year:04d}-{month:02d}"
        return Diagnostic(code=DiagnosticCode.DAY_OUT_OF_RANGE, message=msg)

    @staticmethod
    def day_of_year_out_of_range(year: int, day_of_year: int) -> Diagnostic:
        """Parsed day of year does not exist in the resolved year.

        Args:
            year: Resolved year
            day_of_year: Parsed day of year

        Returns:
            Diagnostic for DAY_OF_YEAR_OUT_OF_RANGE
        """
        msg = f"Day of year {day_of_year} does not exist in {year}"
        return Diagnostic(code=DiagnosticCode.DAY_OF_YEAR_OUT_OF_RANGE, message=msg)

    @staticmethod
    def out_of_range() -> Diagnostic:
        """Resolved components fall outside the representable timeline.

        Returns:
            Diagnostic for OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.OUT_OF_RANGE,
            message="Resolved date is outside the representable range",
        )

    @staticmethod
    def reference_invalid() -> Diagnostic:
        """Pattern leaves date fields unset and the reference date is invalid.

        Returns:
            Diagnostic for REFERENCE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_INVALID,
            message="Reference date is invalid; cannot fill fields missing from the pattern",
            hint="Pass a valid reference_date or include year, month and day tokens",
        )
