"""Parse options with field-by-field precedence.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from chronoform.locales.resolver import LocaleInput

__all__ = ["ParseOptions"]


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options shared by parse_datetime() and parsers from create_parser().

    Attributes:
        locale: LocaleData, locale code, or None for en-US
        reference_date: Supplies year, month and day absent from the
            pattern; anything to_date() accepts, or None for now()
    """

    locale: LocaleInput = None
    reference_date: object = None

    def merged(self, overrides: ParseOptions) -> ParseOptions:
        """Return options where every field set in overrides wins.

        Example:
            >>> base = ParseOptions(locale="ja", reference_date="2024-01-01")
            >>> base.merged(ParseOptions(locale="fr")).reference_date
            '2024-01-01'
        """
        return ParseOptions(
            locale=self.locale if overrides.locale is None else overrides.locale,
            reference_date=(
                self.reference_date
                if overrides.reference_date is None
                else overrides.reference_date
            ),
        )
