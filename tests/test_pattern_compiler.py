"""Tests for the pattern compiler.

Covers token runs, literal merging, CLDR quote escaping, unrecognized
letters, caching, and type checking of the pattern argument.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from chronoform.diagnostics import PatternTypeError
from chronoform.enums import TokenSymbol
from chronoform.pattern import (
    LiteralSegment,
    TokenSegment,
    clear_pattern_cache,
    compile_pattern,
)

Y = TokenSymbol.YEAR
M = TokenSymbol.MONTH
D = TokenSymbol.DAY


def _rendered(pattern: str) -> list[str]:
    return [
        s.token if isinstance(s, TokenSegment) else f"<{s.text}>"
        for s in compile_pattern(pattern)
    ]


class TestTokens:
    """Runs of recognized letters become tokens."""

    def test_iso_date(self) -> None:
        assert compile_pattern("yyyy-MM-dd") == (
            TokenSegment(Y, 4),
            LiteralSegment("-"),
            TokenSegment(M, 2),
            LiteralSegment("-"),
            TokenSegment(D, 2),
        )

    def test_adjacent_different_letters(self) -> None:
        assert _rendered("yyyyMMdd") == ["yyyy", "MM", "dd"]

    def test_punctuation_without_spaces(self) -> None:
        assert _rendered("d.MM.yyyy") == ["d", "<.>", "MM", "<.>", "yyyy"]

    def test_every_symbol(self) -> None:
        segments = compile_pattern("GyMdDEHhmsSa")
        assert [s.symbol for s in segments if isinstance(s, TokenSegment)] == list(TokenSymbol)

    def test_long_runs_keep_width(self) -> None:
        assert compile_pattern("SSSSSS") == (TokenSegment(TokenSymbol.FRACTION, 6),)

    def test_token_property(self) -> None:
        assert TokenSegment(M, 4).token == "MMMM"


class TestLiterals:
    """Everything else is literal text, merged into runs."""

    def test_unrecognized_letters_are_literal(self) -> None:
        assert _rendered("yyyy 'at' T Z") == ["yyyy", "< at T Z>"]

    def test_unrecognized_letters_merge_with_neighbours(self) -> None:
        assert compile_pattern("xyz") == (
            LiteralSegment("x"),
            TokenSegment(Y, 1),
            LiteralSegment("z"),
        )

    def test_empty_pattern(self) -> None:
        assert compile_pattern("") == ()


class TestQuotes:
    """CLDR quote escaping."""

    def test_quoted_letters_are_literal(self) -> None:
        assert _rendered("yyyy-MM-dd'T'HH:mm") == [
            "yyyy",
            "<->",
            "MM",
            "<->",
            "dd",
            "<T>",
            "HH",
            "<:>",
            "mm",
        ]

    def test_doubled_quote_outside(self) -> None:
        assert _rendered("h''mm") == ["h", "<'>", "mm"]

    def test_doubled_quote_inside(self) -> None:
        assert _rendered("h 'o''clock' a") == ["h", "< o'clock >", "a"]

    def test_apostrophe_prefix(self) -> None:
        assert _rendered("'It''s 'yyyy") == ["<It's >", "yyyy"]

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert _rendered("yyyy 'MM dd") == ["yyyy", "< MM dd>"]

    def test_lone_quote(self) -> None:
        assert compile_pattern("'") == ()


class TestCaching:
    """Compilation is cached by exact pattern string."""

    def test_same_tuple_returned(self) -> None:
        assert compile_pattern("yyyy-MM") is compile_pattern("yyyy-MM")

    def test_cache_clear(self) -> None:
        first = compile_pattern("dd/MM")
        clear_pattern_cache()
        second = compile_pattern("dd/MM")
        assert first == second

    @given(pattern=st.text(max_size=40))
    @settings(max_examples=300)
    def test_never_fails_and_is_deterministic(self, pattern: str) -> None:
        """Any string compiles, twice to the same result."""
        first = compile_pattern(pattern)
        clear_pattern_cache()
        assert compile_pattern(pattern) == first
        for previous, current in zip(first, first[1:], strict=False):
            assert not (
                isinstance(previous, LiteralSegment) and isinstance(current, LiteralSegment)
            )


class TestTypeChecking:
    """Non-string patterns are programmer errors."""

    @pytest.mark.parametrize("bad", [None, 42, b"yyyy", ["yyyy"]])
    def test_non_string_raises(self, bad: object) -> None:
        with pytest.raises(PatternTypeError, match="Pattern must be a string"):
            compile_pattern(bad)  # type: ignore[arg-type]

    def test_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            compile_pattern(3.14)  # type: ignore[arg-type]
