"""Pattern compiler.

Turns a date-time pattern such as "yyyy-MM-dd'T'HH:mm" into an immutable
tuple of segments consumed by both the format and parse engines:

    "d.MM.yyyy" -> (d, ".", MM, ".", yyyy)

Quote rules follow CLDR:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote
    - An unterminated quote runs to the end of the pattern

Only letters in TokenSymbol form tokens. Every other character, including
unrecognized letters, is literal text. Adjacent literal characters are
merged into a single LiteralSegment.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias
import functools
from dataclasses import dataclass

from chronoform.constants import MAX_PATTERN_CACHE_SIZE
from chronoform.diagnostics import ErrorTemplate, PatternTypeError
from chronoform.enums import TokenSymbol

__all__ = [
    "LiteralSegment",
    "Segment",
    "TokenSegment",
    "clear_pattern_cache",
    "compile_pattern",
    "require_pattern",
]

_SYMBOLS: frozenset[str] = frozenset(TokenSymbol)


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Verbatim text in a compiled pattern."""

    text: str


@dataclass(frozen=True, slots=True)
class TokenSegment:
    """A run of one repeated pattern letter.

    Attributes:
        symbol: Pattern letter
        width: Repeat count (selects padding, digit counts and name widths)
    """

    symbol: TokenSymbol
    width: int

    @property
    def token(self) -> str:
        """The token as written in the pattern (e.g., "yyyy")."""
        return self.symbol * self.width


Segment: TypeAlias = LiteralSegment | TokenSegment


def require_pattern(pattern: object) -> str:
    """Return pattern unchanged, or raise PatternTypeError for non-strings.

    Raises:
        PatternTypeError: If pattern is not a str
    """
    if not isinstance(pattern, str):
        raise PatternTypeError(ErrorTemplate.pattern_not_string(type(pattern).__name__))
    return pattern


def compile_pattern(pattern: str) -> tuple[Segment, ...]:
    """Compile a pattern into segments.

    Never fails for a string. Results are cached by the exact pattern string,
    so compiling the same pattern twice returns the same tuple.

    Args:
        pattern: Date-time pattern

    Returns:
        Tuple of LiteralSegment and TokenSegment

    Raises:
        PatternTypeError: If pattern is not a str

    Examples:
        >>> compile_pattern("yyyy-MM")[0]
        TokenSegment(symbol=<TokenSymbol.YEAR: 'y'>, width=4)
        >>> len(compile_pattern("yyyy-MM"))
        3
        >>> compile_pattern("h 'o''clock' a")[1]
        LiteralSegment(text=" o'clock ")
    """
    return _compile_cached(require_pattern(pattern))


def clear_pattern_cache() -> None:
    """Clear the compiled pattern cache."""
    _compile_cached.cache_clear()


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def _compile_cached(pattern: str) -> tuple[Segment, ...]:
    segments: list[Segment] = []
    literal_chars: list[str] = []
    i = 0
    n = len(pattern)

    def flush_literal() -> None:
        if literal_chars:
            segments.append(LiteralSegment("".join(literal_chars)))
            literal_chars.clear()

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' outside quoted section -> literal single quote
            if i + 1 < n and pattern[i + 1] == "'":
                literal_chars.append("'")
                i += 2
                continue

            i += 1  # Skip opening quote
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1  # Closing quote
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1
            continue

        if char in _SYMBOLS:
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            flush_literal()
            segments.append(TokenSegment(TokenSymbol(char), j - i))
            i = j
            continue

        literal_chars.append(char)
        i += 1

    flush_literal()
    return tuple(segments)
