"""Shared constants for chronoform.

Centralized configuration constants used across the value, locale, pattern,
formatting and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Value range: Limits of the representable calendar timeline
- Markers: String rendered for invalid fields
- Parsing: Two-digit year pivot and digit run limit
- Cache limits: Memory bounds for caching subsystems
- Locale: Default locale identity

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Value range
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MAX_EPOCH_MS",
    # Markers
    "INVALID_FIELD",
    # Parsing
    "TWO_DIGIT_YEAR_PIVOT",
    "MAX_DIGIT_RUN",
    # Cache limits
    "MAX_PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Locale
    "DEFAULT_LOCALE_CODE",
]

# ============================================================================
# VALUE RANGE
# ============================================================================

MS_PER_SECOND: int = 1000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR

# 100,000,000 days either side of 1970-01-01 (about 273,790 years).
# Values beyond this are the invalid sentinel, never an exception.
MAX_EPOCH_MS: int = 100_000_000 * MS_PER_DAY

# ============================================================================
# MARKERS
# ============================================================================

# Rendered by every token formatter when the value is invalid.
INVALID_FIELD: str = "NaN"

# ============================================================================
# PARSING
# ============================================================================

# Two-digit years below the pivot land in 2000-2049, the rest in 1950-1999.
TWO_DIGIT_YEAR_PIVOT: int = 50

# Longest run of digits a numeric token parser converts. Valid years need at
# most six digits; longer runs (even zero-padded ones) fail the token.
MAX_DIGIT_RUN: int = 32

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum compiled patterns kept by the pattern compiler.
# Applications use a handful of patterns; 512 leaves ample headroom for
# user-supplied patterns without unbounded growth.
MAX_PATTERN_CACHE_SIZE: int = 512

# Maximum cached LocaleData instances built from Babel CLDR data.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE
# ============================================================================

# Identity of the built-in locale used when no locale is supplied.
DEFAULT_LOCALE_CODE: str = "en_US"
