"""Pattern compilation shared by the format and parse engines."""

from .compiler import (
    LiteralSegment,
    Segment,
    TokenSegment,
    clear_pattern_cache,
    compile_pattern,
    require_pattern,
)

__all__ = [
    "LiteralSegment",
    "Segment",
    "TokenSegment",
    "clear_pattern_cache",
    "compile_pattern",
    "require_pattern",
]
