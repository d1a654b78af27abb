"""Keyword query filtering."""

from .filter import (
    NEGATION_MARKER,
    CompiledFilter,
    KeywordQuery,
    compile_filter,
    matches,
)

__all__ = [
    "NEGATION_MARKER",
    "CompiledFilter",
    "KeywordQuery",
    "compile_filter",
    "matches",
]
