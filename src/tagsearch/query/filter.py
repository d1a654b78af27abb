"""Keyword query compilation and matching.

A keyword query is a list of terms plus a combination mode. Plain terms are
required tags; terms prefixed with ``!`` are excluded tags. An excluded tag
present on a file always rejects it, whatever the mode. Otherwise:

- no required tags: every file matches (the query only applies exclusions)
- ANY: at least one required tag must be present
- ALL: every distinct required tag must be present
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from loguru import logger

from tagsearch.core.exceptions import MalformedQueryTermError
from tagsearch.core.types import FilterMode
from tagsearch.extraction.tags import normalize_tag

NEGATION_MARKER = "!"


@dataclass(frozen=True)
class CompiledFilter:
    """A keyword query materialized as required and excluded tag sets.

    ``required`` and ``excluded`` may overlap; exclusion wins.
    """

    required: frozenset[str] = frozenset()
    excluded: frozenset[str] = frozenset()
    mode: FilterMode = FilterMode.ALL

    @property
    def is_empty(self) -> bool:
        return not self.required and not self.excluded

    def matches(self, tags: Iterable[str]) -> bool:
        """Decide whether a file carrying ``tags`` satisfies the query.

        Args:
            tags: The file's tags (lowercase).

        Returns:
            True if the file is selected.
        """
        matching_count = 0
        for tag in set(tags):
            if tag in self.excluded:
                return False
            if tag in self.required:
                matching_count += 1

        if not self.required:
            return True
        if self.mode is FilterMode.ANY:
            return matching_count > 0
        return matching_count >= len(self.required)


@dataclass(frozen=True)
class KeywordQuery:
    """Raw user terms and the mode they combine with."""

    terms: tuple[str, ...] = ()
    mode: FilterMode = FilterMode.ALL

    @classmethod
    def parse(cls, terms: Sequence[str], mode: FilterMode = FilterMode.ALL) -> "KeywordQuery":
        return cls(terms=tuple(terms), mode=mode)

    def compile(self) -> CompiledFilter:
        return compile_filter(self.terms, self.mode)


def compile_filter(terms: Iterable[str], mode: FilterMode = FilterMode.ALL) -> CompiledFilter:
    """Partition query terms into required and excluded tag sets.

    Args:
        terms: Query terms; a leading ``!`` marks an excluded tag.
        mode: How required tags combine.

    Returns:
        CompiledFilter ready for matching.

    Raises:
        MalformedQueryTermError: If a term is empty or a bare ``!``.
    """
    required: set[str] = set()
    excluded: set[str] = set()

    for raw in terms:
        term = raw.strip()
        negated = term.startswith(NEGATION_MARKER)
        name = term[len(NEGATION_MARKER):] if negated else term
        if not name:
            raise MalformedQueryTermError(raw)

        if negated:
            excluded.add(normalize_tag(name))
        else:
            required.add(normalize_tag(name))

    compiled = CompiledFilter(
        required=frozenset(required),
        excluded=frozenset(excluded),
        mode=mode,
    )
    logger.debug(
        f"Compiled filter: required={sorted(compiled.required)}, "
        f"excluded={sorted(compiled.excluded)}, mode={mode.value}"
    )
    return compiled


def matches(compiled: CompiledFilter, tags: Iterable[str]) -> bool:
    """Module-level alias for ``CompiledFilter.matches``."""
    return compiled.matches(tags)
