"""Detection of near-duplicate tags.

Tags are already case-normalized at extraction, so the only variants left
to report are plural forms: two tags that are equal once trailing ``s``
characters are removed (``note`` / ``notes``).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class SimilarTags:
    """A pair of tags that probably mean the same thing."""

    kind: str
    first: str
    second: str


def find_similar_tags(tags: Iterable[str]) -> list[SimilarTags]:
    """Find pairs of distinct tags that differ only by trailing ``s``.

    Args:
        tags: Tag vocabulary; duplicates are ignored.

    Returns:
        One entry per unordered pair, sorted by the pair's tags.
    """
    unique = sorted(set(tags))
    similar = []
    for first, second in combinations(unique, 2):
        if first.rstrip("s") == second.rstrip("s"):
            similar.append(SimilarTags(kind="PLURAL", first=first, second=second))
    return similar


def render_similar(similar: list[SimilarTags]) -> str:
    if not similar:
        return ""
    lines = ["Similar tags:"]
    lines.extend(f"{s.kind} - {s.first} & {s.second}" for s in similar)
    return "\n".join(lines)
