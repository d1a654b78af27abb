"""Tag index construction and aggregation.

The tag index maps each tag to the files carrying it, built only from files
that passed the filter. Aggregation is a sorted view over that index; it
never filters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from tagsearch.core.types import FileTagSet, SortMode, TagSummary


def build_tag_index(file_tag_sets: Iterable[FileTagSet]) -> dict[str, list[str]]:
    """Invert per-file tags into a tag -> files mapping.

    Keys are inserted in the order tags are first encountered, and each
    file list follows the order of ``file_tag_sets``.
    """
    index: dict[str, list[str]] = {}
    for file_tags in file_tag_sets:
        for tag in file_tags.tags:
            index.setdefault(tag, []).append(file_tags.path)
    return index


def aggregate(
    tag_index: Mapping[str, Sequence[str]],
    sort_mode: SortMode = SortMode.ALPHA,
    grouped: bool = False,
) -> list[TagSummary]:
    """Produce an ordered listing from a tag index.

    Args:
        tag_index: Tag to file paths.
        sort_mode: ALPHA sorts by tag ascending. FREQUENCY sorts by file
            count descending, ties keeping the index's iteration order.
        grouped: Attach each tag's file list to its summary.

    Returns:
        TagSummary rows in presentation order.
    """
    summaries = [
        TagSummary(tag=tag, count=len(files), files=tuple(files) if grouped else None)
        for tag, files in tag_index.items()
    ]
    if sort_mode is SortMode.FREQUENCY:
        # sorted() is stable, so equal counts keep first-encounter order
        return sorted(summaries, key=lambda s: -s.count)
    return sorted(summaries, key=lambda s: s.tag)
