"""Plain-text rendering of listings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tagsearch.core.types import ListStyle, TagSummary


def tag_title(summary: TagSummary, annotate_counts: bool = False) -> str:
    """Format a tag as shown in listings, e.g. ``python - 3``."""
    if annotate_counts:
        return f"{summary.tag} - {summary.count}"
    return summary.tag


def render_tags(
    summaries: Sequence[TagSummary],
    style: ListStyle = ListStyle.COMPACT,
    annotate_counts: bool = False,
) -> str:
    """Render an aggregated tag listing.

    Args:
        summaries: Rows from ``aggregate``, already ordered.
        style: COMPACT joins titles with ", ", LONG puts one per line,
            GROUPED puts each tag's files indented beneath it.
        annotate_counts: Append the file count to each tag.

    Returns:
        Rendered text without a trailing newline.
    """
    titles = [tag_title(s, annotate_counts) for s in summaries]

    if style is ListStyle.GROUPED:
        lines: list[str] = []
        for title, summary in zip(titles, summaries):
            lines.append(title)
            lines.extend(f"\t{path}" for path in summary.files or ())
        return "\n".join(lines)

    if style is ListStyle.LONG:
        return "\n".join(titles)
    return ", ".join(titles)


def render_files(paths: Iterable[str], quickfix: bool = False, message: str = "") -> str:
    """Render file paths one per line.

    With ``quickfix`` each line becomes a vim quickfix entry,
    ``path:1:message``, pointing at the first line of the file.
    """
    if quickfix:
        return "\n".join(f"{path}:1:{message}" for path in paths)
    return "\n".join(paths)


def untagged_hint(count: int) -> str:
    """Note shown above a full listing when some files carry no tags."""
    return f"{count} untagged files. View with `tagsearch untagged`."
