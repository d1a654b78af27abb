"""Inline @tag extraction.

A tag is ``@`` followed by one or more characters from ``[a-zA-Z0-9_-]``,
where the ``@`` sits at the very start of the content or right after a
whitespace character. ``x@bar`` (an e-mail address, say) is not a tag.
Tags are stored lowercase without the ``@``.
"""

from __future__ import annotations

import re
from pathlib import Path

from loguru import logger

from tagsearch.core.exceptions import FileUnreadableError
from tagsearch.core.types import FileTagSet

# Matched on bytes so undecodable content never fails extraction
TAG_PATTERN = re.compile(rb"(?:^|(?<=\s))@([a-zA-Z0-9_\-]+)")


def normalize_tag(tag: str) -> str:
    """Normalize a raw tag or query term to its stored form.

    Args:
        tag: Raw tag text, without the leading marker.

    Returns:
        Lowercase tag.
    """
    return tag.lower()


def extract_tags(content: bytes | str) -> tuple[str, ...]:
    """Extract unique tags from raw content.

    Args:
        content: File content; ``str`` input is encoded as UTF-8 first.

    Returns:
        Lowercase tags in order of first occurrence. Empty when the
        content carries no tags.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    seen: dict[str, None] = {}
    for match in TAG_PATTERN.finditer(content):
        tag = normalize_tag(match.group(1).decode("ascii"))
        seen.setdefault(tag, None)
    return tuple(seen)


def read_file_bytes(path: Path) -> bytes:
    """Read a file's raw bytes.

    Raises:
        FileUnreadableError: If the file cannot be opened or read.
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileUnreadableError(str(path), e.strerror or str(e)) from e


def extract_file_tags(path: str, root: Path | None = None) -> FileTagSet:
    """Extract tags from one file.

    A file that cannot be read is reported as a warning and yields an
    empty tag set with ``error`` populated; it never aborts the caller.

    Args:
        path: File identifier, resolved against ``root`` when relative.
        root: Directory relative paths are resolved against.

    Returns:
        FileTagSet for the file.
    """
    file_path = Path(path)
    if root is not None and not file_path.is_absolute():
        file_path = root / file_path

    try:
        content = read_file_bytes(file_path)
    except FileUnreadableError as e:
        logger.warning(str(e))
        return FileTagSet(path=path, tags=(), error=e.reason)

    tags = extract_tags(content)
    logger.debug(f"Extracted {len(tags)} tags from {path}")
    return FileTagSet(path=path, tags=tags)
