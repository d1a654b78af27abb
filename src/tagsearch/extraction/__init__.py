"""Tag extraction from file content."""

from .tags import (
    TAG_PATTERN,
    extract_file_tags,
    extract_tags,
    normalize_tag,
    read_file_bytes,
)

__all__ = [
    "TAG_PATTERN",
    "extract_file_tags",
    "extract_tags",
    "normalize_tag",
    "read_file_bytes",
]
