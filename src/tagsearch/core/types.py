"""Type definitions for tagsearch."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FilterMode(Enum):
    """How required query terms combine."""

    ALL = "all"
    ANY = "any"


class SortMode(Enum):
    """Ordering of a tag listing."""

    ALPHA = "alpha"
    FREQUENCY = "frequency"


class ListStyle(Enum):
    """Output shape of a tag listing."""

    COMPACT = "compact"
    LONG = "long"
    GROUPED = "grouped"


@dataclass(frozen=True)
class FileTagSet:
    """Tags extracted from a single file.

    Attributes:
        path: File identifier as selected (relative or absolute path).
        tags: Unique lowercase tags in order of first occurrence.
        error: Read failure message, or None if the file was read.
    """

    path: str
    tags: tuple[str, ...] = ()
    error: Optional[str] = None

    @property
    def is_tagged(self) -> bool:
        return bool(self.tags)


@dataclass(frozen=True)
class TagSummary:
    """One row of a tag listing."""

    tag: str
    count: int
    files: Optional[tuple[str, ...]] = None


@dataclass
class ScanResult:
    """Outcome of scanning a selection of files against a filter.

    Attributes:
        files: Every scanned file, in selection order.
        matching: Files accepted by the filter, in selection order.
        untagged: Paths of files with no tags, sorted.
        tag_index: Tag to matching file paths, in first-encounter order.
        errors: (path, message) pairs for files that could not be read.
        missing_required: Required tags (ALL mode) present in no scanned file.
    """

    files: list[FileTagSet] = field(default_factory=list)
    matching: list[FileTagSet] = field(default_factory=list)
    untagged: list[str] = field(default_factory=list)
    tag_index: dict[str, list[str]] = field(default_factory=dict)
    errors: list[tuple[str, str]] = field(default_factory=list)
    missing_required: list[str] = field(default_factory=list)

    @property
    def matching_paths(self) -> list[str]:
        """Sorted paths of matching files."""
        return sorted(f.path for f in self.matching)
