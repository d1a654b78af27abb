"""File selection by glob patterns.

Patterns use gitignore-like include/exclude semantics: plain patterns are
OR'd together, patterns prefixed with ``!`` remove files again. A file is
selected when it matches any include and no exclude.
"""

from __future__ import annotations

from collections.abc import Sequence
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath

from loguru import logger

from tagsearch.core.config import DEFAULT_GLOB_PATTERNS
from tagsearch.core.exceptions import SourceListError


class FileSelector:
    """Select files under a root directory by glob patterns.

    Example:
        selector = FileSelector(["**/*.md", "!**/archive/**"])
        selector.matches("notes/today.md")    # True
        selector.matches("archive/old.md")    # False
    """

    def __init__(self, patterns: Sequence[str] = DEFAULT_GLOB_PATTERNS, follow_symlinks: bool = False) -> None:
        """Initialize with pattern list.

        Args:
            patterns: Glob patterns; ``!`` prefix marks an exclusion.
            follow_symlinks: Select symlinked files as well.

        Raises:
            ValueError: If no include pattern is given.
        """
        self.includes = [p for p in patterns if not p.startswith("!")]
        self.excludes = [p[1:] for p in patterns if p.startswith("!")]
        self.follow_symlinks = follow_symlinks

        if not self.includes:
            raise ValueError("At least one include pattern required (patterns without ! prefix)")

    def matches(self, path: str) -> bool:
        """Check a root-relative path against the pattern set."""
        normalized = PurePosixPath(path.replace("\\", "/"))
        if not any(_glob_match(normalized, p) for p in self.includes):
            return False
        return not any(_glob_match(normalized, p) for p in self.excludes)

    def select(self, root: Path) -> list[str]:
        """List matching files under ``root``.

        Args:
            root: Directory to walk recursively.

        Returns:
            Root-relative POSIX paths of matching regular files, sorted.

        Raises:
            SourceListError: If ``root`` is missing or not a directory.
        """
        if not root.exists():
            raise SourceListError(str(root), f"Directory does not exist: {root}")
        if not root.is_dir():
            raise SourceListError(str(root), f"Path is not a directory: {root}")

        logger.debug(f"Selecting files: root={root}, includes={self.includes}, excludes={self.excludes}")

        selected = []
        for file_path in root.rglob("*"):
            if file_path.is_symlink() and not self.follow_symlinks:
                continue
            if not file_path.is_file():
                continue
            relative = file_path.relative_to(root).as_posix()
            if self.matches(relative):
                selected.append(relative)

        selected.sort()
        logger.debug(f"Selected {len(selected)} files under {root}")
        return selected


def _glob_match(path: PurePosixPath, pattern: str) -> bool:
    # Leading "**/" or a slash-free pattern matches at any depth
    floating = pattern.startswith("**/") or "/" not in pattern
    while pattern.startswith("**/"):
        pattern = pattern[3:]

    if pattern.endswith("/**"):
        dir_parts = PurePosixPath(pattern[:-3]).parts
        parents = path.parts[:-1]
        last_start = len(parents) - len(dir_parts)
        if floating:
            starts = range(last_start + 1)
        else:
            starts = range(1 if last_start >= 0 else 0)
        return any(_parts_match(parents[i : i + len(dir_parts)], dir_parts) for i in starts)

    if floating:
        return path.match(pattern)
    return len(path.parts) == len(PurePosixPath(pattern).parts) and path.match(pattern)


def _parts_match(parts: tuple[str, ...], patterns: tuple[str, ...]) -> bool:
    return all(fnmatchcase(part, pattern) for part, pattern in zip(parts, patterns))
