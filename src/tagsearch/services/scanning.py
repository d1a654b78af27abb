"""Scan service: extract tags from a file selection and apply a filter."""

from __future__ import annotations

import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from loguru import logger

from tagsearch.core.config import ScanConfig
from tagsearch.core.exceptions import ConfigError
from tagsearch.core.types import FileTagSet, FilterMode, ScanResult
from tagsearch.extraction.tags import extract_file_tags
from tagsearch.listing.aggregate import build_tag_index
from tagsearch.query.filter import CompiledFilter
from tagsearch.sources.selector import FileSelector


class TagScanner:
    """Runs tag extraction and filtering over a set of files.

    Extraction is a pure function of each file's content, so with
    ``workers > 1`` files are read on a thread pool. Results are always
    returned in selection order.

    Example:
        scanner = TagScanner(ScanConfig(root=Path("notes")))
        result = scanner.run(scanner.select(), compile_filter(["python"]))
        print(result.matching_paths)
    """

    def __init__(self, config: ScanConfig) -> None:
        self._config = config

    @property
    def root(self) -> Path:
        return self._config.root

    def select(self) -> list[str]:
        """Select files under the configured root.

        Raises:
            SourceListError: If the root cannot be listed.
            ConfigError: If the glob patterns contain no include pattern.
        """
        try:
            selector = FileSelector(self._config.glob_patterns, follow_symlinks=self._config.follow_symlinks)
        except ValueError as e:
            raise ConfigError(str(e)) from e
        return selector.select(self._config.root)

    def scan(self, paths: Sequence[str]) -> list[FileTagSet]:
        """Extract tags for every path, preserving input order.

        Args:
            paths: File identifiers, relative to the root or absolute.

        Returns:
            One FileTagSet per path. Unreadable files carry an error and
            no tags.
        """
        root = self._config.root
        if self._config.workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self._config.workers) as executor:
                return list(executor.map(lambda p: extract_file_tags(p, root), paths))
        return [extract_file_tags(p, root) for p in paths]

    def run(self, paths: Sequence[str], compiled: CompiledFilter) -> ScanResult:
        """Scan ``paths`` and select the files matching ``compiled``.

        Args:
            paths: File identifiers to scan.
            compiled: Filter to apply to each file's tags.

        Returns:
            ScanResult with matches, untagged files, read errors and the
            tag index over matching files.
        """
        start_time = time.perf_counter()
        files = self.scan(paths)
        matching = [f for f in files if compiled.matches(f.tags)]

        result = ScanResult(
            files=files,
            matching=matching,
            untagged=sorted(f.path for f in files if not f.is_tagged),
            tag_index=build_tag_index(matching),
            errors=[(f.path, f.error) for f in files if f.error is not None],
            missing_required=find_missing_required(files, compiled),
        )

        for tag in result.missing_required:
            logger.info(f"No matches for `{tag}`")

        elapsed = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"Scan complete: files={len(files)}, matching={len(matching)}, "
            f"untagged={len(result.untagged)}, errors={len(result.errors)}, {elapsed:.1f}ms"
        )
        return result


def find_missing_required(files: Sequence[FileTagSet], compiled: CompiledFilter) -> list[str]:
    """Required tags that occur in no file at all.

    Only meaningful in ALL mode, where any such tag guarantees that nothing
    matches; in ANY mode the result is always empty.
    """
    if compiled.mode is not FilterMode.ALL or not compiled.required:
        return []
    seen: set[str] = set()
    for f in files:
        seen.update(f.tags)
    return sorted(compiled.required - seen)
