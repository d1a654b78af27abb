"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from loguru import logger

from tagsearch.core.config import ScanConfig
from tagsearch.core.types import FileTagSet
from tagsearch.services import TagScanner


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru sinks bound to captured streams after each test."""
    yield
    logger.remove()


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Provide a directory of notes.

    a.md carries alpha and beta, b.txt carries alpha, c.md is untagged.
    """
    (tmp_path / "a.md").write_text("# Plan\n@alpha work on @Beta\nmail x@gamma\n")
    (tmp_path / "b.txt").write_text("@alpha only\n")
    (tmp_path / "c.md").write_text("No tags here, just an email: me@example.com\n")
    (tmp_path / "image.png").write_bytes(b"\x89PNG @alpha")
    return tmp_path


@pytest.fixture
def scanner(notes_dir: Path) -> TagScanner:
    """Provide a TagScanner rooted at notes_dir."""
    return TagScanner(ScanConfig(root=notes_dir))


@pytest.fixture
def sample_files() -> list[FileTagSet]:
    """Provide the A/B/C file tag sets used across filter tests."""
    return [
        FileTagSet(path="A", tags=("alpha", "beta")),
        FileTagSet(path="B", tags=("alpha",)),
        FileTagSet(path="C", tags=()),
    ]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear tagsearch variables from the environment."""
    for name in (
        "TAGSEARCH_CONFIG",
        "TAGSEARCH_ROOT",
        "TAGSEARCH_GLOBS",
        "TAGSEARCH_WORKERS",
        "TAGSEARCH_FILTER_MODE",
        "TAGSEARCH_SORT",
        "TAGSEARCH_LOG_LEVEL",
        "TAGSEARCH_DEFAULT_COMMAND",
    ):
        monkeypatch.delenv(name, raising=False)
