"""Configuration management for tagsearch.

Configuration is built once at startup (defaults, then an optional TOML
file, then environment variables, then command-line flags) and passed
explicitly to everything that needs it. All config classes are frozen;
use ``dataclasses.replace`` to derive a modified copy.
"""

import os
import tomllib
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from .exceptions import ConfigError
from .types import FilterMode, ListStyle, SortMode

E = TypeVar("E", bound=Enum)

DEFAULT_GLOB_PATTERNS = ("**/*.txt", "**/*.md", "**/*.org")

COMMANDS = ("files", "tags", "untagged", "similar")

# loguru built-in level names
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ScanConfig:
    """File selection and extraction configuration."""

    root: Path = field(default_factory=lambda: Path("."))
    glob_patterns: tuple[str, ...] = DEFAULT_GLOB_PATTERNS
    # Threads used for tag extraction; 1 scans sequentially
    workers: int = 1
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")


@dataclass(frozen=True)
class ListingConfig:
    """Tag listing presentation configuration."""

    sort_mode: SortMode = SortMode.ALPHA
    style: ListStyle = ListStyle.COMPACT


@dataclass(frozen=True)
class Config:
    """Main application configuration.

    Attributes:
        scan: File selection settings.
        listing: Tag listing settings.
        filter_mode: Combination mode for required terms.
        default_command: Command run when the first argument is not a command.
        empty_query_command: Command that replaces ``files`` when no
            keywords are given.
        log_level: Minimum loguru level written to stderr.
    """

    scan: ScanConfig = field(default_factory=ScanConfig)
    listing: ListingConfig = field(default_factory=ListingConfig)
    filter_mode: FilterMode = FilterMode.ALL
    default_command: str = "files"
    empty_query_command: str = "tags"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name in ("default_command", "empty_query_command"):
            value = getattr(self, name)
            if value not in COMMANDS:
                raise ConfigError(f"{name} must be one of {', '.join(COMMANDS)}, got {value!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()._apply_env()

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Cannot load config {path}: {e}") from e

        return cls._from_mapping(data)._apply_env()

    @classmethod
    def from_env_or_file(cls, path: Path | None = None) -> "Config":
        """Load from ``path``, ``TAGSEARCH_CONFIG``, or the environment alone."""
        if path is None and (env_path := os.environ.get("TAGSEARCH_CONFIG")):
            path = Path(env_path)
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    @classmethod
    def _from_mapping(cls, data: dict[str, Any]) -> "Config":
        scan_data = _parse_table(data, "scan")
        listing_data = _parse_table(data, "listing")

        scan = ScanConfig()
        if "root" in scan_data:
            scan = replace(scan, root=Path(_parse_str(scan_data["root"], "scan.root")))
        if "glob_patterns" in scan_data:
            scan = replace(
                scan, glob_patterns=parse_glob_patterns(scan_data["glob_patterns"], "scan.glob_patterns")
            )
        if "workers" in scan_data:
            scan = replace(scan, workers=_parse_int(scan_data["workers"], "scan.workers"))
        if "follow_symlinks" in scan_data:
            scan = replace(
                scan, follow_symlinks=_parse_bool(scan_data["follow_symlinks"], "scan.follow_symlinks")
            )

        listing = ListingConfig()
        if "sort_mode" in listing_data:
            listing = replace(
                listing, sort_mode=parse_enum(SortMode, listing_data["sort_mode"], "listing.sort_mode")
            )
        if "style" in listing_data:
            listing = replace(listing, style=parse_enum(ListStyle, listing_data["style"], "listing.style"))

        overrides: dict[str, Any] = {"scan": scan, "listing": listing}
        if "filter_mode" in data:
            overrides["filter_mode"] = parse_enum(FilterMode, data["filter_mode"], "filter_mode")
        for key in ("default_command", "empty_query_command", "log_level"):
            if key in data:
                overrides[key] = _parse_str(data[key], key)

        return cls(**overrides)

    def _apply_env(self) -> "Config":
        scan = self.scan
        listing = self.listing
        overrides: dict[str, Any] = {}

        if root := os.environ.get("TAGSEARCH_ROOT"):
            scan = replace(scan, root=Path(root))
        if globs := os.environ.get("TAGSEARCH_GLOBS"):
            scan = replace(scan, glob_patterns=tuple(g.strip() for g in globs.split(",") if g.strip()))
        if workers := os.environ.get("TAGSEARCH_WORKERS"):
            scan = replace(scan, workers=_parse_int(workers, "TAGSEARCH_WORKERS"))

        if sort_mode := os.environ.get("TAGSEARCH_SORT"):
            listing = replace(listing, sort_mode=parse_enum(SortMode, sort_mode, "TAGSEARCH_SORT"))

        if mode := os.environ.get("TAGSEARCH_FILTER_MODE"):
            overrides["filter_mode"] = parse_enum(FilterMode, mode, "TAGSEARCH_FILTER_MODE")
        if level := os.environ.get("TAGSEARCH_LOG_LEVEL"):
            overrides["log_level"] = level.upper()
        if command := os.environ.get("TAGSEARCH_DEFAULT_COMMAND"):
            overrides["default_command"] = command

        return replace(self, scan=scan, listing=listing, **overrides)


def parse_enum(enum_cls: type[E], value: Any, name: str) -> E:
    """Resolve an enum member by value or name, case-insensitively.

    Raises:
        ConfigError: If no member matches.
    """
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    for member in enum_cls:
        if text in (member.value, member.name.lower()):
            return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ConfigError(f"{name} must be one of {choices}, got {value!r}")


def parse_glob_patterns(value: Any, name: str) -> tuple[str, ...]:
    """Normalize a single pattern or a list of patterns to a tuple.

    Raises:
        ConfigError: If the value is neither a string nor a list of strings.
    """
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(p, str) for p in value):
        return tuple(value)
    raise ConfigError(f"{name} must be a pattern or a list of patterns, got {value!r}")


def _parse_table(data: dict[str, Any], name: str) -> dict[str, Any]:
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table, got {table!r}")
    return table


def _parse_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string, got {value!r}")
    return value


def _parse_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be true or false, got {value!r}")
    return value


def _parse_int(value: Any, name: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
