"""Core configuration, types and errors for tagsearch."""

from .config import (
    COMMANDS,
    DEFAULT_GLOB_PATTERNS,
    Config,
    ListingConfig,
    ScanConfig,
    parse_enum,
)
from .exceptions import (
    ConfigError,
    FileUnreadableError,
    MalformedQueryTermError,
    QueryError,
    SourceListError,
    TagsearchError,
)
from .types import (
    FileTagSet,
    FilterMode,
    ListStyle,
    ScanResult,
    SortMode,
    TagSummary,
)

__all__ = [
    "COMMANDS",
    "DEFAULT_GLOB_PATTERNS",
    "Config",
    "ListingConfig",
    "ScanConfig",
    "parse_enum",
    "TagsearchError",
    "ConfigError",
    "FileUnreadableError",
    "QueryError",
    "MalformedQueryTermError",
    "SourceListError",
    "FileTagSet",
    "FilterMode",
    "ListStyle",
    "ScanResult",
    "SortMode",
    "TagSummary",
]
