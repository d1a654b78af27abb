"""tagsearch: search for, and summarise, @tags in plain-text files.

Public API
----------
>>> from tagsearch import extract_tags, compile_filter, FilterMode
>>> tags = extract_tags(b"@alpha notes on @Beta")
>>> tags
('alpha', 'beta')
>>> compile_filter(["alpha", "!gamma"], FilterMode.ALL).matches(tags)
True
"""

__version__ = "1.0.0"

from tagsearch.core.config import Config, ListingConfig, ScanConfig
from tagsearch.core.exceptions import (
    ConfigError,
    FileUnreadableError,
    MalformedQueryTermError,
    QueryError,
    SourceListError,
    TagsearchError,
)
from tagsearch.core.types import (
    FileTagSet,
    FilterMode,
    ListStyle,
    ScanResult,
    SortMode,
    TagSummary,
)
from tagsearch.extraction import extract_file_tags, extract_tags
from tagsearch.listing import aggregate, build_tag_index, find_similar_tags
from tagsearch.query import CompiledFilter, KeywordQuery, compile_filter, matches
from tagsearch.services import TagScanner
from tagsearch.sources import FileSelector

__all__ = [
    "__version__",
    "Config",
    "ListingConfig",
    "ScanConfig",
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
    "extract_tags",
    "extract_file_tags",
    "aggregate",
    "build_tag_index",
    "find_similar_tags",
    "CompiledFilter",
    "KeywordQuery",
    "compile_filter",
    "matches",
    "TagScanner",
    "FileSelector",
]
