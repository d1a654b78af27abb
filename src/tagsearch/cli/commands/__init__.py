"""Command implementations for tagsearch CLI."""

from .common import (
    add_query_arguments,
    add_scan_arguments,
    add_vim_argument,
    apply_arguments,
    log_level,
    query_terms,
)
from .files import handle_files
from .similar import handle_similar
from .tags import add_tags_arguments, handle_tags
from .untagged import handle_untagged

__all__ = [
    "add_query_arguments",
    "add_scan_arguments",
    "add_tags_arguments",
    "add_vim_argument",
    "apply_arguments",
    "log_level",
    "query_terms",
    "handle_files",
    "handle_tags",
    "handle_untagged",
    "handle_similar",
]
