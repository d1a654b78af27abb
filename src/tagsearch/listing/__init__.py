"""Tag aggregation and presentation."""

from .aggregate import aggregate, build_tag_index
from .render import render_files, render_tags, tag_title, untagged_hint
from .similar import SimilarTags, find_similar_tags, render_similar

__all__ = [
    "aggregate",
    "build_tag_index",
    "render_files",
    "render_tags",
    "tag_title",
    "untagged_hint",
    "SimilarTags",
    "find_similar_tags",
    "render_similar",
]
