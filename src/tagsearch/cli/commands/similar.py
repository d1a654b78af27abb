"""Similar command for tagsearch CLI."""

import argparse

from ...core.config import Config
from ...listing.similar import find_similar_tags, render_similar
from .common import run_query


def handle_similar(args: argparse.Namespace, config: Config) -> None:
    """Handle similar command.

    Reports tags among the matching files that differ only by a plural
    ``s``, such as ``note`` and ``notes``.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    result = run_query(args, config)
    report = render_similar(find_similar_tags(result.tag_index))
    if report:
        print(report)
