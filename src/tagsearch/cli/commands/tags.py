"""Tags command for tagsearch CLI.

Lists the tags carried by the files that match the keyword query:

- default: comma-separated on one line
- ``--long``: one tag per line
- ``--numeric``: sorted by number of files, shown as ``tag - N``
- ``--summarise``: each tag followed by its files
"""

import argparse

from ...core.config import Config
from ...core.types import ListStyle, SortMode
from ...listing.aggregate import aggregate
from ...listing.render import render_tags, untagged_hint
from .common import query_terms, run_query


def add_tags_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the tags command.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="One tag per line",
    )
    parser.add_argument(
        "-n",
        "--numeric",
        action="store_true",
        help="Sort by number of files and show the count",
    )
    parser.add_argument(
        "-s",
        "--summarise",
        action="store_true",
        help="Show each tag with the files carrying it",
    )


def handle_tags(args: argparse.Namespace, config: Config) -> None:
    """Handle tags command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    result = run_query(args, config)

    if not query_terms(args) and result.untagged:
        print(untagged_hint(len(result.untagged)))
        print()

    sort_mode = SortMode.FREQUENCY if getattr(args, "numeric", False) else config.listing.sort_mode
    style = _list_style(args, config)

    summaries = aggregate(result.tag_index, sort_mode, grouped=style is ListStyle.GROUPED)
    if summaries:
        print(render_tags(summaries, style, annotate_counts=sort_mode is SortMode.FREQUENCY))


def _list_style(args: argparse.Namespace, config: Config) -> ListStyle:
    if getattr(args, "summarise", False):
        return ListStyle.GROUPED
    if getattr(args, "long", False):
        return ListStyle.LONG
    return config.listing.style
