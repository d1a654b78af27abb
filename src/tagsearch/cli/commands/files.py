"""Files command for tagsearch CLI."""

import argparse

from ...core.config import Config
from ...listing.render import render_files
from .common import run_query


def handle_files(args: argparse.Namespace, config: Config) -> None:
    """Handle files command.

    Prints the sorted paths of files matching the keyword query.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    result = run_query(args, config)
    if result.matching:
        print(render_files(result.matching_paths, quickfix=getattr(args, "vim", False)))
