"""Untagged command for tagsearch CLI."""

import argparse

from ...core.config import Config
from ...listing.render import render_files
from .common import run_query

# Quickfix text; vim needs a message after the line number
QUICKFIX_MESSAGE = "Ignore this message"


def handle_untagged(args: argparse.Namespace, config: Config) -> None:
    """Handle untagged command.

    Prints the sorted paths of selected files that carry no tags.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    result = run_query(args, config)
    if result.untagged:
        print(render_files(result.untagged, quickfix=getattr(args, "vim", False), message=QUICKFIX_MESSAGE))
