"""Arguments and helpers shared by tagsearch commands."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from ...core.config import Config
from ...core.types import FilterMode, ScanResult
from ...query.filter import KeywordQuery
from ...services import TagScanner


def add_scan_arguments(parser: argparse.ArgumentParser) -> None:
    """Add file selection and logging arguments.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        help="Directory to search (default: current directory)",
    )
    parser.add_argument(
        "-g",
        "--glob",
        action="append",
        dest="globs",
        metavar="PATTERN",
        help="File glob pattern, repeatable; prefix with ! to exclude (default: **/*.txt, **/*.md, **/*.org)",
    )
    parser.add_argument(
        "-f",
        "--file",
        action="append",
        dest="files",
        metavar="PATH",
        help="File to scan, relative to --root; repeatable, skips the directory walk",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=int,
        help="Threads used to read files (default: 1)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="TOML configuration file (default: $TAGSEARCH_CONFIG)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show errors")


def add_query_arguments(parser: argparse.ArgumentParser) -> None:
    """Add keyword query arguments.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "keywords",
        nargs="*",
        metavar="KEYWORD",
        help="Tags to filter by (prefix with ! to exclude a tag)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--or",
        "--any",
        dest="filter_mode",
        action="store_const",
        const=FilterMode.ANY,
        help="Match files carrying ANY of the keywords",
    )
    mode.add_argument(
        "--and",
        "--all",
        dest="filter_mode",
        action="store_const",
        const=FilterMode.ALL,
        help="Match files carrying ALL of the keywords (default)",
    )
    parser.add_argument(
        "--not",
        action="append",
        dest="excluded",
        metavar="TAG",
        help="Skip files carrying TAG, repeatable (same as a !TAG keyword)",
    )


def add_vim_argument(parser: argparse.ArgumentParser) -> None:
    """Add the quickfix output flag to a command printing file paths."""
    parser.add_argument(
        "--vim",
        action="store_true",
        help="Print paths as vim quickfix entries (path:1:)",
    )


def apply_arguments(args: argparse.Namespace, config: Config) -> Config:
    """Return ``config`` with command-line overrides applied."""
    scan = config.scan
    if args.root is not None:
        scan = replace(scan, root=args.root)
    if args.globs:
        scan = replace(scan, glob_patterns=tuple(args.globs))
    if args.workers is not None:
        scan = replace(scan, workers=args.workers)

    config = replace(config, scan=scan)
    if getattr(args, "filter_mode", None) is not None:
        config = replace(config, filter_mode=args.filter_mode)
    return config


def log_level(args: argparse.Namespace, config: Config) -> str:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "ERROR"
    return config.log_level


def query_terms(args: argparse.Namespace) -> list[str]:
    """Keywords plus ``--not`` tags as ``!``-prefixed terms."""
    keywords = getattr(args, "keywords", None) or []
    excluded = getattr(args, "excluded", None) or []
    return [*keywords, *(f"!{tag}" for tag in excluded)]


def run_query(args: argparse.Namespace, config: Config) -> ScanResult:
    """Select files, compile the keyword query and scan.

    Args:
        args: Parsed command arguments.
        config: Application configuration with overrides applied.

    Returns:
        ScanResult for the selection.
    """
    compiled = KeywordQuery.parse(query_terms(args), config.filter_mode).compile()

    scanner = TagScanner(config.scan)
    paths = list(args.files) if args.files else scanner.select()
    return scanner.run(paths, compiled)
