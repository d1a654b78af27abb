"""CLI entry point for tagsearch."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .. import __version__
from ..core.config import COMMANDS, Config
from ..core.exceptions import TagsearchError
from ..core.logging import configure_logging
from . import commands

HANDLERS = {
    "files": commands.handle_files,
    "tags": commands.handle_tags,
    "untagged": commands.handle_untagged,
    "similar": commands.handle_similar,
}

TOP_LEVEL_OPTIONS = ("-h", "--help", "-V", "--version")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tagsearch",
        description="Search for, and summarise, @tags in plain-text files",
        epilog=(
            "Without a command, the configured default command runs (files, or tags when no "
            "keyword is given). A keyword that is also a command name is read as the command; "
            "use `tagsearch files KEYWORD` to search for it."
        ),
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # files (listing flags switch to the tags command)
    files_parser = subparsers.add_parser("files", help="List files matching keywords")
    commands.add_query_arguments(files_parser)
    commands.add_tags_arguments(files_parser)
    commands.add_vim_argument(files_parser)
    commands.add_scan_arguments(files_parser)

    tags_parser = subparsers.add_parser("tags", help="List tags of files matching keywords")
    commands.add_query_arguments(tags_parser)
    commands.add_tags_arguments(tags_parser)
    commands.add_scan_arguments(tags_parser)

    untagged_parser = subparsers.add_parser("untagged", help="List files without tags")
    commands.add_vim_argument(untagged_parser)
    commands.add_scan_arguments(untagged_parser)

    similar_parser = subparsers.add_parser("similar", help="Report tags that differ only by a plural 's'")
    commands.add_query_arguments(similar_parser)
    commands.add_scan_arguments(similar_parser)

    return parser


def resolve_command(args: argparse.Namespace, config: Config) -> str:
    """Pick the command to run for parsed arguments.

    ``files`` becomes ``tags`` when a listing flag is given, and
    ``config.empty_query_command`` when no keyword is given.
    """
    if args.command != "files":
        return args.command
    if args.long or args.numeric or args.summarise:
        return "tags"
    if not commands.query_terms(args):
        return config.empty_query_command
    return "files"


def parse_arguments(parser: argparse.ArgumentParser, argv: list[str]) -> argparse.Namespace:
    """Parse ``argv``, accepting keywords before and after options.

    argparse stops filling ``keywords`` at the first option, so any later
    bare arguments come back unrecognized and are appended here.
    """
    args, extras = parser.parse_known_args(argv)
    if extras:
        if not hasattr(args, "keywords") or any(arg.startswith("-") for arg in extras):
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
        args.keywords = [*args.keywords, *extras]
    return args


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)

    try:
        config = Config.from_env_or_file(_config_path(argv))
        args = parse_arguments(create_parser(), _with_default_command(argv, config))
        config = commands.apply_arguments(args, config)
        configure_logging(commands.log_level(args, config))

        HANDLERS[resolve_command(args, config)](args, config)
        sys.exit(0)
    except TagsearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _config_path(argv: list[str]) -> Path | None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("-c", "--config", type=Path)
    known, _ = pre_parser.parse_known_args(argv)
    return known.config


def _with_default_command(argv: list[str], config: Config) -> list[str]:
    if argv and (argv[0] in COMMANDS or argv[0] in TOP_LEVEL_OPTIONS):
        return argv
    return [config.default_command, *argv]


if __name__ == "__main__":
    main()
