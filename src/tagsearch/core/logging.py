"""Loguru sink setup for the command line."""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level}</level>: {message}"


def configure_logging(level: str = "WARNING") -> None:
    """Route log output to stderr at the given level.

    Replaces loguru's default sink so that diagnostics never mix with
    results written to stdout.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ...).
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=None)
