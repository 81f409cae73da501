"""Logging configuration for svg-prune."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send loguru output to stderr.

    `verbose` shows per-pass removal counts; `quiet` keeps only warnings and
    errors, which suits scripted use of the JSON output.
    """
    logger.remove()
    level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
