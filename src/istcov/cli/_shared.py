from __future__ import annotations

import logging
import sys

import click.utils as click_utils

from istcov._meta import logger
from istcov.config import LOG_FORMAT


def configure_logging(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def is_tty_stdout() -> bool:
    try:
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    except OSError:
        return False


def resolve_use_color(*, color: bool, no_color: bool, to_stdout: bool) -> bool:
    # CLI flags take precedence over terminal detection.
    if no_color:
        return False
    if color:
        return True
    return to_stdout and is_tty_stdout() and not click_utils.should_strip_ansi(sys.stdout)


__all__ = ["configure_logging", "is_tty_stdout", "resolve_use_color"]
