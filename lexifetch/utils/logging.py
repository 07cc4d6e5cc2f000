"""Logging setup."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru stderr sink.

    The run summary is logged at INFO and must always be visible, so INFO is
    the floor. Verbose output is gated by callers checking ``config.verbose``.

    Args:
        verbose: Add timestamps to messages
        debug: Show DEBUG messages (every lookup attempt)
    """
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    if debug or verbose:
        fmt = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
    else:
        fmt = "<level>{message}</level>"

    logger.add(sys.stderr, level=level, format=fmt)
