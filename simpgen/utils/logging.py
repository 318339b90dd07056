"""Logger configuration."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru logger for the run.

    Args:
        verbose: Show progress messages (INFO)
        debug: Show debug-character tracing (DEBUG); implies verbose
    """
    logger.remove()

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    logger.add(sys.stderr, level=level, format="{message}", colorize=False)
