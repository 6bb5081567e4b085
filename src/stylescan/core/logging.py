"""Logging configuration for stylescan.

This module provides logging setup using the Rich library. Log records go
to standard error so that warnings about skipped files never mix with
report output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure Python logging with a Rich handler.

    Args:
        verbose: If True, set log level to DEBUG for detailed output.
        quiet: If True (and not verbose), only errors are logged.
            Otherwise the level is WARNING, which still shows skipped files.

    Returns:
        The configured ``stylescan`` logger.

    Example:
        >>> logger = setup_logging(verbose=True)
        >>> logger.debug("Compiled 71 detectors")
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    rich_handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger("stylescan")
    logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(rich_handler)
    logger.propagate = False

    return logger

