"""Logging setup for the tablegrid package and its command line tool."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: int | str = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Route 'tablegrid.*' records to stderr and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Level number or name ("DEBUG", "WARNING", ...)
        log_file: Path of a log file, truncated on open

    Returns:
        The 'tablegrid' logger
    """
    logger = logging.getLogger("tablegrid")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
