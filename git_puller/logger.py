"""Logging configuration for git_puller."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "git_puller"


def setup_logging(level: int, console: Console | None = None) -> logging.Logger:
    """Configure the git_puller logger to write through a rich console.

    Any handlers from a previous call are replaced, so repeated runs in the
    same process (tests, embedding) do not duplicate output.

    Args:
        level: Logging level for the logger and its handler
        console: Console to write to (defaults to a stdout console)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(),
        level=level,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
