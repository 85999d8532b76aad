"""Logging setup for the mdtodo command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = "%(message)s"


def setup_logging(name: str = "mdtodo", verbose: bool = False) -> logging.Logger:
    """Send the package's log records to stderr through rich.

    WARNING and above by default, everything with verbose.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(handler)
    return logger
