"""Logging configuration for the command line entry point."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "BYTEPACE_LOG_LEVEL"


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Route log records to stderr through rich.

    Args:
        level: Level name or number for the ``bytepace`` logger.
    """
    if isinstance(level, str):
        level = level.upper()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger("bytepace")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


def setup_logging_from_env(default: str | int = logging.WARNING) -> None:
    """Set up logging using ``$BYTEPACE_LOG_LEVEL`` when it is set."""
    setup_logging(os.environ.get(LOG_LEVEL_ENV) or default)
