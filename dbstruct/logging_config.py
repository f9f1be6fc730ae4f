"""Logging setup shared by every dbstruct module.

Modules grab a named logger with ``get_logger(__name__)``; the CLI calls
``setup_logging`` once to route records through a rich handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "dbstruct"


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the ``dbstruct`` namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Configure the package logger with a RichHandler.

    Args:
        level: Logging level name or number.
        console: Console to log to (stderr by default).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Re-running setup must not stack handlers
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.debug("Logging configured at level %s", logging.getLevelName(logger.level))
    return logger
