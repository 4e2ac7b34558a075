from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import get_config

ROOT_LOGGER_NAME = "parkour"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class _ParkourRichConsoleHandler(RichHandler):
    """Rich console handler tagged so repeated configuration can find it."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(
            level=level,
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the ``parkour`` logger or one of its children."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a rich console handler to the ``parkour`` logger.

    Calling this more than once only updates the level; the handler is
    installed a single time.

    Parameters:
        level (str | int | None): Level name or number. Defaults to the
            configured ``log_level``.

    Returns:
        logging.Logger: The configured ``parkour`` logger.
    """
    if level is None:
        level = get_config().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = get_logger()
    logger.setLevel(level)
    if not any(isinstance(h, _ParkourRichConsoleHandler) for h in logger.handlers):
        logger.addHandler(_ParkourRichConsoleHandler())
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
