"""Logging setup for the DevFlow CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "devflow"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a single rich handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        show_time=verbose,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
