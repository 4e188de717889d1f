"""Logging setup — stdlib loggers rendered through rich."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from lightshell import ui

LOGGER_NAME = "lightshell"


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if isinstance(level, int) else level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=ui.console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
