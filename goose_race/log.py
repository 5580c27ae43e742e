"""Logging setup — rich-rendered records under a single package logger."""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler

LOGGER_NAME = "goose_race"
LOG_LEVEL_ENV = "GOOSE_RACE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Silent until configure_logging() installs a real handler.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def resolve_log_level(level: str | None = None) -> str:
    """Pick the level from the argument, then the environment, then the default."""
    chosen = level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    return chosen.upper()


def configure_logging(level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(level))
    handler = RichHandler(show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
