"""Logging helpers shared across modules."""

from __future__ import annotations

import logging
import os

_ROOT_LOGGER_NAME = "loc_counter"
_CONSOLE_HANDLER_NAME = "loc_counter.console"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the package logger without clobbering existing ones.

    Args:
        level: Log level name. Defaults to ``LOC_COUNTER_LOG_LEVEL`` or ``INFO``.

    Returns:
        The configured package logger.
    """
    level_name = (level or os.getenv("LOC_COUNTER_LOG_LEVEL") or "INFO").upper()

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(handler.get_name() == _CONSOLE_HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_CONSOLE_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger
