"""Centralised logging configuration for the ``rulekit`` package."""

from __future__ import annotations

import logging
from typing import Literal

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | int | None = None,
) -> None:
    """Initialise standard logging with a consistent formatter.

    When ``level`` is omitted the ``log_level`` setting (``RULEKIT_LOG_LEVEL``) is used.
    The library itself never calls this; applications opt in.
    """

    if level is None:
        from rulekit.settings import get_settings

        level = get_settings().log_level

    if isinstance(level, str):
        logging_level = logging.getLevelName(level.upper())
    else:
        logging_level = level

    logging.basicConfig(level=logging_level, format=DEFAULT_FORMAT)


__all__ = ["DEFAULT_FORMAT", "configure"]
