"""Logging setup for command line entrypoints.

Library modules only call ``logging.getLogger(__name__)``; entrypoints decide
where records go. ``configure_logging`` installs one stderr handler on the
package loggers and is safe to call repeatedly.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from config import settings

__all__ = ["LOGGER_NAMES", "configure_logging", "reset_logging"]

LOGGER_NAMES = ("cli", "services", "scheme", "imaging", "formatting")

_FORMAT = "%(levelname)s %(name)s: %(message)s"
_HANDLER_ATTR = "_mcuc_handler"


def _drop_handlers(logger: logging.Logger) -> None:
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            logger.removeHandler(existing)


def configure_logging(
    enabled: bool,
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Route package log records to ``stream`` (stderr by default).

    When ``enabled`` is False only errors are emitted, matching a quiet CLI.
    """
    effective = (level or settings.LOG_LEVEL) if enabled else "ERROR"
    numeric = logging.getLevelName(effective)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        _drop_handlers(logger)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
        logger.setLevel(numeric)


def reset_logging() -> None:
    """Remove handlers installed by ``configure_logging`` and restore levels."""
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        _drop_handlers(logger)
        logger.setLevel(logging.NOTSET)
