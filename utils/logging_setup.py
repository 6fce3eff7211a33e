"""Logging configuration for the application entry point.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once, by ``main.py``.
"""
import logging
import os
import sys
from typing import IO

LOG_LEVEL_ENV = "KAKEIBO_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV)
        if not level:
            return logging.WARNING
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    return numeric if isinstance(numeric, int) else logging.WARNING


def configure_logging(
    level: int | str | None = None,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Attach a single stream handler to the root logger. Later calls are ignored."""
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    root = logging.getLogger()
    root.setLevel(_parse_level(level))
    root.addHandler(handler)
    _configured = True
