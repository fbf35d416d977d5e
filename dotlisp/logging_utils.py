"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from dotlisp.config import get_log_level

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink at `level`."""
    logger.remove()
    logger.add(sys.stderr, level=level or get_log_level(), format=_FORMAT)
