"""loguru setup.

Standard output is reserved for the paste URL, so the only sink is stderr.
"""

from __future__ import annotations

import sys

from loguru import logger

DEFAULT_LEVEL = "WARNING"
VERBOSE_LEVEL = "DEBUG"

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def configure_logging(*, verbose: bool = False) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format=_FORMAT,
        level=VERBOSE_LEVEL if verbose else DEFAULT_LEVEL,
        colorize=None,
    )


__all__ = ["configure_logging", "logger"]
