"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

from .config import env_str

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    level = logging.getLevelName(log_level())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
