"""Central logging configuration.

Applies a root stdout handler so module loggers emit at the configured level
without per-module setup, and avoids duplicate handlers on reloads.
"""

import logging
from logging.config import dictConfig
from typing import Optional

from .config import settings


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
    }


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure application-wide logging once.

    If the root logger already has handlers, return to prevent duplicate
    output.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    level = (level or ("DEBUG" if settings.debug else settings.log_level)).upper()
    dictConfig(_dict_config(level))
