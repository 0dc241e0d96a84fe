from __future__ import annotations

import copy
import logging.config
from functools import lru_cache

_DEFAULT = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s"}
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
            "level": "INFO",
        },
    },
    "root": {"handlers": ["console"], "level": "INFO"},
}


@lru_cache(maxsize=1)
def setup_logging(level: str | None = None, logfile: str | None = None):
    """Configure logging once per process.

    - *level* overrides the console and root level (e.g. ``"DEBUG"``).
    - *logfile* adds a rotating file handler next to the console one.
    """
    config = copy.deepcopy(_DEFAULT)

    if level:
        level = level.upper()
        config["handlers"]["console"]["level"] = level
        config["root"]["level"] = level
    if logfile:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": logfile,
            "maxBytes": 500_000,
            "backupCount": 5,
            "formatter": "plain",
            "level": config["root"]["level"],
        }
        config["root"]["handlers"].append("file")

    logging.config.dictConfig(config)
