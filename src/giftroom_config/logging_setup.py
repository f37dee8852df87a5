"""Process-wide logging configuration shared by the API, CLI and seeder."""

import logging
import sys
from functools import lru_cache

from giftroom_config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Libraries that log every request or statement at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Log to stdout at ``LOG_LEVEL``; runs once per process."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in ("giftroom", "giftroom_demo"):
        logging.getLogger(name).setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
