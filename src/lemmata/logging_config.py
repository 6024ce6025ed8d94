"""
Logging setup for applications embedding lemmata.

The library itself only emits through module loggers (lemmata.registry,
lemmata.dictionary, ...); handlers are the application's business.

Usage:
    from lemmata.config import Settings
    from lemmata.logging_config import setup_logging

    setup_logging(Settings.from_file("lemmata.toml"))
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from lemmata.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)


def _rotating_handler(settings: Settings) -> RotatingFileHandler:
    log_path = settings.log_file
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=log_path,
        maxBytes=settings.log_file_max_bytes,
        backupCount=settings.log_file_backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
    return handler


def setup_logging(settings: Settings | None = None) -> None:
    """Replace the root logger's handlers with stdout (+ log_file, if set)."""
    settings = settings or Settings()
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level_value)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if settings.log_file is not None:
        root_logger.addHandler(_rotating_handler(settings))
