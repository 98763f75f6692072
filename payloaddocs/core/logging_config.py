"""Logging setup for the documentation service.

Console logging is always installed. When ``log_dir`` is configured, two
files are written as well:
- info.log: INFO level and above
- error.log: ERROR level and above
"""

import logging
import sys

from payloaddocs.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure root logging with console and optional file handlers.

    Args:
        settings: Settings to read the level and log directory from. If None,
            uses global settings.

    Returns:
        The configured root logger.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        info_handler = logging.FileHandler(settings.log_dir / "info.log", encoding="utf-8")
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(formatter)
        root_logger.addHandler(info_handler)

        error_handler = logging.FileHandler(settings.log_dir / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    return root_logger
