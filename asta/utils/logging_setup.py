"""Logging configuration helpers."""

import logging
from pathlib import Path
from typing import Optional

from ..config import AppConfig

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(funcName)s - %(message)s'


def setup_logging(config_log_level: str, log_file: Optional[Path] = None) -> None:
    """Configure logging with a console handler and an optional file handler.

    The console handler uses config_log_level. The file handler, when
    log_file is given, always records DEBUG output.
    """
    log_level = getattr(logging, config_log_level.upper(), logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if log_file is not None else log_level,
        handlers=handlers,
        force=True
    )


def configure_logging(config: AppConfig, log_file: Optional[Path] = None) -> None:
    """Apply the logging section of a loaded AppConfig."""
    setup_logging(config.logging.level, log_file)
