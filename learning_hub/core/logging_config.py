"""
Logging configuration for the Learning Hub video catalog.

Console output always; a rotating log file when ``LOG_FILE`` is set.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional

from learning_hub.core.config.log_config import LogConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"

# Third-party loggers that are noisy at INFO
_QUIET_LOGGERS = ("google.auth", "google.resumable_media", "urllib3", "httpx")


def setup_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """Configure the root logger and return the package logger."""
    config = config or LogConfig()
    level = getattr(logging, config.level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if config.log_file:
        log_dir = os.path.dirname(config.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        # 10MB max, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root_logger.addHandler(file_handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger("learning_hub")
    logger.info(f"Logging initialized - Level: {config.level}, File: {config.log_file}")
    return logger
