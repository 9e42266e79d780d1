"""Logging configuration loaded from environment variables."""
import os
from typing import Optional


class LogConfig:
    level: str
    log_file: Optional[str]

    def __init__(self):
        self.level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE") or None
