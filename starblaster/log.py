"""Logging setup shared by every Star Blaster module."""
from __future__ import annotations
import logging
import sys

from . import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = settings.LOG_LEVEL) -> logging.Logger:
    """Configure the package logger once and return it."""
    root = logging.getLogger("starblaster")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
