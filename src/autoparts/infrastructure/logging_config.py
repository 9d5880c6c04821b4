"""Process-wide logging setup for the console application."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so they never mix with the menu on stdout."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT, force=True)
