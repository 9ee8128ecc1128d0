"""Logging setup for applications embedding the record services."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Apply the package log format to the root logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(format=LOG_FORMAT, level=level)
