"""
Logging setup for bo-field-mapper.

All module loggers live under the ``bo_field_mapper`` namespace so one
handler on the package logger covers the matcher, loaders and CLI.
"""

import logging
import os
import sys
from typing import Optional, TextIO

ROOT_LOGGER = "bo_field_mapper"

SIMPLE_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: Optional[str] = None,
    format_detailed: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Level name; falls back to $LOG_LEVEL, then INFO
        format_detailed: Timestamped format with logger names; also enabled
                         by LOG_FORMAT=detailed
        stream: Target stream, stdout unless given. The CLI passes stderr
                so JSONL events on stdout stay parseable
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()

    numeric_level = getattr(
        logging, (level or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO
    )
    logger.setLevel(numeric_level)

    detailed = format_detailed or os.getenv("LOG_FORMAT", "").lower() == "detailed"
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else SIMPLE_FORMAT))
    logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, re-rooted under the package namespace if needed."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name.split('.')[-1]}"
    return logging.getLogger(name)
