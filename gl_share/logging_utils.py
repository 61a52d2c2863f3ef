"""Logging utilities for gl-share."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "gl-share"


class StructuredFormatter(logging.Formatter):
    """Formatter that prefixes messages with a padded level name."""

    def format(self, record: logging.LogRecord) -> str:
        message = f"[{record.levelname:<7}] {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    # Repeated calls (tests, re-entrant main) must not stack handlers
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, StructuredFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    return logger
