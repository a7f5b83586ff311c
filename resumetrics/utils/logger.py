"""Logging configuration for the Resumetrics core."""

import logging
import re
import sys
from typing import Optional

from resumetrics.config import LOG_LEVEL

# Provider credentials travel as a ``key`` query parameter; keep them out of log lines.
_API_KEY_PATTERN = re.compile(r"([?&]key=)[^&\s'\"]+")


class RedactApiKeyFilter(logging.Filter):
    """Mask ``key=...`` query parameters in formatted log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _API_KEY_PATTERN.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handler.addFilter(RedactApiKeyFilter())
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else getattr(logging, LOG_LEVEL, logging.INFO))
    elif level is not None:
        logger.setLevel(level)
    return logger
