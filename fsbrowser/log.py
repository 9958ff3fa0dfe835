"""Logging setup."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_ATTR = "_fsbrowser_handler"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send package logs to stderr. Safe to call more than once."""
    logger = logging.getLogger("fsbrowser")
    logger.setLevel(level)

    if not any(getattr(h, _HANDLER_ATTR, False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    return logger
