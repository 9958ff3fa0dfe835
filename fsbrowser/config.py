"""Application settings."""

import logging
import os

APP_NAME = "fsbrowser"
WINDOW_TITLE = "File Manager"
WINDOW_SIZE = (600, 400)

LOG_LEVEL_ENV = "FSBROWSER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def log_level_from_env(environ=None) -> int:
    """Read the log level name from the environment."""
    if environ is None:
        environ = os.environ
    name = environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return _LEVELS.get(name, DEFAULT_LOG_LEVEL)
