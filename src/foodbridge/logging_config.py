"""Logging setup shared by the FoodBridge app and its scripts"""

import logging
import sys

from foodbridge.config import config


class BelowWarningFilter(logging.Filter):
    """Let DEBUG/INFO records through, drop WARNING and above"""

    def filter(self, record):
        return record.levelno < logging.WARNING


def setup_logging(level: str | None = None):
    """
    Route DEBUG/INFO to stdout and WARNING/ERROR to stderr.

    Args:
        level: Optional level name; defaults to the configured LOG_LEVEL
    """
    level_name = (level or config.get("log_level", "INFO")).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter("%(asctime)s %(levelname)s:%(name)s:%(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(BelowWarningFilter())
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Re-running setup (uvicorn reload, tests) must not stack handlers
    root_logger.handlers.clear()
    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(stderr_handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, usually called with __name__"""
    return logging.getLogger(name)
