"""Static logging facade shared by every module of the package.

Messages go to stdout through a single named :mod:`logging` logger. The level
is read from the ``LOG_LEVEL`` environment variable (``INFO`` by default).
"""

import logging
import os
import sys


class Logger:
    """Class-level wrapper so callers can log without holding a logger."""

    _NAME = "business_days"
    _FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

    @staticmethod
    def _get() -> logging.Logger:
        logger = logging.getLogger(Logger._NAME)
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(Logger._FORMAT))
            logger.addHandler(handler)
            level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
            logger.setLevel(level if isinstance(level, int) else logging.INFO)
            logger.propagate = False
        return logger

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._get().debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._get().info(message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning message."""
        Logger._get().warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error message."""
        Logger._get().error(message)
