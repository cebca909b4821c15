"""Logging setup shared by the calculator backend and frontend."""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "calculator"

_LOGGER: Optional[logging.Logger] = None


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Configure the application logger with a concise format.

    The configuration is idempotent: later calls only adjust the level.
    """
    global _LOGGER
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    if _LOGGER is not None:
        _LOGGER.setLevel(level)
        return _LOGGER

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)

    logger.debug("Logging initialised at level %s", logging.getLevelName(level))
    _LOGGER = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger for a module."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
