"""
Logging configuration for the modelhost client.

The library only attaches a NullHandler to the "modelhost" logger; hosts
that want console output call `setup_logging()` themselves.
"""
import logging
import sys
from typing import Optional

from modelhost.core.config import settings

LOGGER_NAME = "modelhost"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _level_number(level: str) -> int:
    """Resolve a level name like "info" to its number."""
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level}")
    return number


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Setup console logging for scripts using the client (default level from settings)."""
    level_number = _level_number(level or settings.log_level)
    
    # Configure root logger
    logging.basicConfig(
        level=level_number,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_number)
    
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
