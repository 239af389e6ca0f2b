"""
Logging Configuration
Every module logs through `logging.getLogger(__name__)` under the
'swipescale' namespace; this module attaches the handlers once at startup.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "swipescale"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the application's log records to stdout and, optionally, a file.

    Args:
        level: Threshold for the namespace and its handlers (e.g. logging.DEBUG
            while chasing animation timing).
        log_file: Path of a log file, truncated on each start.

    Returns:
        The configured namespace logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Calling twice (tests, a second window) must not double every line
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
