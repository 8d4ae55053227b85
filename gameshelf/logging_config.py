"""Logging configuration for gameshelf.

All modules log through children of the ``gameshelf`` logger. Nothing is
emitted until :func:`setup_logging` attaches a handler.
"""

import logging
import sys

LOGGER_NAME = "gameshelf"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the application logger.

    Args:
        debug: If True, log DEBUG and above instead of INFO and above

    Returns:
        The root logger for the application
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(console_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a module (e.g. 'inference', 'scanning')."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
