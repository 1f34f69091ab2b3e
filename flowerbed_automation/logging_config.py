"""
Logging Configuration
Sets up the 'flowerbed' logger namespace for command-line sessions.
"""
import logging
import sys
from typing import Optional

NAMESPACES = ("flowerbed", "flowerbed_automation")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures console (and optional file) logging for the flowerbed packages.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    # Log to stderr so stdout stays clean for JSON output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    for namespace in NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        # Avoid duplicate handlers when called more than once
        if logger.hasHandlers():
            logger.handlers.clear()

        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)

    logging.getLogger("flowerbed").debug("Logging initialized.")
