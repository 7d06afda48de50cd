"""
Logging Configuration
Sets up the package logger for primkit.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from primkit.config.settings import Settings

PACKAGE_LOGGER = "primkit"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'primkit' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured 'primkit' logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def setup_logging_from_settings(settings: Settings) -> logging.Logger:
    """Configure logging from PRIMKIT_LOG_LEVEL / PRIMKIT_LOG_FILE settings."""
    return setup_logging(level=settings.log_level_value, log_file=settings.log_file)
