"""
Logging setup for SpectroEdit.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "SpectroEdit"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(level: int = logging.DEBUG, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'SpectroEdit' logger.

    Safe to call again (e.g. to change the level or add a log file);
    existing handlers are replaced rather than duplicated.

    Args:
        level: Logging level for the logger and its handlers
        log_file: Optional path to also write logs to

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


logger = setup_logger()
