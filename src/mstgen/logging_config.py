"""
Logging Configuration
Attaches console and file output to the 'mstgen' logger for applications that
embed the tree builder. The library itself only ever creates child loggers.
"""
import logging
import sys
from typing import Optional

from mstgen import config

PACKAGE_LOGGER = "mstgen"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'mstgen' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG). Defaults to config.LOG_LEVEL.
        log_file: Optional path to save logs to a file. Defaults to config.LOG_FILE,
            an empty string disables the file output.

    Returns:
        The configured 'mstgen' logger.
    """
    level = config.LOG_LEVEL if level is None else level
    log_file = config.LOG_FILE if log_file is None else log_file

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
