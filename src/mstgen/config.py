"""
Configuration
=============
This module serves as the central registry for global constants.

Values that a deployment may want to change are read from the environment
once, at import time.

Exports:
    LOG_LEVEL (int): Level from MSTGEN_LOG_LEVEL (e.g. "DEBUG"), default INFO.
    LOG_FILE (str | None): Log file path from MSTGEN_LOG_FILE, default none.
"""
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def get_log_level(name: Optional[str]) -> int:
    """
    Translate a level name into a `logging` level, falling back to INFO.
    """
    if not name:
        return logging.INFO

    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{name}', using INFO.")
        return logging.INFO
    return level


# Global Constants
LOG_LEVEL: int = get_log_level(os.environ.get("MSTGEN_LOG_LEVEL"))
LOG_FILE: Optional[str] = os.environ.get("MSTGEN_LOG_FILE") or None
