"""
log_util.py: Shared logger factory for the citycast application.

Usage:
    from citycast.utils.log_util import app_logger

    logger = app_logger(__name__)
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def app_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return a module logger with a single stream handler attached.

    Streamlit re-executes modules on every rerun, so the handler is only added
    the first time a given logger is requested.

    :param name: Logger name, normally the module's ``__name__``.
    :param level: Optional level name; defaults to the LOG_LEVEL env variable or INFO.
    :return: Configured logger.
    """
    logger = logging.getLogger(name)
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
