"""
Logging setup for the console game.

Library modules only call ``logging.getLogger(__name__)``; the command line
shell calls :func:`setup_logging` once to attach a handler to the package
logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

from connectfour.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL

LOGGER_NAME = "connectfour"


def setup_logging(level: Union[str, int, None] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    # Replace rather than stack handlers when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    # Records stop here so a configured root logger does not print them twice
    logger.propagate = False

    return logger
