"""
Logging setup for Camber command line tools.

Library modules only create module level loggers; handlers are attached
here, once, by applications such as the ``camber`` CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.WARNING, stream=None) -> logging.Logger:
    """Configure the ``camber`` logger hierarchy

    Args:
        level: Logging level for the package loggers
        stream: Output stream, stderr by default

    Returns:
        The ``camber`` package logger
    """
    logger = logging.getLogger("camber")
    logger.setLevel(level)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        if getattr(handler, "_camber_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler._camber_handler = True
    logger.addHandler(handler)
    logger.propagate = False

    return logger
