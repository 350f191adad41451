"""Logging setup shared by every netinsight module."""

import logging
import sys

PACKAGE = "netinsight"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

logger = logging.getLogger(PACKAGE)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``netinsight`` hierarchy.

    Module names under the package map to themselves. Any other name
    (``__main__``, a script) becomes a child of the package logger, so
    :func:`set_global_log_level` governs it too.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.
    """
    if name == PACKAGE or name.startswith(PACKAGE + "."):
        return logging.getLogger(name)
    return logger.getChild(name)


def set_global_log_level(level: int) -> None:
    """Send log records to stderr and set the package log level.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    logger.setLevel(level)
