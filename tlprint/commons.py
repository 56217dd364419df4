"""Logger settings and project constants"""
from __future__ import annotations

import logging

LOGGER_NAME = "tlprint"
LOG_FORMAT = "%(levelname)s: [%(filename)s:%(lineno)s:%(funcName)s()] %(message)s"

# Dot columns of the 2-inch head shared by the model family
DEFAULT_MAX_COLUMNS = 512
# Column count travels as nL nH
MAX_COLUMN_COUNT = 0xFFFF


def logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return logger of given name, without initialize it.

    Equivalent of logging.getLogger() call; handlers are left to the
    application, see :meth:`log_level`.
    """
    return logging.getLogger(name)


_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def log_level(level: str) -> None:
    """Set logger and handlers level to the given one.

    The terminal output is configured on first use. "none" disables every
    message, whatever its severity.
    """
    level = level.upper()
    if level == "NONE":
        logging.disable()
        return
    logging.disable(logging.NOTSET)
    logging.basicConfig(format=LOG_FORMAT)
    _logger.setLevel(level)
    for handler in _logger.handlers:
        handler.setLevel(level)
