"""Logging configuration helpers."""

import logging
from typing import TextIO

APP_LOGGER = "cali"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "cali-stderr"


def configure_logging(
    level: int = logging.WARNING, stream: TextIO | None = None
) -> logging.Logger:
    """Route ``cali`` records to stderr, switching to a detailed format for debug.

    Repeated calls reuse the named handler and only adjust level and format.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    handler = next(
        (entry for entry in logger.handlers if entry.get_name() == _HANDLER_NAME),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(stream)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    fmt = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT
    handler.setFormatter(logging.Formatter(fmt))
    return logger
