"""Logging configuration helpers."""

import logging

DEFAULT_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(
    level: str = "INFO", log_format: str = DEFAULT_LOG_FORMAT
) -> logging.Logger:
    """Configure the ``ice_cream_shop`` logger and return it.

    The stream handler is installed once; later calls only update the level
    and format, so rebuilding the app with new settings takes effect.
    """
    logger = logging.getLogger("ice_cream_shop")
    logger.setLevel(level.upper())
    formatter = logging.Formatter(log_format)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
        logger.propagate = False
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    return logger
