"""Package logger: one ``cart_eligibility`` root, child loggers per module."""

from __future__ import annotations

import logging

from . import config

ROOT_LOGGER_NAME = "cart_eligibility"
_CONFIGURED = False


def _configure_logger() -> None:
    """Configure the shared package logger once."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level = getattr(logging, config.CART_ELIGIBILITY_LOG_LEVEL.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if config.CART_ELIGIBILITY_STDOUT_LOG:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
        logger.propagate = False
    else:
        # Library default: leave output to the host application's handlers.
        logger.addHandler(logging.NullHandler())

    _CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a scoped package logger."""
    _configure_logger()
    base = logging.getLogger(ROOT_LOGGER_NAME)
    if not name or name == ROOT_LOGGER_NAME:
        return base
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return base.getChild(name)
