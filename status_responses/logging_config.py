"""Shared logging configuration for the ``status_responses`` package."""

from __future__ import annotations

import logging as _logging
from typing import Iterable
from typing import Optional

from .settings import LoggingSettings

PACKAGE_LOGGER_NAME = "status_responses"
_HANDLER_NAME = "status_responses.stream"


def _find_handler(handlers: Iterable[_logging.Handler]) -> Optional[_logging.Handler]:
    """Return the shared stream handler when it has already been added."""
    for handler in handlers:
        if getattr(handler, "name", "") == _HANDLER_NAME:
            return handler
    return None


def configure_logging(
    level: Optional[int] = None, settings: Optional[LoggingSettings] = None
) -> _logging.Logger:
    """Configure and return the package logger.

    Args:
        level (Optional[int]): Logging level applied to the package logger.
            Overrides ``settings.level`` when both are given.
        settings (Optional[LoggingSettings]): Level, format and propagation
            options. Defaults to :class:`LoggingSettings` defaults.

    Returns:
        logging.Logger: The shared package logger instance.
    """
    settings = settings or LoggingSettings()
    logger = _logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(settings.level if level is None else level)
    handler = _find_handler(logger.handlers)
    if handler is None:
        handler = _logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(_logging.Formatter(settings.format))
    logger.propagate = settings.propagate
    return logger


configure_logging()

__all__ = ["configure_logging", "PACKAGE_LOGGER_NAME"]
