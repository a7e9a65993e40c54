"""Tests for shared logging configuration."""

from __future__ import annotations

import importlib
import logging
from typing import List

import status_responses.logging_config as logging_config
from status_responses.settings import LoggingSettings


def _package_handlers(logger: logging.Logger) -> List[logging.Handler]:
    """Return the handlers the package itself attached to ``logger``."""
    return [
        handler
        for handler in logger.handlers
        if getattr(handler, "name", "") == logging_config._HANDLER_NAME
    ]


def _reset_package_logger() -> None:
    """Remove the package handler from the package logger to create a clean slate."""
    package_logger = logging.getLogger(logging_config.PACKAGE_LOGGER_NAME)
    for handler in _package_handlers(package_logger):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True


def _handler_ids(logger: logging.Logger) -> List[int]:
    """Return stable identifiers for package handlers attached to ``logger``."""
    return [id(handler) for handler in _package_handlers(logger)]


def test_configure_logging_is_idempotent() -> None:
    """Importing or configuring logging repeatedly must not add handlers."""
    _reset_package_logger()
    reloaded_logging = importlib.reload(logging_config)
    package_logger = logging.getLogger(reloaded_logging.PACKAGE_LOGGER_NAME)
    assert len(_package_handlers(package_logger)) == 1
    existing_handlers = _handler_ids(package_logger)

    reloaded_logging.configure_logging()
    reloaded_logging.configure_logging()

    assert _handler_ids(package_logger) == existing_handlers
    assert package_logger.propagate is False


def test_helpers_import_does_not_duplicate_handlers() -> None:
    """Reloading the helpers module reuses the shared logger configuration."""
    _reset_package_logger()
    reloaded_logging = importlib.reload(logging_config)
    package_logger = logging.getLogger(reloaded_logging.PACKAGE_LOGGER_NAME)
    initial_handlers = _handler_ids(package_logger)

    import status_responses.helpers as helpers_module

    helpers = importlib.reload(helpers_module)
    assert _handler_ids(package_logger) == initial_handlers
    assert helpers.logger is logging.getLogger(helpers.__name__)


def test_foreign_handlers_are_left_alone() -> None:
    """Handlers added by other code do not count as the package handler."""
    package_logger = logging.getLogger(logging_config.PACKAGE_LOGGER_NAME)
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    try:
        logging_config.configure_logging()
        assert foreign in package_logger.handlers
        assert len(_package_handlers(package_logger)) == 1
    finally:
        package_logger.removeHandler(foreign)


def test_settings_are_applied() -> None:
    """Level, format and propagation come from the supplied settings."""
    settings = LoggingSettings(level="debug", format="%(levelname)s|%(message)s", propagate=True)
    logger = logging_config.configure_logging(settings=settings)
    try:
        assert logger.level == logging.DEBUG
        assert logger.propagate is True
        handlers = _package_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].formatter._fmt == "%(levelname)s|%(message)s"

        logging_config.configure_logging(logging.WARNING, settings=settings)
        assert logger.level == logging.WARNING
    finally:
        logging_config.configure_logging()
    assert logger.level == logging.INFO
    assert logger.propagate is False
