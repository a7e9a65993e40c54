import logging

import pytest

from status_responses.logging_config import PACKAGE_LOGGER_NAME


@pytest.fixture()
def package_logs(caplog):
    """Let package log records reach ``caplog`` while a test runs."""

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    previous = package_logger.propagate
    package_logger.propagate = True
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME)
    yield caplog
    package_logger.propagate = previous
