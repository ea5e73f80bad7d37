# tests/conftest.py

"""Shared pytest fixtures for the sample test suite."""

import logging

import pytest

from sample.diagnostics import PACKAGE_LOGGER, DiagnosticContext, configure_logging


def pytest_configure(config):
    """Routes diagnostic messages to the console and to pytest's log capture."""
    configure_logging()


@pytest.fixture
def diagnostics(request) -> DiagnosticContext:
    """Returns a fresh DiagnosticContext named after the running test."""
    return DiagnosticContext(test_name=request.node.name)


@pytest.fixture
def package_logger():
    """Yields the `sample` logger and restores its handlers and level afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
