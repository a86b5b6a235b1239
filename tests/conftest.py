"""Test configuration for pytest."""

import logging

import pytest


@pytest.fixture(autouse=True)
def configure_test_logging(monkeypatch):
    """Configure logging for tests to be minimal."""
    monkeypatch.setenv('BINSTRING_LOG_LEVEL', 'WARNING')

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['binstring.ranges', 'binstring.collect']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
