"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset verdict loggers after each test so handlers don't leak between tests."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name == "verdict" or name.startswith("verdict.")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.disabled = False


@pytest.fixture
def counting_check():
    """Factory for checks that record how many times they were called."""

    def _make(result):
        calls = []

        def check(subject):
            calls.append(subject)
            return result

        check.calls = calls
        return check

    return _make
