"""Pytest fixtures for Baybayin tests."""

import logging

import pytest

from baybayin.utils.log import PACKAGE_LOGGER


@pytest.fixture
def test_logger() -> logging.Logger:
    """Create a test logger."""
    logger = logging.getLogger("baybayin_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging (CLI runs bind them to temp streams)."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_tagalog_text():
    """Sample Tagalog sentence."""
    return "Magandang umaga sa inyong lahat"


@pytest.fixture
def sample_rows():
    """Rows for batch conversion tests."""
    return [
        {"id": 1, "text": "bata"},
        {"id": 2, "text": "mga bata"},
        {"id": 3, "text": ""},
        {"id": 4, "text": "salamat po"},
    ]
