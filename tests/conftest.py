"""Root conftest for all tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru handlers bound to streams captured by a previous test."""
    yield
    logger.remove()
