"""CLI test fixtures."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru_sinks():
    """Drop sinks the CLI callback bound to CliRunner's captured stdout."""
    yield
    logger.remove()
    logger.add(sys.stderr)
