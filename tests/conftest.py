"""Pytest configuration and shared fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def quiet_jotl_logger():
    """Reset the jotl logger level so a verbose CLI run does not leak."""
    logger = logging.getLogger("jotl")
    level = logger.level
    yield logger
    logger.setLevel(level)
