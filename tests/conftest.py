"""Fixtures shared by the attributify and CLI test suites."""

import logging
from unittest.mock import Mock

import pytest


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Each test sees freshly loaded config files."""
    from attributify.config_loader import clear_config_cache

    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers and levels set by get_logger/configure_from_config."""
    logger = logging.getLogger("attributify")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


@pytest.fixture
def diagnostics():
    """A logger stand-in that records info/warning calls."""
    return Mock(spec=["debug", "info", "warning", "error"])
