# tests/conftest.py

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """
    The CLI reconfigures the root logger; drop the handlers it installs
    after each test so streams bound to captured output do not leak.
    """
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def mid_june_2026():
    return datetime(2026, 6, 15, 12, 30)
