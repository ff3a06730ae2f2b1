import logging
from logging.handlers import RotatingFileHandler

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
