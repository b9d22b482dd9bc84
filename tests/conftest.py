"""Root test configuration: keep the mdpost logger quiet between tests"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_project_logger():
    """Remove handlers the CLI attaches so tests do not leak console output."""
    yield
    logger = logging.getLogger("mdpost")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
