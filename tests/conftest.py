import logging

import pytest


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging to avoid Rich handler output in tests."""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if "Rich" in handler.__class__.__name__:
            root.removeHandler(handler)
    # Set to WARNING level to reduce noise in tests
    logging.basicConfig(level=logging.WARNING, format="%(message)s", force=True)
    yield
    logging.basicConfig(level=logging.INFO, force=True)
