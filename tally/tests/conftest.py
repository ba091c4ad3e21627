import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
