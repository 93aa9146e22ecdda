import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop handlers a CLI run attached to the runner's (now closed) stderr."""
    level = logging.root.level
    handlers = list(logging.root.handlers)
    yield
    for handler in logging.root.handlers[:]:
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
