import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # The CLI binds log output to the stderr of the test that ran it
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
