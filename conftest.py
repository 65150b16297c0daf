import pytest

from boardgame.debug import debug, DebugLevel


@pytest.fixture(autouse=True)
def reset_debug():
    """Restore default logging settings around every test."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
