"""
Shared fixtures for the ToyRobot tests.
"""

import logging

import pytest


ENV_VARS = (
    "TOYROBOT_GRID_WIDTH",
    "TOYROBOT_GRID_HEIGHT",
    "TOYROBOT_LOG_LEVEL",
    "TOYROBOT_LOG_FILE",
    "TOYROBOT_COMMAND_FILE",
    "TOYROBOT_PROMPT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every TOYROBOT_* variable for the duration of a test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
