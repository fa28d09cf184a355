"""Pytest configuration and fixtures for all tests."""

import pytest

from modelcatalog.core import config as config_module
from modelcatalog.core.config import ConfigManager
from modelcatalog.utils.log import get_logger


@pytest.fixture(autouse=True)
def detach_log_file():
    """Close any log file a test attached to the package logger."""
    yield
    get_logger().detach_file_handler()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the global config manager at a throwaway file.

    Yields the manager so tests can write configs before exercising code that
    reads through the module-level ``config_manager``.
    """
    manager = ConfigManager()
    manager.config_path = tmp_path / "modelcatalog.json"
    monkeypatch.setattr(config_module, "config_manager", manager)
    yield manager
