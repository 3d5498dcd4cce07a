"""Pytest configuration for qq CLI tests."""

import os
import sys
import pytest
from unittest.mock import MagicMock
from rich.console import Console

# Add the root directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def mock_console():
    """Create a mock console for testing."""
    console = MagicMock(spec=Console)
    return console


@pytest.fixture
def temp_env():
    """Create a temporary environment for tests that modify environment variables."""
    old_env = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(old_env)


@pytest.fixture
def config_paths(tmp_path):
    """Config and custom prompt paths inside a temporary directory."""
    config_dir = tmp_path / "quick-question"
    return str(config_dir / "qq.conf"), str(config_dir / "custom_prompt.txt")
