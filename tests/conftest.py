# file: tests/conftest.py

import pytest
from unittest.mock import MagicMock, patch

# --- Mocks for Core Components ---

@pytest.fixture(scope="function")
def mock_config_loader():
    """A ConfigLoader stand-in serving an in-memory commands_config.json."""
    configs = {
        "commands_config.json": {
            "weak_listeners": False,
            "respect_can_execute": True,
            "refresh_after_execute": False
        }
    }
    loader = MagicMock()
    loader.configs = configs
    loader.get_config.side_effect = lambda filename: configs.get(filename, {})
    loader.get.side_effect = lambda filename, key, default=None: configs.get(filename, {}).get(key, default)
    return loader

@pytest.fixture
def temp_config_dir(tmp_path):
    """Creates a temporary directory for config files."""
    return tmp_path

@pytest.fixture
def mock_widget():
    """A button-like widget recording configure() calls."""
    widget = MagicMock()
    widget.options = {}

    def configure(**kwargs):
        widget.options.update(kwargs)

    widget.configure.side_effect = configure
    return widget

# --- Global Mock for psutil.Process ---
# This ensures that MemoryLogFilter uses a mock process during tests,
# preventing actual system calls.
class MockProcess:
    def memory_info(self):
        return MagicMock(rss=100 * 1024 * 1024) # Default 100MB RSS

mock_psutil_process = MockProcess()

@pytest.fixture(scope="session", autouse=True)
def mock_psutil_process_globally():
    """Globally patches psutil.Process for all tests."""
    with patch('psutil.Process', return_value=mock_psutil_process):
        yield
