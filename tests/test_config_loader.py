# file: tests/test_config_loader.py

import pytest
import json
from unittest.mock import patch, mock_open

from utils.config_loader import ConfigLoader
from core.exceptions import ConfigurationError

@pytest.fixture
def config_loader(temp_config_dir):
    """Initializes ConfigLoader with a temporary directory."""
    return ConfigLoader(temp_config_dir)

def test_config_loader_creates_directory(tmp_path):
    """Tests if the config directory is created on initialization."""
    config_dir = tmp_path / "nested" / "config"
    ConfigLoader(config_dir)
    assert config_dir.is_dir()

def test_load_all_configs_creates_defaults(config_loader, temp_config_dir):
    """Tests that default config files are created if they don't exist."""
    config_loader.load_all_configs()

    for filename in config_loader.defaults.keys():
        assert (temp_config_dir / filename).exists()

def test_commands_config_defaults(config_loader):
    config_loader.load_all_configs()
    commands_config = config_loader.get_config("commands_config.json")

    assert commands_config["weak_listeners"] is False
    assert commands_config["respect_can_execute"] is True
    assert commands_config["refresh_after_execute"] is False
    assert config_loader.get("system_config.json", "logging")["level"] == "INFO"

def test_get_config_falls_back_to_defaults_before_load(config_loader):
    assert config_loader.get("commands_config.json", "respect_can_execute") is True
    assert config_loader.get_config("unknown.json") == {}

def test_existing_file_overrides_defaults(config_loader, temp_config_dir):
    with open(temp_config_dir / "commands_config.json", 'w') as f:
        json.dump({"weak_listeners": True}, f)

    config_loader.load_all_configs()

    assert config_loader.get("commands_config.json", "weak_listeners") is True

def test_extra_json_files_are_loaded(config_loader, temp_config_dir):
    with open(temp_config_dir / "extra.json", 'w') as f:
        json.dump({"key": "value"}, f)

    config_loader.load_all_configs()

    assert config_loader.get("extra.json", "key") == "value"

def test_save_config_writes_to_file(config_loader, temp_config_dir):
    """Tests saving a configuration to a file."""
    test_data = {"key": "value"}
    filename = "test_config.json"

    config_loader.save_config(filename, test_data)

    file_path = temp_config_dir / filename
    assert file_path.exists()
    with open(file_path, 'r') as f:
        assert json.load(f) == test_data
    assert config_loader.get_config(filename) == test_data

def test_load_config_handles_json_decode_error(config_loader, temp_config_dir):
    """Tests that a corrupt JSON file is handled gracefully."""
    filename = "corrupt_config.json"
    file_path = temp_config_dir / filename

    with open(file_path, 'w') as f:
        f.write("{'invalid_json':}")

    default_data = {"default": True}
    loaded_config = config_loader._load_config(filename, default_data)

    # Should return default data
    assert loaded_config == default_data
    # Should have moved the corrupt file to a timestamped backup
    assert not file_path.exists()
    assert len(list(temp_config_dir.glob(f"{filename}.*.bak"))) == 1

def test_save_config_raises_configuration_error_on_io_error(config_loader):
    """Tests that save_config raises ConfigurationError on file write failure."""
    with patch("builtins.open", mock_open()) as mocked_file:
        mocked_file.side_effect = IOError("Disk full")

        with pytest.raises(ConfigurationError):
            config_loader.save_config("any_file.json", {"data": "any"})

def test_mutating_returned_config_leaves_defaults_untouched(config_loader):
    before_load = config_loader.get_config("commands_config.json")
    before_load["weak_listeners"] = True

    config_loader.load_all_configs()
    loaded = config_loader.get_config("system_config.json")
    loaded["logging"]["level"] = "DEBUG"

    assert config_loader.defaults["commands_config.json"]["weak_listeners"] is False
    assert config_loader.defaults["system_config.json"]["logging"]["level"] == "INFO"

def test_corrupt_config_returns_copy_of_defaults(config_loader, temp_config_dir):
    with open(temp_config_dir / "commands_config.json", 'w') as f:
        f.write("not json")

    config_loader.load_all_configs()
    config_loader.get_config("commands_config.json")["respect_can_execute"] = False

    assert config_loader.defaults["commands_config.json"]["respect_can_execute"] is True
