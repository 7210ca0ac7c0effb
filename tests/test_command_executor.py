# file: tests/test_command_executor.py

import logging
import pytest
from unittest.mock import MagicMock

from core.command_executor import CommandExecutor
from core.command_factory import CommandFactory
from core.commands.relay_command import Command, ParameterizedCommand


@pytest.fixture
def executor(mock_config_loader):
    return CommandExecutor(mock_config_loader)

def test_executor_runs_enabled_command(executor):
    action = MagicMock()

    assert executor.execute(Command(action)) is True
    action.assert_called_once_with()

def test_executor_skips_disabled_command(executor):
    action = MagicMock()

    assert executor.execute(Command(action, lambda: False)) is False
    action.assert_not_called()

def test_executor_forwards_parameter(executor):
    action = MagicMock()
    command = ParameterizedCommand(action, lambda x: x > 0, parameter_type=int)

    assert executor.execute(command, 3) is True
    assert executor.execute(command, -3) is False
    action.assert_called_once_with(3)

def test_executor_ignores_can_execute_when_configured(mock_config_loader):
    mock_config_loader.configs["commands_config.json"]["respect_can_execute"] = False
    executor = CommandExecutor(mock_config_loader)
    action = MagicMock()

    assert executor.execute(Command(action, lambda: False)) is True
    action.assert_called_once_with()

def test_executor_refreshes_after_execute_when_configured(mock_config_loader):
    mock_config_loader.configs["commands_config.json"]["refresh_after_execute"] = True
    executor = CommandExecutor(mock_config_loader)
    command = Command(MagicMock())
    listener = MagicMock()
    command.can_execute_changed.subscribe(listener)

    executor.execute(command)

    listener.assert_called_once_with()

def test_executor_logs_and_reraises_command_errors(executor, caplog):
    caplog.set_level(logging.ERROR)
    command = Command(MagicMock(side_effect=RuntimeError("disk full")), name="Save")

    with pytest.raises(RuntimeError, match="disk full"):
        executor.execute(command)
    assert "Command Save raised: disk full" in caplog.text

# --- CommandFactory ---

def test_factory_applies_weak_listener_config(mock_config_loader):
    mock_config_loader.configs["commands_config.json"]["weak_listeners"] = True
    factory = CommandFactory(mock_config_loader)

    command = factory.create_command(MagicMock())
    assert command.can_execute_changed.weak_listeners is True

    command = factory.create_parameterized(MagicMock(), parameter_type=int)
    assert command.can_execute_changed.weak_listeners is True
    assert command.parameter_type is int

def test_factory_kwargs_override_config(mock_config_loader):
    mock_config_loader.configs["commands_config.json"]["weak_listeners"] = True
    factory = CommandFactory(mock_config_loader)

    command = factory.create_command(MagicMock(), weak_listeners=False, name="Open")
    assert command.can_execute_changed.weak_listeners is False
    assert command.name == "Open"
