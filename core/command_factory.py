# file: core/command_factory.py

import logging
from typing import Any, Callable, Optional, Type

from core.commands.relay_command import Command, ParameterizedCommand
from utils.config_loader import ConfigLoader


class CommandFactory:
    """
    Builds commands with the listener policy from commands_config.json.
    Keyword arguments passed to the create_* methods win over config.
    """
    def __init__(self, config_loader: ConfigLoader):
        self.config = config_loader
        self.logger = logging.getLogger(self.__class__.__name__)
        self.weak_listeners: bool = self.config.get("commands_config.json", "weak_listeners", False)

    def create_command(self, execute_action: Optional[Callable[[], Any]] = None,
                       can_execute_predicate: Optional[Callable[[], bool]] = None,
                       **kwargs) -> Command:
        kwargs.setdefault("weak_listeners", self.weak_listeners)
        command = Command(execute_action, can_execute_predicate, **kwargs)
        self.logger.debug(f"Created {command!r} (weak_listeners={kwargs['weak_listeners']})")
        return command

    def create_parameterized(self, execute_action: Optional[Callable[[Any], Any]] = None,
                             can_execute_predicate: Optional[Callable[[Any], bool]] = None,
                             parameter_type: Optional[Type] = None,
                             **kwargs) -> ParameterizedCommand:
        kwargs.setdefault("weak_listeners", self.weak_listeners)
        command = ParameterizedCommand(
            execute_action, can_execute_predicate, parameter_type=parameter_type, **kwargs
        )
        self.logger.debug(f"Created {command!r} (parameter_type={parameter_type}, weak_listeners={kwargs['weak_listeners']})")
        return command
