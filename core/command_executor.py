# file: core/command_executor.py

import logging
from typing import Any

from core.commands.base_command import BaseCommand
from utils.config_loader import ConfigLoader

class CommandExecutor:
    """
    The "Invoker" used by UI bindings.
    Commands themselves never check can_execute() before running; this class
    applies that policy (and the optional refresh afterwards) from
    commands_config.json.
    """
    def __init__(self, config_loader: ConfigLoader):
        self.config = config_loader
        self.logger = logging.getLogger(self.__class__.__name__)

        cmd_config = self.config.get_config("commands_config.json")
        self.respect_can_execute: bool = cmd_config.get("respect_can_execute", True)
        self.refresh_after_execute: bool = cmd_config.get("refresh_after_execute", False)
        self.logger.info(
            f"CommandExecutor initialized (respect_can_execute={self.respect_can_execute}, "
            f"refresh_after_execute={self.refresh_after_execute})"
        )

    def execute(self, command: BaseCommand, parameter: Any = None) -> bool:
        """
        Executes a command on behalf of a UI trigger.

        Args:
            command (BaseCommand): The command to execute.
            parameter (Any): The value forwarded to the command.

        Returns:
            bool: True if the command ran, False if it was disabled.
        """
        if self.respect_can_execute and not command.can_execute(parameter):
            self.logger.info(f"Command {command.name} is disabled. Skipping.")
            return False

        try:
            command.execute(parameter)
        except Exception as e:
            self.logger.error(f"Command {command.name} raised: {e}", exc_info=True)
            raise

        if self.refresh_after_execute:
            command.raise_can_execute_changed()
        return True
