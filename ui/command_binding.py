# file: ui/command_binding.py

import logging
from typing import Any, Optional

from core.command_executor import CommandExecutor
from core.commands.base_command import BaseCommand
from core.event_channel import Subscription

STATE_NORMAL = "normal"
STATE_DISABLED = "disabled"


class CommandBinding:
    """
    Connects a clickable widget (ctk.CTkButton, tk.Button, ...) to a command.

    Clicking the widget runs the command; whenever the command raises
    CanExecuteChanged the widget's state is set from can_execute(parameter).
    Call unbind() when the widget goes away. With weak listeners enabled on
    the command the caller must also keep this binding referenced.
    """
    def __init__(self, widget, command: BaseCommand, parameter: Any = None,
                 executor: Optional[CommandExecutor] = None):
        self.widget = widget
        self.command = command
        self.parameter = parameter
        self.executor = executor
        self.logger = logging.getLogger(self.__class__.__name__)

        self._subscription: Optional[Subscription] = command.can_execute_changed.subscribe(self.refresh_state)
        self.widget.configure(command=self._on_click)
        self.refresh_state()
        self.logger.debug(f"Bound {command!r} to {widget!r}")

    @property
    def bound(self) -> bool:
        return self._subscription is not None

    def refresh_state(self):
        """Re-queries the command and enables/disables the widget."""
        enabled = self.command.can_execute(self.parameter)
        self.widget.configure(state=STATE_NORMAL if enabled else STATE_DISABLED)

    def set_parameter(self, parameter: Any):
        self.parameter = parameter
        if self.bound:
            self.refresh_state()

    def _on_click(self):
        if self.executor is not None:
            self.executor.execute(self.command, self.parameter)
        elif self.command.can_execute(self.parameter):
            self.command.execute(self.parameter)

    def unbind(self):
        """Releases the subscription and detaches the click callback."""
        if self._subscription is None:
            return
        self._subscription.dispose()
        self._subscription = None
        self.widget.configure(command=None)
        self.logger.debug(f"Unbound {self.command!r} from {self.widget!r}")


def bind_command(widget, command: BaseCommand, parameter: Any = None,
                 executor: Optional[CommandExecutor] = None) -> CommandBinding:
    """Binds a command to a widget and returns the binding."""
    return CommandBinding(widget, command, parameter=parameter, executor=executor)
