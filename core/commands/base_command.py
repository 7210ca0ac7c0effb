# file: core/commands/base_command.py

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from core.event_channel import CanExecuteChangedEvent
from core.exceptions import InvalidCommandTargetError


def _ensure_callable(target: Optional[Callable], role: str) -> Optional[Callable]:
    if target is not None and not callable(target):
        raise InvalidCommandTargetError(f"{role} must be callable or None, got {type(target).__name__}")
    return target


class BaseCommand(ABC):
    """
    Abstract base class for a UI-bindable command.

    A command bundles an action with an optional enablement predicate and
    exposes a change channel the UI observes to know when to re-query
    can_execute(). Subclasses only decide how a parameter reaches the
    action and predicate; the enablement rule lives here:

      * predicate present -> its result
      * no predicate, action present -> True
      * neither -> False

    execute() does not consult can_execute(); enforcing enablement belongs to
    the invoker (see CommandExecutor).
    """
    def __init__(self, execute_action: Optional[Callable] = None,
                 can_execute_predicate: Optional[Callable] = None,
                 name: Optional[str] = None,
                 weak_listeners: bool = False):
        self._execute_action = _ensure_callable(execute_action, "execute_action")
        self._can_execute_predicate = _ensure_callable(can_execute_predicate, "can_execute_predicate")
        self.name = name or self.__class__.__name__
        self.can_execute_changed = CanExecuteChangedEvent(weak_listeners=weak_listeners, name=f"{self.name}.CanExecuteChanged")
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def execute_action(self) -> Optional[Callable]:
        return self._execute_action

    @property
    def can_execute_predicate(self) -> Optional[Callable]:
        return self._can_execute_predicate

    @abstractmethod
    def _call_predicate(self, predicate: Callable, parameter: Any) -> bool:
        """Invoke the enablement predicate with whatever the variant passes it."""
        pass

    @abstractmethod
    def _call_action(self, action: Callable, parameter: Any):
        """Invoke the action with whatever the variant passes it."""
        pass

    def can_execute(self, parameter: Any = None) -> bool:
        """Returns whether the command is currently enabled."""
        predicate = self._can_execute_predicate
        if predicate is not None:
            return bool(self._call_predicate(predicate, parameter))
        return self._execute_action is not None

    def execute(self, parameter: Any = None):
        """
        Runs the action once. A command without an action does nothing.
        Exceptions raised by the action propagate to the caller.
        """
        action = self._execute_action
        if action is None:
            self.logger.debug(f"{self.name} has no action. Nothing to execute.")
            return
        self.logger.debug(f"Executing command: {self.name}")
        self._call_action(action, parameter)

    def raise_can_execute_changed(self):
        """Tells every subscribed listener to re-query can_execute()."""
        self.can_execute_changed.notify()

    # Same operation under the observer-style name
    notify_can_execute_changed = raise_can_execute_changed

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r}>"
