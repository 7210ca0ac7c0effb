# file: ui/counter_view_model.py

import logging
from typing import Callable, List

from core.command_factory import CommandFactory


class CounterViewModel:
    """
    View-model for the demo window.

    Holds a counter and exposes three commands:
      * increment_command - always enabled
      * decrement_command - enabled only while the count is above zero
      * add_command       - ParameterizedCommand[int], enabled for positive amounts
    """
    def __init__(self, command_factory: CommandFactory):
        self.count: int = 0
        self._count_listeners: List[Callable[[int], None]] = []
        self.logger = logging.getLogger(self.__class__.__name__)

        self.increment_command = command_factory.create_command(self.increment, name="Increment")
        self.decrement_command = command_factory.create_command(
            self.decrement, lambda: self.count > 0, name="Decrement"
        )
        self.add_command = command_factory.create_parameterized(
            self.add, lambda amount: amount > 0, parameter_type=int, name="Add"
        )

    def add_count_listener(self, listener: Callable[[int], None]):
        self._count_listeners.append(listener)

    def increment(self):
        self._set_count(self.count + 1)

    def decrement(self):
        self._set_count(self.count - 1)

    def add(self, amount: int):
        self._set_count(self.count + amount)

    def _set_count(self, value: int):
        self.count = value
        self.logger.debug(f"Count is now {value}")
        for listener in self._count_listeners:
            listener(value)
        # Only the decrement predicate depends on the count
        self.decrement_command.raise_can_execute_changed()
