# file: core/commands/relay_command.py

import numbers
from typing import Any, Callable, Generic, Optional, Type, TypeVar, get_origin

from core.commands.base_command import BaseCommand, _ensure_callable
from core.exceptions import CommandParameterError, InvalidCommandTargetError

T = TypeVar("T")


class Command(BaseCommand):
    """
    A parameterless command.

    The action and predicate take no arguments and are fixed at construction.
    Any parameter handed to can_execute()/execute() by a UI binding is ignored.

    Example:
        save = Command(self.save, lambda: self.is_dirty)
        save.can_execute()   # -> self.is_dirty
        save.execute()       # -> self.save()
    """
    def __init__(self, execute_action: Optional[Callable[[], Any]] = None,
                 can_execute_predicate: Optional[Callable[[], bool]] = None,
                 *, name: Optional[str] = None, weak_listeners: bool = False):
        super().__init__(execute_action, can_execute_predicate, name=name, weak_listeners=weak_listeners)

    def _call_predicate(self, predicate: Callable[[], bool], parameter: Any) -> bool:
        return predicate()

    def _call_action(self, action: Callable[[], Any], parameter: Any):
        action()


class ParameterizedCommand(BaseCommand, Generic[T]):
    """
    A command whose action and predicate take a single argument of type T.

    The value comes from the caller at query/execute time. When a
    `parameter_type` (or a `converter`) is given, the value is checked and
    converted before it reaches the action or predicate:

      * None passes through untouched (the UI supplied no parameter)
      * instances of `parameter_type` pass through
      * anything else is converted with `parameter_type(value)`; a numeric
        value that does not survive the conversion (2.9 -> int) and text
        going to bool are refused

    Generic aliases such as List[int] are checked against their origin
    (list); the item types are not inspected.

    A value that cannot be converted raises CommandParameterError, a TypeError.
    The command does not validate beyond that: supplying a sensible value is
    the caller's job. Conversion only happens when the action or predicate is
    actually consulted.

    Unlike Command, the action and predicate may be reassigned after
    construction.
    """
    def __init__(self, execute_action: Optional[Callable[[T], Any]] = None,
                 can_execute_predicate: Optional[Callable[[T], bool]] = None,
                 *, parameter_type: Optional[Type[T]] = None,
                 converter: Optional[Callable[[Any], T]] = None,
                 name: Optional[str] = None, weak_listeners: bool = False):
        super().__init__(execute_action, can_execute_predicate, name=name, weak_listeners=weak_listeners)
        self.parameter_type = parameter_type
        self.converter = _ensure_callable(converter, "converter")

    @BaseCommand.execute_action.setter
    def execute_action(self, action: Optional[Callable[[T], Any]]):
        self._execute_action = _ensure_callable(action, "execute_action")

    @BaseCommand.can_execute_predicate.setter
    def can_execute_predicate(self, predicate: Optional[Callable[[T], bool]]):
        self._can_execute_predicate = _ensure_callable(predicate, "can_execute_predicate")

    @property
    def parameter_type(self) -> Optional[Type[T]]:
        return self._parameter_type

    @parameter_type.setter
    def parameter_type(self, parameter_type: Optional[Type[T]]):
        # List[int] and dict[str, int] are checked against list and dict
        runtime_type = get_origin(parameter_type) or parameter_type
        if runtime_type is not None and not isinstance(runtime_type, type):
            raise InvalidCommandTargetError(
                f"parameter_type must be a class or a generic alias of one, got {parameter_type!r}"
            )
        self._parameter_type = parameter_type
        self._runtime_type = runtime_type

    def convert_parameter(self, value: Any) -> T:
        """Converts a caller-supplied value to T, or raises CommandParameterError."""
        if self.converter is not None:
            try:
                return self.converter(value)
            except (TypeError, ValueError) as e:
                raise CommandParameterError(f"{self.name}: cannot convert {value!r} with {self.converter!r}: {e}") from e

        target = self._runtime_type
        if target is None or value is None or isinstance(value, target):
            return value

        error = CommandParameterError(
            f"{self.name}: expected {target.__name__}, got {type(value).__name__} {value!r}"
        )
        if issubclass(target, bool) and isinstance(value, str):
            # bool("False") is True; pass a converter to parse text
            raise error

        try:
            converted = target(value)
        except (TypeError, ValueError) as e:
            raise error from e

        if isinstance(value, numbers.Number) and converted != value:
            # Lossy, e.g. 2.9 -> 2 or 2 -> True
            raise error
        return converted

    def _call_predicate(self, predicate: Callable[[T], bool], parameter: Any) -> bool:
        return predicate(self.convert_parameter(parameter))

    def _call_action(self, action: Callable[[T], Any], parameter: Any):
        action(self.convert_parameter(parameter))
