# file: core/event_channel.py

import inspect
import logging
import weakref
from typing import Callable, List, Optional, Union

from core.exceptions import InvalidCommandTargetError

Listener = Callable[[], None]


def _is_throwaway_function(listener: Listener) -> bool:
    """Lambdas and nested functions, which usually have no other owner."""
    if inspect.ismethod(listener) or not inspect.isfunction(listener):
        return False
    qualname = listener.__qualname__
    return "<lambda>" in qualname or "<locals>" in qualname


class Subscription:
    """
    Handle returned by CanExecuteChangedEvent.subscribe().

    The subscriber owns the handle and releases it with dispose() (or by
    leaving a `with` block). Disposing twice is harmless.
    """
    def __init__(self, event: "CanExecuteChangedEvent", listener: Listener, weak: bool):
        self._event: Optional["CanExecuteChangedEvent"] = event
        self.weak = weak
        if weak:
            if hasattr(listener, "__self__") and hasattr(listener, "__func__"):
                self._ref = weakref.WeakMethod(listener)
            else:
                self._ref = weakref.ref(listener)
        else:
            self._ref = lambda: listener

    @property
    def listener(self) -> Optional[Listener]:
        """The subscribed callable, or None once a weak target has been collected."""
        return self._ref()

    @property
    def released(self) -> bool:
        """True once dispose() has run, whether or not the target is alive."""
        return self._event is None

    @property
    def active(self) -> bool:
        return not self.released and self.listener is not None

    def matches(self, listener: Listener) -> bool:
        return self.listener == listener

    def dispose(self) -> bool:
        """Removes this subscription from its event. Returns False if already released."""
        event, self._event = self._event, None
        if event is None:
            return False
        event._remove(self)
        return True

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()

    def __repr__(self):
        state = "active" if self.active else "released"
        return f"<Subscription {self.listener!r} weak={self.weak} {state}>"


class CanExecuteChangedEvent:
    """
    Synchronous, ordered change-notification channel.

    Listeners take no arguments and are called in subscription order on the
    caller's thread. The listener list is snapshotted before each pass: a
    listener subscribed during a pass is first called on the next pass, and a
    listener released during a pass is skipped if it has not been called yet.

    No locking is done here; callers on several threads must synchronize
    externally.
    """

    def __init__(self, weak_listeners: bool = False, name: Optional[str] = None):
        self.weak_listeners = weak_listeners
        self.name = name or "CanExecuteChanged"
        self._subscriptions: List[Subscription] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def subscribe(self, listener: Listener, weak: Optional[bool] = None) -> Subscription:
        """
        Subscribes a zero-argument listener.

        Args:
            listener (Callable): Called with no arguments on every notification.
            weak (bool): Hold the listener through a weak reference so the
                         event does not keep its owner alive. Defaults to the
                         event's `weak_listeners` setting. A weakly held
                         lambda or nested function that nothing else
                         references is collected at once and never fires;
                         subscribe bound methods instead.

        Returns:
            Subscription: The handle the subscriber must release.
        """
        if not callable(listener):
            raise InvalidCommandTargetError(f"Listener must be callable, got {type(listener).__name__}")

        use_weak = self.weak_listeners if weak is None else weak
        try:
            subscription = Subscription(self, listener, use_weak)
        except TypeError:
            # Builtins and some C callables cannot be weakly referenced
            self.logger.warning(f"{listener!r} does not support weak references. Holding it strongly.")
            subscription = Subscription(self, listener, False)

        if subscription.weak and _is_throwaway_function(listener):
            self.logger.warning(
                f"Weakly subscribing {listener.__qualname__} to {self.name}. "
                "It is collected as soon as the caller drops it and will not fire."
            )

        self._subscriptions.append(subscription)
        self.logger.debug(f"Subscribed listener to {self.name}. Count: {len(self._subscriptions)}")
        return subscription

    def unsubscribe(self, listener: Union[Subscription, Listener]) -> bool:
        """
        Removes a subscription by handle, or the first subscription of the
        given callable. Returns False when nothing matched.
        """
        if isinstance(listener, Subscription):
            return listener.dispose()

        for subscription in self._subscriptions:
            if subscription.matches(listener):
                return subscription.dispose()
        return False

    def notify(self):
        """Invokes every live listener once, in subscription order."""
        snapshot = list(self._subscriptions)
        if not snapshot:
            return

        self.logger.debug(f"Raising {self.name} to {len(snapshot)} listener(s)")
        for subscription in snapshot:
            if subscription.released:
                continue
            listener = subscription.listener
            if listener is None:
                # Weak target was collected
                subscription.dispose()
                continue
            listener()

    def clear(self):
        """Releases every subscription."""
        for subscription in list(self._subscriptions):
            subscription.dispose()

    def _remove(self, subscription: Subscription):
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            # Already removed, which is fine
            pass

    def __len__(self) -> int:
        return sum(1 for s in self._subscriptions if s.listener is not None)
