"""Observer registry used by the models to publish state changes."""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class ChangeNotifier(Generic[T]):
    """Synchronous publish/subscribe channel.

    Listeners run in subscription order on the caller's thread, right after
    the model has applied a mutation. Exceptions raised by a listener
    propagate to the code that triggered the mutation.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register a listener.

        Args:
            listener: Called with the new state after each change

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, payload: T) -> None:
        """Deliver a change to every listener."""
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(payload)
