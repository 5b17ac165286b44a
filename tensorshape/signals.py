"""
Reactive value cell.

A ``Signal`` holds one value and calls its subscribers synchronously, in
subscription order, every time the value is assigned.
"""

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Signal(Generic[T]):
    """
    Value container that notifies subscribers on assignment.

    Example:
        >>> signal = create_signal(0)
        >>> _ = signal.subscribe(print)
        >>> signal.value = 1
        1
    """

    def __init__(self, initial_value: T):
        self._value = initial_value
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value
        logger.debug(f"Signal updated, notifying {len(self._subscribers)} subscriber(s)")
        # Copy so a subscriber may unsubscribe while being notified.
        for subscriber in list(self._subscribers):
            subscriber(value)

    def subscribe(self, subscriber: Callable[[T], None]) -> Callable[[], None]:
        """
        Register ``subscriber`` and return a function that removes it again.
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe


def create_signal(initial_value: T) -> Signal[T]:
    """Create a signal holding ``initial_value``."""
    return Signal(initial_value)


__all__ = [
    "Signal",
    "create_signal",
]
