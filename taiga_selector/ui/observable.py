"""Latest-value observable used to publish presenter state."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[T], None]


class Observable(Generic[T]):
    """Holds a value and pushes every change to subscribers.

    Emission is synchronous and in subscription order. Nothing is
    buffered: a new subscriber only receives the latest value.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: list[Subscriber[T]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        self._emit(new_value)

    def subscribe(self, subscriber: Subscriber[T]) -> Callable[[], None]:
        """Subscribe and immediately receive the current value.

        Returns:
            A callable that removes the subscription
        """
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)
        self._deliver(subscriber, self._value)

        def unsubscribe() -> None:
            self.unsubscribe(subscriber)

        return unsubscribe

    def unsubscribe(self, subscriber: Subscriber[T]) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def clear(self) -> None:
        """Drop all subscribers."""
        self._subscribers.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _emit(self, value: T) -> None:
        # Copy so subscribers may unsubscribe from inside the callback
        for subscriber in list(self._subscribers):
            self._deliver(subscriber, value)

    def _deliver(self, subscriber: Subscriber[T], value: T) -> None:
        try:
            subscriber(value)
        except Exception as e:
            logger.error(f"Error in subscriber callback: {e}", exc_info=True)
