"""Broadcast channel carrying published sentences and records to subscribers."""

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

__all__ = ["EventChannel"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EventChannel(Generic[T]):
    """Multicast, fire-and-forget channel.

    Subscribers are plain callables invoked synchronously, on the publishing
    thread, in subscription order. A subscriber that raises is logged and
    skipped; it never fails the publisher or starves the other subscribers.
    Subscribers that hand work to another thread (an asyncio loop, a queue)
    should do so without blocking.

    Example:
        >>> channel: EventChannel[str] = EventChannel("raw_gga")
        >>> unsubscribe = channel.subscribe(print)
        >>> channel.publish("$GNGGA,...")
        $GNGGA,...
        >>> unsubscribe()
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._subscribers: list[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a subscriber and return a callable that removes it."""
        with self._lock:
            self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        """Remove a subscriber; unknown callbacks are ignored."""
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, value: T) -> None:
        """Deliver a value to every current subscriber."""
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(value)
            except Exception:
                logger.exception("Subscriber of channel %r failed", self.name)
