"""Fans router events out to per-WebSocket-client asyncio queues."""

import asyncio
import threading

__all__ = ["Broadcaster"]


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Thread-safe bridge from router worker threads to the event loop.

    ``broadcast_message`` may be called from any thread; the actual enqueue
    is scheduled on ``loop``. Each subscriber queue is bounded and drops its
    oldest message when full, so a slow client never stalls the router.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop, max_size: int) -> None:
        self._loop = loop
        self._max_size = max_size
        self._lock = threading.Lock()
        self._queues: list[asyncio.Queue[str]] = []

    def add_subscriber(self) -> asyncio.Queue[str]:
        """Create and register a new subscriber queue."""
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self._max_size)
        with self._lock:
            self._queues.append(queue)
        return queue

    def remove_subscriber(self, queue: asyncio.Queue[str]) -> None:
        with self._lock:
            self._queues.remove(queue)

    def broadcast_message(self, message: str) -> None:
        """Dispatch a message to all active subscriber queues safely."""
        with self._lock:
            queues = list(self._queues)
        for queue in queues:
            self._loop.call_soon_threadsafe(_enqueue_message, queue, message)
