"""In-memory queue of log entries waiting to be sent."""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from service_logging.models import LogEntry


class LogQueue:
    """Ordered buffer of log entries, drained in one go by :meth:`take`.

    Not thread-safe. Wrap it in a SharedLogQueue when several owners need
    to append to the same queue.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def append(self, entry: LogEntry) -> None:
        """Append a log entry to the queue."""
        self._entries.append(entry)

    def take(self) -> list[LogEntry]:
        """Return all queued entries, leaving the queue empty."""
        entries, self._entries = self._entries, []
        return entries

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self) -> None:
        """Discard all queued entries."""
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return "\n".join(str(entry) for entry in self._entries)


class SharedLogQueue:
    """Lock-guarded handle that lets several owners append to one LogQueue.

    Only :meth:`append` is exposed directly. Draining must go through
    :meth:`locked`, which holds the same lock::

        with shared.locked() as queue:
            batch = queue.take()
    """

    def __init__(self, queue: Optional[LogQueue] = None):
        self._queue = queue if queue is not None else LogQueue()
        self._lock = threading.Lock()

    def append(self, entry: LogEntry) -> None:
        """Append a log entry while holding the queue lock."""
        with self._lock:
            self._queue.append(entry)

    @contextmanager
    def locked(self) -> Iterator[LogQueue]:
        """Yield the underlying queue with the lock held."""
        with self._lock:
            yield self._queue
