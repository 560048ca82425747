"""In-process subscribers for formatted log lines."""

from __future__ import annotations

import threading
from typing import Callable, List

Subscriber = Callable[[str], object]


def _subscriber_name(callback: Subscriber) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class EventNotifier:
    """Ordered observer list notified with each formatted line."""

    def __init__(self, report: Callable[[str], None]) -> None:
        self._report = report
        self._lock = threading.Lock()
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Subscriber:
        if not callable(callback):
            raise TypeError(f"Subscriber must be callable, got {type(callback).__name__}")
        with self._lock:
            self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: Subscriber) -> bool:
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                return False
        return True

    @property
    def subscribers(self) -> List[Subscriber]:
        with self._lock:
            return list(self._subscribers)

    def notify(self, line: str) -> int:
        """Deliver a line to every subscriber in registration order.

        A subscriber that raises is reported and skipped; the rest still
        receive the line.

        Returns:
            Number of subscribers that returned normally.
        """
        delivered = 0
        for callback in self.subscribers:
            try:
                callback(line)
            except Exception as exc:
                self._report(f"Log subscriber {_subscriber_name(callback)} failed: {exc}")
                continue
            delivered += 1
        return delivered
