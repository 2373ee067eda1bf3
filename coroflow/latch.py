"""A countdown that resumes an awaiting task once it reaches zero."""

from __future__ import annotations

import threading
from typing import Any

from coroflow.event import Event, _Executor


class Latch:
    """Thread safe counter awaited until enough work has been counted down.

    A latch created with a count of zero or less is complete from the start.
    """

    def __init__(self, count: int) -> None:
        self._lock = threading.Lock()
        self._count = count
        self._event = Event(initially_set=count <= 0)

    def is_ready(self) -> bool:
        """True once the latch has been counted down to zero."""
        return self._event.is_set()

    def remaining(self) -> int:
        """How much is still to be counted down."""
        with self._lock:
            return self._count

    def count_down(self, n: int = 1) -> None:
        """Count down by ``n``, resuming waiters here if it reaches zero."""
        if self._decrement(n):
            self._event.set()

    def count_down_on(self, executor: _Executor, n: int = 1) -> None:
        """Count down by ``n``, resuming waiters on ``executor`` if it reaches zero."""
        if self._decrement(n):
            self._event.set_on(executor)

    def __await__(self) -> Any:
        return self._event.__await__()

    def _decrement(self, n: int) -> bool:
        with self._lock:
            previous = self._count
            self._count -= n
        return previous <= n