"""A counting semaphore whose acquisition suspends instead of blocking."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any

from coroflow.task import Task, _Awaiter


class AcquireResult(Enum):
    """Outcome of awaiting ``Semaphore.acquire()``."""

    ACQUIRED = "acquired"
    SEMAPHORE_STOPPED = "semaphore_stopped"


class _AcquireOperation(_Awaiter):
    def __init__(self, semaphore: Semaphore) -> None:
        self._semaphore = semaphore

    def await_ready(self) -> bool:
        if self._semaphore._stopped:
            return True
        return self._semaphore.try_acquire()

    def await_suspend(self, handle: Task[Any]) -> bool:
        return self._semaphore._add_waiter(handle)

    def await_resume(self) -> AcquireResult:
        if self._semaphore._stopped:
            return AcquireResult.SEMAPHORE_STOPPED
        return AcquireResult.ACQUIRED


class Semaphore:
    """Counts available resources; tasks awaiting a resource are suspended.

    Waiters are resumed last in first out: semaphores are not meant to be fair.
    Once ``notify_waiters()`` is called every acquisition reports
    ``AcquireResult.SEMAPHORE_STOPPED``.
    """

    def __init__(self, least_max_value: int, starting_value: int | None = None) -> None:
        if starting_value is None:
            starting_value = least_max_value
        self._least_max_value = least_max_value
        self._counter = min(starting_value, least_max_value)
        self._counter_lock = threading.Lock()
        self._waiter_lock = threading.Lock()
        self._waiters: list[Task[Any]] = []
        self._stopped = False

    def acquire(self) -> _AcquireOperation:
        """Return an awaitable that takes one resource and yields an AcquireResult."""
        return _AcquireOperation(self)

    def release(self) -> None:
        """Return one resource, handing it straight to a waiter if there is one."""
        with self._waiter_lock:
            if not self._waiters:
                with self._counter_lock:
                    self._counter += 1
                return
            waiter = self._waiters.pop()
        waiter.resume()

    def try_acquire(self) -> bool:
        """Take a resource without waiting; True on success."""
        with self._counter_lock:
            if self._counter <= 0:
                return False
            self._counter -= 1
            return True

    def notify_waiters(self) -> None:
        """Stop the semaphore and resume every waiting task."""
        self._stopped = True
        while True:
            with self._waiter_lock:
                if not self._waiters:
                    return
                waiter = self._waiters.pop()
            waiter.resume()

    def value(self) -> int:
        """The number of resources currently available."""
        with self._counter_lock:
            return self._counter

    def _add_waiter(self, handle: Task[Any]) -> bool:
        with self._waiter_lock:
            if self._stopped:
                return False
            if self.try_acquire():
                return False
            self._waiters.append(handle)
            return True