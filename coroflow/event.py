"""A manually triggered signal that many tasks can await."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Protocol

from coroflow.task import Task, _Awaiter


class ResumeOrderPolicy(Enum):
    """Order in which waiters are resumed when an event is set."""

    #: Last waiter first; the cheapest order.
    LIFO = "lifo"
    #: First waiter first.
    FIFO = "fifo"


class _Executor(Protocol):
    def resume(self, handle: Task[Any] | None) -> None: ...


class _EventAwaiter(_Awaiter):
    """Suspends the awaiting task until the event is set."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def await_ready(self) -> bool:
        return self._event.is_set()

    def await_suspend(self, handle: Task[Any]) -> bool:
        return self._event._add_waiter(handle)

    def await_resume(self) -> None:
        return None


class Event:
    """A thread safe event that resumes every awaiting task once it is set.

    The event stays set until ``reset()`` is called, so awaiting a set event
    continues immediately.
    """

    def __init__(self, initially_set: bool = False) -> None:
        self._lock = threading.Lock()
        self._set = initially_set
        self._waiters: list[Task[Any]] = []

    def is_set(self) -> bool:
        """True while the event is in the set state."""
        with self._lock:
            return self._set

    def set(self, policy: ResumeOrderPolicy = ResumeOrderPolicy.LIFO) -> None:
        """Set the event and resume all waiters on the calling thread."""
        for waiter in self._take_waiters(policy):
            waiter.resume()

    def set_on(
        self, executor: _Executor, policy: ResumeOrderPolicy = ResumeOrderPolicy.LIFO
    ) -> None:
        """Set the event and hand every waiter to ``executor`` to be resumed."""
        for waiter in self._take_waiters(policy):
            executor.resume(waiter)

    def reset(self) -> None:
        """Return the event to the unset state; no effect if it is not set."""
        with self._lock:
            self._set = False

    def __await__(self) -> Any:
        return _EventAwaiter(self).__await__()

    def _add_waiter(self, handle: Task[Any]) -> bool:
        with self._lock:
            if self._set:
                return False
            self._waiters.append(handle)
            return True

    def _take_waiters(self, policy: ResumeOrderPolicy) -> list[Task[Any]]:
        with self._lock:
            if self._set:
                return []
            self._set = True
            waiters, self._waiters = self._waiters, []
        if policy is ResumeOrderPolicy.LIFO:
            waiters.reverse()
        return waiters