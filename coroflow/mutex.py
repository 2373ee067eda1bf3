"""A mutual exclusion lock whose acquisition suspends instead of blocking."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any

from coroflow.task import Task, _Awaiter


class ScopedLock:
    """Holds a locked Mutex and releases it exactly once."""

    def __init__(self, mutex: Mutex) -> None:
        self._mutex: Mutex | None = mutex

    def unlock(self) -> None:
        """Release the mutex; later calls do nothing."""
        mutex, self._mutex = self._mutex, None
        if mutex is not None:
            mutex.unlock()

    def __enter__(self) -> ScopedLock:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unlock()

    def __del__(self) -> None:
        if getattr(self, "_mutex", None) is not None:
            try:
                self.unlock()
            except Exception:
                pass


class _LockOperation(_Awaiter):
    """Awaitable that acquires the mutex and produces a ScopedLock."""

    def __init__(self, mutex: Mutex) -> None:
        self._mutex = mutex
        self._held: ScopedLock | None = None

    def await_ready(self) -> bool:
        return self._mutex.try_lock()

    def await_suspend(self, handle: Task[Any]) -> bool:
        return self._mutex._enqueue(handle)

    def await_resume(self) -> ScopedLock:
        return ScopedLock(self._mutex)

    async def __aenter__(self) -> ScopedLock:
        self._held = await self
        return self._held

    async def __aexit__(self, *exc_info: object) -> None:
        if self._held is not None:
            self._held.unlock()
            self._held = None


class Mutex:
    """A lock for tasks: waiters are suspended and handed the lock on unlock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._locked = False
        self._waiters: deque[Task[Any]] = deque()

    def lock(self) -> _LockOperation:
        """Return an awaitable that acquires the lock and yields a ScopedLock.

        It can also be used as ``async with mutex.lock():``.
        """
        return _LockOperation(self)

    def try_lock(self) -> bool:
        """Acquire the lock if it is free; True on success."""
        with self._lock:
            if self._locked:
                return False
            self._locked = True
            return True

    def unlock(self) -> None:
        """Release the lock, passing it directly to a waiting task if there is one.

        Raises RuntimeError if the mutex is not locked.
        """
        with self._lock:
            if not self._locked:
                raise RuntimeError("unlock of an unlocked mutex")
            if not self._waiters:
                self._locked = False
                return
            waiter = self._waiters.popleft()
        waiter.resume()

    def _enqueue(self, handle: Task[Any]) -> bool:
        with self._lock:
            if not self._locked:
                self._locked = True
                return False
            self._waiters.append(handle)
            return True