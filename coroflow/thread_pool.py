"""A FIFO thread pool that resumes suspended tasks on worker threads."""

from __future__ import annotations

import os
import threading
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from coroflow.task import Task, _Awaiter

T = TypeVar("T")

ThreadCallback = Callable[[int], Any]


class _ScheduleOperation(_Awaiter):
    """Awaitable that moves the awaiting task onto one of the pool's threads."""

    def __init__(self, pool: ThreadPool) -> None:
        self._pool = pool

    def await_ready(self) -> bool:
        return False

    def await_suspend(self, handle: Task[Any]) -> None:
        self._pool._enqueue(handle)

    def await_resume(self) -> None:
        return None


class ThreadPool:
    """Executes scheduled tasks on a fixed set of worker threads in FIFO order.

    After ``shutdown()`` no new work may be scheduled, but everything already
    queued is completed before the workers exit.
    """

    def __init__(
        self,
        thread_count: int | None = None,
        on_thread_start: ThreadCallback | None = None,
        on_thread_stop: ThreadCallback | None = None,
    ) -> None:
        if thread_count is None:
            thread_count = os.cpu_count() or 1
        if thread_count < 0:
            raise ValueError("thread_count must not be negative")
        self._on_thread_start = on_thread_start
        self._on_thread_stop = on_thread_stop

        self._cond = threading.Condition()
        self._queue: deque[Task[Any]] = deque()
        self._size = 0
        self._size_lock = threading.Lock()
        self._stop = False
        self._shutdown_requested = False
        self._shutdown_lock = threading.Lock()

        self._threads = [
            threading.Thread(
                target=self._executor, args=(idx,), name=f"thread-pool-{idx}", daemon=True
            )
            for idx in range(thread_count)
        ]
        for thread in self._threads:
            thread.start()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def thread_count(self) -> int:
        """The number of worker threads."""
        return len(self._threads)

    def schedule(self) -> _ScheduleOperation:
        """Return an awaitable that continues the awaiting task on a worker thread.

        Raises RuntimeError once the pool is shutting down.
        """
        if self._shutdown_requested:
            raise RuntimeError("thread pool is shutting down, unable to schedule new tasks")
        self._add_size(1)
        return _ScheduleOperation(self)

    def submit(self, func: Callable[..., T], *args: Any) -> Task[T]:
        """Return a task that calls ``func(*args)`` on a worker thread."""

        async def run() -> T:
            await self.schedule()
            return func(*args)

        return Task(run())

    def resume(self, handle: Task[Any] | None) -> None:
        """Queue a suspended task to be resumed; None is ignored."""
        if handle is None:
            return
        self._add_size(1)
        self._enqueue(handle)

    def resume_all(self, handles: Iterable[Task[Any] | None]) -> None:
        """Queue every non-None task in ``handles`` to be resumed."""
        valid = [handle for handle in handles if handle is not None]
        if not valid:
            return
        self._add_size(len(valid))
        with self._cond:
            self._queue.extend(valid)
            self._cond.notify_all()

    def yield_(self) -> _ScheduleOperation:
        """Put the awaiting task at the back of the queue."""
        return self.schedule()

    def shutdown(self) -> None:
        """Stop accepting work, finish what is queued and join the workers."""
        with self._shutdown_lock:
            if self._shutdown_requested:
                return
            self._shutdown_requested = True
        with self._cond:
            self._stop = True
            self._cond.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def size(self) -> int:
        """Tasks waiting in the queue plus tasks currently executing."""
        with self._size_lock:
            return self._size

    def empty(self) -> bool:
        """True if nothing is queued or executing."""
        return self.size() == 0

    def queue_size(self) -> int:
        """Tasks waiting in the queue."""
        with self._cond:
            return len(self._queue)

    def queue_empty(self) -> bool:
        """True if the queue holds no tasks."""
        return self.queue_size() == 0

    def _add_size(self, n: int) -> None:
        with self._size_lock:
            self._size += n

    def _enqueue(self, handle: Task[Any]) -> None:
        with self._cond:
            self._queue.append(handle)
            self._cond.notify()

    def _executor(self, idx: int) -> None:
        if self._on_thread_start is not None:
            self._on_thread_start(idx)
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._queue or self._stop)
                if not self._queue:
                    break
                handle = self._queue.popleft()
            try:
                handle.resume()
            finally:
                self._add_size(-1)
        if self._on_thread_stop is not None:
            self._on_thread_stop(idx)