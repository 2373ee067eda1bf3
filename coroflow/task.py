"""Lazily started coroutine tasks and the awaiter protocol they are built on."""

from __future__ import annotations

import functools
import inspect
import threading
from collections.abc import Callable, Coroutine, Generator as _GeneratorType
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_SUSPEND = object()
_local = threading.local()


def _running_stack() -> list[Task[Any]]:
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = []
        _local.stack = stack
    return stack


def _current_task() -> Task[Any]:
    """Return the task whose body is executing on this thread."""
    stack = _running_stack()
    if not stack:
        raise RuntimeError("awaiting outside of a running task")
    return stack[-1]


class _Awaiter:
    """Base for awaitables built from ready/suspend/resume steps.

    ``await_suspend`` receives the task to resume later; returning ``False``
    continues immediately, anything else suspends the task.
    """

    _handle: Task[Any] | None = None

    def await_ready(self) -> bool:
        return False

    def await_suspend(self, handle: Task[Any]) -> bool | None:
        self._handle = handle
        return True

    def await_resume(self) -> Any:
        self._handle = None
        return None

    def __await__(self) -> _GeneratorType[Any, None, Any]:
        if not self.await_ready():
            handle = _current_task()
            if self.await_suspend(handle) is not False:
                yield _SUSPEND
        return self.await_resume()


class SuspendAlways(_Awaiter):
    """Awaitable that always suspends the awaiting task until it is resumed."""


class SuspendNever(_Awaiter):
    """Awaitable that never suspends."""

    def await_ready(self) -> bool:
        return True


class Task(Generic[T]):
    """A coroutine that starts suspended and is driven by ``resume()``.

    Awaiting a task from another task runs it; if it suspends, the awaiting
    task continues once the awaited one has finished.
    """

    def __init__(self, coro: Coroutine[Any, Any, T] | None = None) -> None:
        if coro is not None and not inspect.iscoroutine(coro):
            raise TypeError("Task requires a coroutine object")
        self._coro = coro
        self._lock = threading.Lock()
        self._done = False
        self._running = False
        self._pending = 0
        self._value: T | None = None
        self._exception: BaseException | None = None
        self._continuation: Task[Any] | None = None

    def __del__(self) -> None:
        coro = getattr(self, "_coro", None)
        if coro is not None:
            try:
                coro.close()
            except Exception:
                pass

    def is_ready(self) -> bool:
        """True once the task has finished or has been destroyed."""
        return self._coro is None or self._done

    def resume(self) -> bool:
        """Run the task until its next suspension; True while it is unfinished."""
        with self._lock:
            if self._coro is None or self._done:
                return False
            if self._running:
                # Resumed while still executing: continue once it suspends.
                self._pending += 1
                return True
            self._running = True

        stack = _running_stack()
        while True:
            stack.append(self)
            try:
                finished = self._step()
            except BaseException:
                with self._lock:
                    self._done = True
                    self._running = False
                raise
            finally:
                stack.pop()
            with self._lock:
                if finished:
                    self._done = True
                    self._running = False
                    self._pending = 0
                    continuation, self._continuation = self._continuation, None
                    break
                if self._pending:
                    self._pending -= 1
                    continue
                self._running = False
                return True

        if continuation is not None:
            continuation.resume()
        return False

    def destroy(self) -> bool:
        """Discard the coroutine; True if there was one to discard."""
        if self._coro is None:
            return False
        coro, self._coro = self._coro, None
        coro.close()
        return True

    def result(self) -> T | None:
        """The returned value, re-raising any exception the task raised."""
        if self._exception is not None:
            raise self._exception
        return self._value

    def _step(self) -> bool:
        assert self._coro is not None
        try:
            self._coro.send(None)
        except StopIteration as stop:
            self._value = stop.value
            return True
        except Exception as exc:
            self._exception = exc
            return True
        return False

    def __await__(self) -> _GeneratorType[Any, None, T | None]:
        if not self.is_ready():
            handle = _current_task()
            self.resume()
            with self._lock:
                suspend = not self._done and self._coro is not None
                if suspend:
                    self._continuation = handle
            if suspend:
                yield _SUSPEND
        return self.result()


def task(func: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., Task[T]]:
    """Decorate an ``async def`` function so that calling it returns a Task."""
    if not inspect.iscoroutinefunction(func):
        raise TypeError("task() requires an async function")

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Task[T]:
        return Task(func(*args, **kwargs))

    return wrapper