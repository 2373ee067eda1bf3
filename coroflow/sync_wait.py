"""Blocking the calling thread until an awaitable completes."""

from __future__ import annotations

import threading
from collections.abc import Awaitable
from typing import Any, TypeVar

from coroflow.task import Task

T = TypeVar("T")


class SyncWaitEvent:
    """A manual-reset event that threads can block on."""

    def __init__(self, initially_set: bool = False) -> None:
        self._cond = threading.Condition()
        self._set = initially_set

    def set(self) -> None:
        with self._cond:
            self._set = True
            self._cond.notify_all()

    def reset(self) -> None:
        with self._cond:
            self._set = False

    def wait(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._set)


def sync_wait(awaitable: Awaitable[T]) -> T:
    """Run ``awaitable`` to completion, blocking this thread, and return its result."""
    event = SyncWaitEvent()
    outcome: dict[str, Any] = {}

    async def drive() -> None:
        try:
            outcome["value"] = await awaitable
        except Exception as exc:
            outcome["error"] = exc
        finally:
            event.set()

    driver = Task(drive())
    driver.resume()
    event.wait()
    del driver

    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("value")