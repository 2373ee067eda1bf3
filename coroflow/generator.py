"""Single-pass, lazily evaluated value generators."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Generator(Generic[T]):
    """An input iterator over the values produced by a generator function.

    Nothing runs until the first value is requested. Exceptions raised by the
    producing function propagate to the consumer and end the sequence.
    """

    def __init__(self, source: Iterator[T] | None = None) -> None:
        self._source = source

    def __iter__(self) -> Generator[T]:
        return self

    def __next__(self) -> T:
        if self._source is None:
            raise StopIteration
        try:
            return next(self._source)
        except BaseException:
            self._source = None
            raise


def generator(func: Callable[..., Iterator[T]]) -> Callable[..., Generator[T]]:
    """Decorate a generator function so that calling it returns a Generator."""
    if not inspect.isgeneratorfunction(func):
        raise TypeError("generator() requires a generator function")

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Generator[T]:
        return Generator(func(*args, **kwargs))

    return wrapper