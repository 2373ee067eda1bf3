"""Lazy coroutine tasks, a FIFO thread pool, coroutine synchronization primitives and socket helpers."""

__version__ = "0.1.0"

__all__ = [
    "task",
    "generator",
    "sync_wait",
    "thread_pool",
    "event",
    "latch",
    "mutex",
    "semaphore",
    "ip_address",
    "status",
    "hostname",
    "socket_util",
]