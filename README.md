# coroflow

Lazily started coroutine tasks, a FIFO thread pool, thread-safe coroutine
synchronization primitives and a few socket helpers.

## Installation

```
pip install coroflow
```

To run the test suite, install the test extra and run pytest:

```
pip install coroflow[test]
pytest
```

## Tasks (`coroflow.task`)

A `Task` wraps a coroutine and starts suspended: nothing runs until it is
resumed or awaited. Decorate an `async def` function with `task` so that
calling it returns a `Task`.

```python
from coroflow.task import task
from coroflow.sync_wait import sync_wait

@task
async def answer():
    return 42

@task
async def outer():
    return await answer() + 1

assert sync_wait(outer()) == 43
```

- `Task.resume()` runs the task until its next suspension and returns `True`
  while it is unfinished.
- `Task.is_ready()` is `True` once the task has finished or been destroyed.
- `Task.result()` returns the value, or re-raises the exception the task
  ended with.
- `Task.destroy()` discards the coroutine.

Awaiting a task from another task runs it; if it suspends, the awaiting task
continues when it finishes. `SuspendAlways` suspends the awaiting task until
it is resumed again; `SuspendNever` continues immediately.

## Blocking on a result (`coroflow.sync_wait`)

`sync_wait(awaitable)` drives an awaitable to completion, blocking the
calling thread, and returns its result or raises its exception.
`SyncWaitEvent` is the manual-reset event it blocks on (`set`, `reset`,
`wait`).

## Generators (`coroflow.generator`)

`generator` turns a generator function into a `Generator`, a single-pass
iterator whose values are produced lazily; an exception in the producing
function propagates to the consumer and ends the sequence.

## Thread pool (`coroflow.thread_pool`)

`ThreadPool(thread_count=None, on_thread_start=None, on_thread_stop=None)`
runs tasks on worker threads in FIFO order; by default it starts one thread
per CPU. It can be used as a context manager, which shuts it down on exit.

- `await pool.schedule()` inside a task moves the task onto a worker thread;
  `await pool.yield_()` puts it at the back of the queue.
- `pool.submit(func, *args)` returns a task that calls `func` on the pool.
- `pool.resume(task)` and `pool.resume_all(tasks)` queue suspended tasks.
- `size()`, `empty()`, `queue_size()`, `queue_empty()` and `thread_count()`
  report on the pool.
- `shutdown()` finishes everything already queued, joins the workers and
  makes further `schedule()` calls raise `RuntimeError`.

## Synchronization

- `coroflow.event.Event`: `await event` suspends until `set()` is called;
  waiters are resumed in `ResumeOrderPolicy.LIFO` (default) or `FIFO` order.
  `set_on(executor, policy)` hands the waiters to an executor such as a
  `ThreadPool`. `reset()` returns the event to the unset state.
- `coroflow.latch.Latch(count)`: `await latch` suspends until `count_down(n)`
  (or `count_down_on(executor, n)`) brings the count to zero; `remaining()`
  and `is_ready()` report progress.
- `coroflow.mutex.Mutex`: `await mutex.lock()` returns a `ScopedLock`, released
  by its `unlock()` or on leaving a `with` block; `async with mutex.lock():`
  also works. `try_lock()` and `unlock()` act on the mutex directly.
- `coroflow.semaphore.Semaphore(least_max_value, starting_value=None)`:
  `await sem.acquire()` returns an `AcquireResult`; `release()`,
  `try_acquire()` and `value()` manage the count, and `notify_waiters()`
  stops the semaphore so every acquisition reports `SEMAPHORE_STOPPED`.

## Networking helpers

- `coroflow.ip_address`: `IpAddress` (with `from_string`, `to_string`,
  `domain`, `data`) and `Domain` for IPv4/IPv6 addresses.
- `coroflow.hostname.Hostname`: a host name ordered by its text.
- `coroflow.status`: `ConnectStatus`, `RecvStatus`, `SendStatus` and
  `SslHandshakeStatus` name the outcomes of network operations.
- `coroflow.socket_util`: `Socket` owns an operating-system socket
  (`is_valid`, `blocking`, `shutdown`, `close`, `native_handle`);
  `make_socket(opts)` and `make_accept_socket(opts, address, port, backlog=128)`
  create sockets from `SocketOptions` (`SocketType`, `Blocking`).

## What this package does not do

There is no I/O event loop, no polling of sockets, no TCP client or server,
no UDP peer, no DNS resolution and no TLS. The status enums and socket
helpers are building blocks only; sending and receiving data is left to the
standard `socket` module.