import queue
import threading

import pytest

from coroflow.event import Event
from coroflow.semaphore import AcquireResult, Semaphore
from coroflow.sync_wait import sync_wait
from coroflow.task import Task
from coroflow.thread_pool import ThreadPool


def _gather(tasks, timeout=30.0):
    done = queue.Queue()

    async def report(index, t):
        try:
            await t
        finally:
            done.put(index)

    drivers = [Task(report(i, t)) for i, t in enumerate(tasks)]
    for driver in drivers:
        driver.resume()
    finished = {done.get(timeout=timeout) for _ in tasks}
    assert finished == set(range(len(tasks)))
    return [t.result() for t in tasks]


def _acquire_once(s):
    async def acquire():
        return await s.acquire()

    return sync_wait(Task(acquire()))


@pytest.mark.parametrize(
    "name, member",
    [("acquired", AcquireResult.ACQUIRED), ("semaphore_stopped", AcquireResult.SEMAPHORE_STOPPED)],
)
def test_acquire_result_names(name, member):
    assert AcquireResult(name) is member


def test_acquire_available_resource():
    assert _acquire_once(Semaphore(1)) is AcquireResult.ACQUIRED


@pytest.mark.parametrize("args, expected", [((2, 5), 2), ((5, 2), 2), ((3,), 3)])
def test_starting_value_is_clamped(args, expected):
    assert Semaphore(*args).value() == expected


def test_binary():
    output = []
    s = Semaphore(1)

    async def body():
        assert await s.acquire() == AcquireResult.ACQUIRED
        assert not s.try_acquire()
        output.append(1)
        assert s.value() == 0
        s.release()
        assert s.value() == 1
        assert s.try_acquire()
        s.release()

    sync_wait(Task(body()))

    assert s.value() == 1
    assert s.try_acquire()
    assert s.value() == 0
    s.release()
    assert s.value() == 1
    assert output == [1]


def test_binary_many_waiters_until_event():
    value = 0
    s = Semaphore(1)
    e = Event()

    async def make_task():
        nonlocal value
        await s.acquire()
        assert not s.try_acquire()
        value += 1
        s.release()

    async def make_block_task():
        await s.acquire()
        assert not s.try_acquire()
        await e
        s.release()

    async def make_set_task():
        e.set()

    tasks = [Task(make_block_task())]
    tasks.extend(Task(make_task()) for _ in range(4))
    tasks.append(Task(make_set_task()))
    _gather(tasks)

    assert value == 4


def test_waiters_resumed_lifo():
    s = Semaphore(1, 0)
    order = []

    async def waiter(ident):
        await s.acquire()
        order.append(ident)

    waiters = [Task(waiter(i)) for i in (1, 2)]
    for w in waiters:
        w.resume()
    s.release()
    assert order == [2]
    assert s.value() == 0
    s.release()
    assert order == [2, 1]


def test_notify_waiters_stops_suspended_and_future_acquires():
    s = Semaphore(1, 0)

    async def acquire():
        return await s.acquire()

    t = Task(acquire())
    t.resume()
    assert not t.is_ready()
    s.notify_waiters()
    assert t.result() == AcquireResult.SEMAPHORE_STOPPED
    assert _acquire_once(s) is AcquireResult.SEMAPHORE_STOPPED


def test_ringbuffer():
    iterations = 10
    value = 0
    s = Semaphore(2, 2)

    with ThreadPool(thread_count=1) as tp:

        async def make_consumer_task():
            nonlocal value
            await tp.schedule()
            while await s.acquire() == AcquireResult.ACQUIRED:
                value += 1

        async def make_producer_task():
            await tp.schedule()
            for _ in range(2, iterations):
                s.release()
                await tp.yield_()
            s.notify_waiters()

        results = _gather([Task(make_producer_task()), Task(make_consumer_task())])

    assert results == [None, None]
    assert _acquire_once(s) is AcquireResult.SEMAPHORE_STOPPED
    assert value == iterations


def test_ringbuffer_many_producers_and_consumers():
    consumers = 16
    iterations = 2000
    value = 0
    value_lock = threading.Lock()
    s = Semaphore(50, 0)

    def current():
        with value_lock:
            return value

    with ThreadPool(thread_count=4) as tp:

        async def make_consumer_task():
            nonlocal value
            await tp.schedule()
            while await s.acquire() == AcquireResult.ACQUIRED:
                await tp.schedule()
                with value_lock:
                    value += 1

        async def make_producer_task():
            await tp.schedule()
            for _ in range(iterations):
                s.release()
            while current() < iterations:
                await tp.yield_()
            s.notify_waiters()

        tasks = [Task(make_consumer_task()) for _ in range(consumers)]
        tasks.append(Task(make_producer_task()))
        results = _gather(tasks)

    assert results == [None] * (consumers + 1)
    assert _acquire_once(s) is AcquireResult.SEMAPHORE_STOPPED
    assert value >= iterations