import pytest

from coroflow.event import Event, ResumeOrderPolicy
from coroflow.latch import Latch
from coroflow.sync_wait import sync_wait
from coroflow.task import Task
from coroflow.thread_pool import ThreadPool


async def _finish(t, latch):
    try:
        await t
    finally:
        latch.count_down()


async def _join(tasks):
    latch = Latch(len(tasks))
    drivers = [Task(_finish(t, latch)) for t in tasks]
    for driver in drivers:
        driver.resume()
    await latch
    return [t.result() for t in tasks]


async def _consumer(event):
    await event
    return 42


@pytest.mark.parametrize("watchers", [1, 3])
def test_watchers_resume_on_set(watchers):
    e = Event()
    values = [Task(_consumer(e)) for _ in range(watchers)]
    for v in values:
        v.resume()
    assert not any(v.is_ready() for v in values)
    e.set()
    assert all(v.is_ready() for v in values)
    assert [v.result() for v in values] == [42] * watchers


def test_reset():
    e = Event()
    for _ in range(2):
        e.reset()
        assert not e.is_set()
        value = Task(_consumer(e))
        value.resume()
        assert not value.is_ready()
        e.set()
        assert value.result() == 42


def test_initially_set_does_not_suspend():
    e = Event(initially_set=True)
    assert e.is_set()
    t = Task(_consumer(e))
    t.resume()
    assert t.is_ready()
    assert t.result() == 42


@pytest.mark.parametrize(
    "policy, expected",
    [(ResumeOrderPolicy.LIFO, [3, 2, 1]), (ResumeOrderPolicy.FIFO, [1, 2, 3])],
)
def test_resume_order(policy, expected):
    e = Event()
    order = []

    async def waiter(ident):
        await e
        order.append(ident)

    tasks = [Task(waiter(i)) for i in (1, 2, 3)]
    for t in tasks:
        t.resume()
    assert not any(t.is_ready() for t in tasks)
    e.set(policy)
    assert e.is_set()
    assert all(t.is_ready() for t in tasks)
    assert order == expected


def test_set_twice_resumes_once():
    e = Event()
    count = 0

    async def waiter():
        nonlocal count
        await e
        count += 1

    t = Task(waiter())
    t.resume()
    e.set()
    e.set()
    assert count == 1
    assert t.is_ready()


@pytest.mark.parametrize("use_executor", [False, True])
@pytest.mark.parametrize("waiter_count", [0, 1, 5])
def test_fifo(use_executor, waiter_count):
    e = Event()
    counter = 0

    with ThreadPool(thread_count=1) as tp:

        async def make_waiter(value):
            nonlocal counter
            await tp.schedule()
            await e
            counter += 1
            assert counter == value

        async def make_setter():
            await tp.schedule()
            assert counter == 0
            if use_executor:
                e.set_on(tp, ResumeOrderPolicy.FIFO)
            else:
                e.set(ResumeOrderPolicy.FIFO)

        tasks = [Task(make_waiter(v)) for v in range(1, waiter_count + 1)]
        tasks.append(Task(make_setter()))
        results = sync_wait(Task(_join(tasks)))

    assert e.is_set()
    assert results == [None] * (waiter_count + 1)
    assert counter == waiter_count