import io

import pytest

from dslabs.queueing.queues import ArrayQueue, LinkedQueue


def _both():
    return ArrayQueue(), LinkedQueue()


def test_fifo_order():
    for q in (ArrayQueue(), LinkedQueue()):
        for value in [5, 1, 9, 3]:
            q.add(value)
        assert [q.pop() for _ in range(4)] == [5, 1, 9, 3]
        assert len(q) == 0


def test_pop_empty_raises():
    for q in (ArrayQueue(), LinkedQueue()):
        with pytest.raises(IndexError):
            q.pop()
        q.add(1)
        assert q.pop() == 1
        with pytest.raises(IndexError):
            q.pop()


def test_len_and_iteration():
    for q in (ArrayQueue(), LinkedQueue()):
        for value in "abc":
            q.add(value)
        assert len(q) == 3
        assert list(q) == ["a", "b", "c"]
        assert q.pop() == "a"
        assert list(q) == ["b", "c"]


def test_add_after_drain_reuses_queue():
    for q in (ArrayQueue(), LinkedQueue()):
        q.add(1)
        assert q.pop() == 1
        q.add(2)
        q.add(3)
        assert list(q) == [2, 3]


def test_find():
    for q in (ArrayQueue(), LinkedQueue()):
        for value in [1, 4, 6, 7]:
            q.add(value)
        assert q.find(lambda v: v % 2 == 0) == 4
        assert q.find(lambda v: v > 100) is None


def test_added_counts_every_add():
    for q in (ArrayQueue(), LinkedQueue()):
        for value in range(5):
            q.add(value)
        assert q.pop() == 0
        assert q.pop() == 1
        assert q.added == 5
        assert len(q) == 3


def test_array_trace_output():
    out = io.StringIO()
    q = ArrayQueue(trace=out)
    q.add(1)
    assert q.pop() == 1
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("[Добавление] [Массив] 0x")
    assert lines[1].startswith("[  Удаление] [Массив] 0x")


def test_linked_trace_output():
    out = io.StringIO()
    q = LinkedQueue(trace=out)
    q.add(1)
    assert q.pop() == 1
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("[Добавление] [Список] 0x")
    assert lines[1].startswith("[  Удаление] [Список] 0x")