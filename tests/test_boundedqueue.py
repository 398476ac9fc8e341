import pytest

from dsakit.boundedqueue import BoundedQueue, QueueEmptyError, QueueFullError


def _filled():
    q = BoundedQueue(4)
    for item in (20, 30, 40, 50):
        q.enqueue(item)
    return q


def test_fifo_order():
    q = _filled()
    assert list(q) == [20, 30, 40, 50]
    assert q.dequeue() == 20
    assert q.dequeue() == 30
    assert list(q) == [40, 50]
    assert q.front() == 40
    assert len(q) == 2


def test_full_queue_rejects():
    q = _filled()
    with pytest.raises(QueueFullError):
        q.enqueue(60)
    assert list(q) == [20, 30, 40, 50]


def test_space_freed_after_dequeue():
    q = _filled()
    q.dequeue()
    q.enqueue(60)
    assert list(q) == [30, 40, 50, 60]


def test_empty_queue_errors():
    q = BoundedQueue(2)
    with pytest.raises(QueueEmptyError):
        q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.front()
    assert q.format() == ""


def test_format():
    q = _filled()
    q.dequeue()
    q.dequeue()
    assert q.format() == " 40 <--  50 <-- "


def test_negative_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(-1)


def test_zero_capacity_is_always_full():
    q = BoundedQueue(0)
    with pytest.raises(QueueFullError):
        q.enqueue(1)
    assert len(q) == 0