from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import CircularQueue, QueueEmptyError, QueueFullError


def test_fifo_order():
    queue = CircularQueue(5)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert list(queue) == [2, 3]
    assert len(queue) == 2


def test_wraps_around():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert queue.is_full()
    assert list(queue) == [2, 3, 4]
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]
    assert queue.is_empty()


def test_full_raises():
    queue = CircularQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    with pytest.raises(QueueFullError):
        queue.enqueue("c")
    assert list(queue) == ["a", "b"]


def test_empty_raises():
    queue = CircularQueue(2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(9)
    assert queue.dequeue() == 9
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_default_capacity_matches_source():
    assert CircularQueue().capacity == 5


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


@given(st.lists(st.one_of(st.integers(), st.none()), max_size=60))
def test_behaves_like_bounded_deque(operations):
    queue = CircularQueue(4)
    model = deque()
    for op in operations:
        if op is None:
            if model:
                assert queue.dequeue() == model.popleft()
            else:
                with pytest.raises(QueueEmptyError):
                    queue.dequeue()
        elif len(model) < 4:
            queue.enqueue(op)
            model.append(op)
        else:
            with pytest.raises(QueueFullError):
                queue.enqueue(op)
        assert list(queue) == list(model)
        assert len(queue) == len(model)