import pytest

from labstructs.circular_queue import CircularQueue


def test_new_queue_is_empty_with_sentinel_indices():
    queue = CircularQueue()
    assert queue.is_empty()
    assert len(queue) == 0
    assert queue.front() == -1
    assert queue.back() == -1
    assert queue.capacity() == 3


def test_fifo_order():
    queue = CircularQueue(6)
    values = [3, 8, 1, 9, 4]
    for value in values:
        queue.enqueue(value)
    assert list(queue) == values
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_front_drifts_on_dequeue():
    queue = CircularQueue(6)
    for value in (5, 6, 7):
        queue.enqueue(value)
    queue.dequeue()
    assert queue.front() == 1
    assert list(queue) == [6, 7]


def test_wraps_around_without_growing():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert queue.capacity() == 3
    assert queue.back() == 0
    assert list(queue) == [2, 3, 4]


def test_grow_from_wrapped_state_keeps_order():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    queue.dequeue()
    queue.enqueue(4)
    queue.enqueue(5)
    assert queue.capacity() == 6
    assert queue.front() == 0
    assert queue.back() == len(queue) - 1
    assert list(queue) == [2, 3, 4, 5]
    assert [queue.dequeue() for _ in range(4)] == [2, 3, 4, 5]


def test_many_mixed_operations_preserve_fifo():
    queue = CircularQueue(2)
    expected = []
    for value in range(40):
        queue.enqueue(value)
        expected.append(value)
        if value % 3 == 0:
            assert queue.dequeue() == expected.pop(0)
        assert list(queue) == expected
        assert len(queue) <= queue.capacity()


def test_fill_constructor_makes_full_queue():
    queue = CircularQueue(4, 7)
    assert list(queue) == [7, 7, 7, 7]
    assert len(queue) == queue.capacity()
    assert queue.front() == 0
    assert queue.back() == queue.capacity() - 1


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        CircularQueue().dequeue()


def test_dequeue_last_element_resets_indices():
    queue = CircularQueue()
    queue.enqueue(3)
    assert queue.dequeue() == 3
    assert queue.front() == -1
    assert queue.back() == -1


def test_render():
    queue = CircularQueue()
    assert queue.render() == "[x]"
    queue.enqueue(3)
    assert queue.render() == "| 3 | "


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)