import pytest

from dsdrills.fifo import Queue


def test_enqueue_keeps_arrival_order():
    queue = Queue()
    for value in (2, -4, 6, -8):
        queue.enqueue(value)
    assert list(queue) == [2, -4, 6, -8]
    assert len(queue) == 4


def test_dequeue_returns_head_first():
    queue = Queue([0, -2, 4])
    assert queue.dequeue() == 0
    assert list(queue) == [-2, 4]
    assert len(queue) == 2


def test_dequeue_on_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_head_and_back():
    queue = Queue([3, 5, 9])
    assert queue.head() == 3
    assert queue.back() == 9


def test_head_and_back_truncate_to_int():
    queue = Queue([2.9, -3.7])
    assert queue.head() == int(2.9)
    assert queue.back() == int(-3.7)


@pytest.mark.parametrize("method", ["head", "back"])
def test_head_and_back_on_empty_raise(method):
    with pytest.raises(IndexError):
        getattr(Queue(), method)()


def test_is_empty():
    queue = Queue()
    assert queue.is_empty()
    queue.enqueue(1)
    assert not queue.is_empty()
    queue.dequeue()
    assert queue.is_empty()


def test_remove_negatives_example_from_dequeue_drill():
    values = [-7, 8, -2, -6, 10, -20, -16, 36, 40, -45, 50]
    queue = Queue(values)
    queue.remove_negatives()
    assert list(queue) == [8, 10, 36, 40, 50]
    assert len(queue) == 5


def test_remove_negatives_keeps_zero_and_order():
    queue = Queue([0, -1, 3, 0, -5])
    queue.remove_negatives()
    assert list(queue) == [0, 3, 0]


def test_remove_negatives_on_empty_queue_is_empty():
    queue = Queue()
    queue.remove_negatives()
    assert queue.is_empty()


def test_render_format():
    assert Queue([2, 4]).render() == "2 -> 4 -> END\nItems in the queue: 2\n"


def test_render_empty():
    assert Queue().render() == "Queue is empty\n"


def test_render_formats_whole_floats_without_fraction():
    assert Queue([4.0]).render() == Queue([4]).render()


def test_render_does_not_consume():
    queue = Queue([1, 2, 3])
    first = queue.render()
    assert queue.render() == first
    assert list(queue) == [1, 2, 3]