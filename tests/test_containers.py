import pytest

from algokit.containers import (
    BoundedQueue,
    BoundedStack,
    ContainerFullError,
    DequeQueue,
    DequeStack,
    QueueStack,
)


def test_bounded_queue_example():
    q = BoundedQueue(5)
    for value in [1, 2, 3, 4, 5]:
        q.enqueue(value)
    assert q.dequeue() == 1
    assert q.peek() == 2


def test_bounded_queue_full_raises():
    q = BoundedQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    assert q.is_full()
    with pytest.raises(ContainerFullError):
        q.enqueue(3)


def test_bounded_queue_slots_not_reused():
    q = BoundedQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    q.dequeue()
    assert q.is_full()
    assert len(q) == 1
    with pytest.raises(ContainerFullError):
        q.enqueue(3)


def test_bounded_queue_empty_raises():
    q = BoundedQueue(3)
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.peek()


def test_bounded_queue_fifo_order():
    q = BoundedQueue(4)
    values = ["a", "b", "c", "d"]
    for v in values:
        q.enqueue(v)
    assert [q.dequeue() for _ in values] == values
    assert q.is_empty()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_bounded_stack_lifo_and_limits():
    s = BoundedStack(5)
    for value in [1, 2, 3, 4]:
        s.push(value)
    assert s.peek() == 4
    assert list(s) == [4, 3, 2, 1]
    s.push(5)
    assert s.is_full()
    with pytest.raises(ContainerFullError):
        s.push(6)
    assert [s.pop() for _ in range(5)] == [5, 4, 3, 2, 1]
    assert s.is_empty()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.peek()


def test_bounded_stack_reverse():
    s = BoundedStack(5)
    for value in [1, 2, 3, 4]:
        s.push(value)
    s.reverse()
    assert list(s) == [1, 2, 3, 4]
    assert s.peek() == 1
    s.reverse()
    assert s.peek() == 4


def test_deque_stack_example():
    st = DequeStack()
    st.push(1)
    st.push(2)
    assert st.pop() == 2
    assert st.top() == 1
    assert len(st) == 1


def test_deque_stack_empty_raises():
    st = DequeStack()
    with pytest.raises(IndexError):
        st.pop()
    with pytest.raises(IndexError):
        st.top()


def test_deque_queue_example():
    q = DequeQueue()
    q.enqueue(0)
    q.enqueue(-1)
    assert q.dequeue() == 0
    assert q.front() == -1


def test_deque_queue_empty_raises():
    q = DequeQueue()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.front()


def test_queue_stack_lifo():
    s = QueueStack(5)
    for value in [1, 2, 3, 4]:
        s.push(value)
    assert s.top() == 4
    assert s.top() == 4
    assert s.pop() == 4
    assert s.pop() == 3
    assert len(s) == 2


def test_queue_stack_reverse_example():
    s = QueueStack(5)
    for value in [1, 2, 3, 4]:
        s.push(value)
    s.reverse()
    assert list(s) == [1, 2, 3, 4]
    assert [s.pop() for _ in range(4)] == [1, 2, 3, 4]


def test_queue_stack_iteration_matches_pops():
    s = QueueStack(6)
    for value in [9, 8, 7, 6]:
        s.push(value)
    seen = list(s)
    assert seen == [s.pop() for _ in range(len(seen))]


def test_queue_stack_limits():
    s = QueueStack(1)
    assert s.is_empty()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()
    s.push(1)
    assert s.is_full()
    with pytest.raises(ContainerFullError):
        s.push(2)