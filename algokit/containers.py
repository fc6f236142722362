"""Stacks and queues: fixed-capacity arrays, deque-backed and queue-backed variants."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class ContainerFullError(Exception):
    """Raised when adding to a container that has reached its capacity."""


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


class BoundedQueue:
    """A first-in first-out queue over a fixed run of slots.

    Slots are not reused: once capacity values have been enqueued the queue
    stays full, even after some are dequeued.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._used = 0

    def is_full(self) -> bool:
        return self._used == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise ContainerFullError("queue is full")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class BoundedStack:
    """A last-in first-out stack holding at most capacity values."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        if self.is_full():
            raise ContainerFullError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise IndexError("stack is empty, nothing to pop")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._items[-1]

    def reverse(self) -> None:
        """Turn the stack upside down in place."""
        self._items.reverse()

    def __iter__(self) -> Iterator[Any]:
        """Values from the top down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class DequeStack:
    """An unbounded stack kept in a deque."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class DequeQueue:
    """An unbounded queue kept in a deque."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class QueueStack:
    """A bounded stack built on a single queue by rotating it on access."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._queue: deque[Any] = deque()

    def is_full(self) -> bool:
        return len(self._queue) == self.capacity

    def is_empty(self) -> bool:
        return not self._queue

    def _bring_newest_to_front(self) -> None:
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def push(self, value: Any) -> None:
        if self.is_full():
            raise ContainerFullError("stack overflow")
        self._queue.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise IndexError("no element to delete")
        self._bring_newest_to_front()
        return self._queue.popleft()

    def top(self) -> Any:
        if self.is_empty():
            raise IndexError("stack is empty")
        self._bring_newest_to_front()
        value = self._queue.popleft()
        self._queue.append(value)
        return value

    def reverse(self) -> None:
        """Turn the stack upside down in place."""
        popped = [self.pop() for _ in range(len(self._queue))]
        for value in popped:
            self._queue.append(value)

    def __iter__(self) -> Iterator[Any]:
        """Values from the top down."""
        return reversed(list(self._queue))

    def __len__(self) -> int:
        return len(self._queue)