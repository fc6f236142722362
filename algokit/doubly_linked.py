"""A doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any, prev: _Node | None = None, next: _Node | None = None) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class DoublyLinkedList:
    """A sequence that links each node to its neighbours both ways."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is out of range")
        if position < self._size // 2:
            node = self._head
            for _ in range(position):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - position):
                node = node.prev
        return node

    def insert_at(self, value: Any, position: int) -> None:
        """Insert value so that it ends up at the given position."""
        if position == self._size:
            self.append(value)
            return
        after = self._node_at(position)
        node = _Node(value, prev=after.prev, next=after)
        if after.prev is None:
            self._head = node
        else:
            after.prev.next = node
        after.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def remove_first(self) -> Any:
        if self._head is None:
            raise IndexError("remove from empty list")
        return self._unlink(self._head)

    def remove_last(self) -> Any:
        if self._tail is None:
            raise IndexError("remove from empty list")
        return self._unlink(self._tail)

    def remove_at(self, position: int) -> Any:
        return self._unlink(self._node_at(position))

    def remove_value(self, value: Any) -> None:
        """Remove the first node holding value."""
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return
            node = node.next
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size