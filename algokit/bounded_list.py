"""A list with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ListFullError(Exception):
    """Raised when adding to a list that has reached its capacity."""


def in_validity_window(value: int) -> bool:
    """Tell whether a year lies in the 2021..2030 window."""
    return 2021 <= value <= 2030


class BoundedList:
    """An ordered list that holds at most capacity values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def _ensure_room(self) -> None:
        if self.is_full():
            raise ListFullError("list is full")

    def insert(self, value: Any) -> None:
        self._ensure_room()
        self._items.append(value)

    def insert_at(self, value: Any, position: int) -> None:
        self._ensure_room()
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} is out of range")
        self._items.insert(position, value)

    def remove_last(self) -> Any:
        if self.is_empty():
            raise IndexError("no element to delete")
        return self._items.pop()

    def remove_at(self, position: int) -> Any:
        if self.is_empty():
            raise IndexError("no element to delete")
        if not 0 <= position < len(self._items):
            raise IndexError(f"position {position} is out of range")
        return self._items.pop(position)

    def search(self, value: Any) -> int | None:
        """Index of the first occurrence of value, or None."""
        try:
            return self._items.index(value)
        except ValueError:
            return None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)