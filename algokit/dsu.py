"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class DisjointSet:
    """A forest of disjoint sets over hashable items."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for item in items:
            self.make(item)

    def make(self, item: Hashable) -> None:
        """Put item into a set of its own, resetting it if it was known."""
        self._parent[item] = item
        self._size[item] = 1

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding item."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of a and b; return False if they were already one."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def size_of(self, item: Hashable) -> int:
        """Return the number of items in the set holding item."""
        return self._size[self.find(item)]