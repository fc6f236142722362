"""A self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class AVLTree:
    """An ordered set kept height-balanced; duplicate values are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add value; return False if it was already present."""
        added = False

        def place(node: _Node | None) -> _Node:
            nonlocal added
            if node is None:
                added = True
                return _Node(value)
            if value < node.value:
                node.left = place(node.left)
            elif value > node.value:
                node.right = place(node.right)
            else:
                return node
            _update(node)
            factor = _balance(node)
            if factor > 1:
                assert node.left is not None
                if value > node.left.value:
                    node.left = _rotate_left(node.left)
                return _rotate_right(node)
            if factor < -1:
                assert node.right is not None
                if value < node.right.value:
                    node.right = _rotate_right(node.right)
                return _rotate_left(node)
            return node

        self._root = place(self._root)
        if added:
            self._size += 1
        return added

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        result: list[Any] = []

        def walk(node: _Node | None) -> None:
            if node is not None:
                walk(node.left)
                result.append(node.value)
                walk(node.right)

        walk(self._root)
        return result

    def preorder(self) -> list[Any]:
        """Values with each node before its subtrees."""
        result: list[Any] = []

        def walk(node: _Node | None) -> None:
            if node is not None:
                result.append(node.value)
                walk(node.left)
                walk(node.right)

        walk(self._root)
        return result

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self._root)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __len__(self) -> int:
        return self._size