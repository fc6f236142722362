"""Undirected graph traversals, bridges and topological levels."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import count


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


class UndirectedGraph:
    """An undirected graph on vertices 0..vertex_count-1 kept as adjacency lists."""

    def __init__(self, vertex_count: int, edges: Iterable[tuple[int, int]] = ()) -> None:
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        for x, y in edges:
            self.add_edge(x, y)

    def add_edge(self, x: int, y: int) -> None:
        _check_vertex(x, self.vertex_count)
        _check_vertex(y, self.vertex_count)
        self._adjacency[x].append(y)
        self._adjacency[y].append(x)

    def neighbours(self, vertex: int) -> list[int]:
        _check_vertex(vertex, self.vertex_count)
        return list(self._adjacency[vertex])

    def adjacency_matrix(self) -> list[list[int]]:
        """Return a 0/1 matrix with 1 wherever an edge joins two vertices."""
        matrix = [[0] * self.vertex_count for _ in range(self.vertex_count)]
        for x, children in enumerate(self._adjacency):
            for y in children:
                matrix[x][y] = 1
        return matrix

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from start."""
        _check_vertex(start, self.vertex_count)
        seen = {start}
        order = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for child in self._adjacency[node]:
                if child not in seen:
                    seen.add(child)
                    queue.append(child)
        return order

    def dfs_postorder(self, start: int) -> list[int]:
        """Return vertices in depth-first post-order from start."""
        _check_vertex(start, self.vertex_count)
        seen = {start}
        order = []
        stack = [(start, iter(self._adjacency[start]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child not in seen:
                    seen.add(child)
                    stack.append((child, iter(self._adjacency[child])))
                    break
            else:
                stack.pop()
                order.append(node)
        return order

    def bridges(self, root: int) -> list[tuple[int, int]]:
        """Return bridges reachable from root as (child, parent) pairs."""
        _check_vertex(root, self.vertex_count)
        entry: dict[int, int] = {}
        low: dict[int, int] = {}
        found: list[tuple[int, int]] = []
        timer = count()

        def visit(node: int, parent: int | None) -> None:
            entry[node] = low[node] = next(timer)
            for child in self._adjacency[node]:
                if child == parent:
                    continue
                if child in entry:
                    low[node] = min(low[node], entry[child])
                else:
                    visit(child, node)
                    if low[child] > entry[node]:
                        found.append((child, node))
                    low[node] = min(low[node], low[child])

        visit(root, None)
        return found


def topological_levels(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Give each vertex of a directed graph its level in a multi-source sweep.

    Vertices with no incoming edges sit at level 1; a vertex gets one more than
    the vertex whose edge released it last. Vertices on a cycle stay at 0.
    """
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    indegree = [0] * vertex_count
    for x, y in edges:
        _check_vertex(x, vertex_count)
        _check_vertex(y, vertex_count)
        adjacency[x].append(y)
        indegree[y] += 1

    levels = [0] * vertex_count
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    for vertex in queue:
        levels[vertex] = 1
    while queue:
        node = queue.popleft()
        for child in adjacency[node]:
            indegree[child] -= 1
            if indegree[child] == 0:
                levels[child] = levels[node] + 1
                queue.append(child)
    return levels