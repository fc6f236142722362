"""Minimum spanning trees by Kruskal's and Prim's methods."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from dataclasses import dataclass

from algokit.dsu import DisjointSet

Edge = tuple[int, int, float]


@dataclass(frozen=True)
class SpanningTree:
    """The chosen edges as (u, v, weight) in the order they were taken."""

    edges: tuple[Edge, ...]

    @property
    def cost(self) -> float:
        return sum(weight for _, _, weight in self.edges)


def kruskal(edges: Iterable[Edge]) -> SpanningTree:
    """Take edges by (weight, u, v) order whenever they join two components."""
    ordered = sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1]))
    forest = DisjointSet()
    for x, y, _ in ordered:
        forest.make(x)
        forest.make(y)
    chosen = [(x, y, weight) for x, y, weight in ordered if forest.union(x, y)]
    return SpanningTree(tuple(chosen))


def prim(vertex_count: int, edges: Iterable[Edge], source: int = 0) -> SpanningTree:
    """Grow a tree from source over undirected edges; vertices are 0..vertex_count-1."""
    adjacency: list[list[tuple[float, int]]] = [[] for _ in range(vertex_count)]
    for x, y, weight in edges:
        for vertex in (x, y):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
        adjacency[x].append((weight, y))
        adjacency[y].append((weight, x))
    if not 0 <= source < vertex_count:
        raise ValueError(f"vertex {source} is outside 0..{vertex_count - 1}")

    distance: list[float] = [math.inf] * vertex_count
    parent: list[int | None] = [None] * vertex_count
    in_tree = [False] * vertex_count
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        _, node = heapq.heappop(heap)
        if in_tree[node]:
            continue
        in_tree[node] = True
        for weight, child in adjacency[node]:
            if not in_tree[child] and weight < distance[child]:
                distance[child] = weight
                parent[child] = node
                heapq.heappush(heap, (weight, child))

    chosen = []
    for vertex, (up, weight) in enumerate(zip(parent, distance)):
        if vertex == source:
            continue
        if up is None:
            raise ValueError(f"vertex {vertex} cannot be reached from {source}")
        chosen.append((up, vertex, weight))
    return SpanningTree(tuple(chosen))