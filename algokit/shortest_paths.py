"""Single-source and all-pairs shortest paths over weighted directed edges."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from dataclasses import dataclass

INF = math.inf

Edge = tuple[int, int, float]


@dataclass(frozen=True)
class BellmanFordResult:
    """Distances from the source (inf where unreachable) and a cycle flag."""

    distances: list[float]
    negative_cycle: bool


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _checked_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    checked = []
    for x, y, weight in edges:
        _check_vertex(x, vertex_count)
        _check_vertex(y, vertex_count)
        checked.append((x, y, weight))
    return checked


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int = 0) -> BellmanFordResult:
    """Relax every edge vertex_count - 1 times, then look for a negative cycle."""
    edge_list = _checked_edges(vertex_count, edges)
    _check_vertex(source, vertex_count)
    distances: list[float] = [INF] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        for x, y, weight in edge_list:
            if distances[x] + weight < distances[y]:
                distances[y] = distances[x] + weight
    negative_cycle = any(distances[x] + weight < distances[y] for x, y, weight in edge_list)
    return BellmanFordResult(distances, negative_cycle)


def dijkstra(vertex_count: int, edges: Iterable[Edge], source: int = 0) -> list[float]:
    """Return distances from source; edges must not have negative weights."""
    edge_list = _checked_edges(vertex_count, edges)
    _check_vertex(source, vertex_count)
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for x, y, weight in edge_list:
        if weight < 0:
            raise ValueError(f"negative weight {weight} on edge {x}->{y}")
        adjacency[x].append((y, weight))

    distances: list[float] = [INF] * vertex_count
    distances[source] = 0
    done = set()
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for child, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < distances[child]:
                distances[child] = candidate
                heapq.heappush(heap, (candidate, child))
    return distances


def floyd_warshall(vertex_count: int, edges: Iterable[Edge]) -> list[list[float]]:
    """Return the all-pairs distance matrix; a later edge x->y replaces an earlier one."""
    dist: list[list[float]] = [
        [0 if i == j else INF for j in range(vertex_count)] for i in range(vertex_count)
    ]
    for x, y, weight in _checked_edges(vertex_count, edges):
        dist[x][y] = weight
    for k in range(vertex_count):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, k_to_j in enumerate(through):
                if to_k + k_to_j < row[j]:
                    row[j] = to_k + k_to_j
    return dist


def has_negative_cycle(matrix: list[list[float]]) -> bool:
    """Tell whether a distance matrix has a negative entry on its diagonal."""
    return any(row[i] < 0 for i, row in enumerate(matrix))