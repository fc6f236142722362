# algokit

A compact collection of classic algorithms and data structures in plain Python.
It has no third-party dependencies.

## Contents

| Module | What it provides |
| --- | --- |
| `algokit.dsu` | `DisjointSet`: union–find with path compression and union by size |
| `algokit.shortest_paths` | `bellman_ford` (returns a `BellmanFordResult`), `dijkstra`, `floyd_warshall`, `has_negative_cycle` |
| `algokit.spanning_tree` | `kruskal`, `prim`, both returning a `SpanningTree` with its `edges` and `cost` |
| `algokit.traversal` | `UndirectedGraph` (BFS, post-order DFS, bridges, adjacency matrix) and `topological_levels` |
| `algokit.dynamic` | `knapsack_max_value`, `min_cost_path` |
| `algokit.contest` | `arrange_alternating`, `steps_to_reach`, `steps_to_reach_by_walking`, `is_palindrome_sequence`, `capitalize_first` |
| `algokit.avl` | `AVLTree`, a self-balancing binary search tree that ignores duplicates |
| `algokit.caesar` | `encrypt`, `decrypt`, `shift_letters` |
| `algokit.doubly_linked` | `DoublyLinkedList` |
| `algokit.students` | `Student` records in a `StudentList` that can render a table |
| `algokit.bounded_list` | `BoundedList`, a fixed-capacity list, and `in_validity_window` |
| `algokit.polynomial` | `Polynomial` made of `Term`s, with addition |
| `algokit.scheduling` | `shortest_job_first`, `longest_job_first`, `shortest_remaining_time_first`, returning a `Schedule` |
| `algokit.containers` | `BoundedQueue`, `BoundedStack`, `DequeStack`, `DequeQueue`, `QueueStack` |

Graph functions work on vertices numbered `0..vertex_count - 1` and raise
`ValueError` for a vertex outside that range. Containers raise `IndexError`
when taking from an empty container; the bounded ones raise
`ContainerFullError` (in `algokit.containers`) or `ListFullError` (in
`algokit.bounded_list`) when full.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

Shortest paths:

```python
from algokit.shortest_paths import bellman_ford, dijkstra

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]
print(dijkstra(3, edges, source=0))          # [0, 3, 1]
result = bellman_ford(3, edges, source=0)
print(result.distances, result.negative_cycle)
```

Unreachable vertices get `math.inf` as their distance.

Minimum spanning tree:

```python
from algokit.spanning_tree import kruskal

tree = kruskal([(0, 1, 3), (1, 2, 1), (0, 2, 2)])
print(tree.edges, tree.cost)
```

Union–find:

```python
from algokit.dsu import DisjointSet

groups = DisjointSet([1, 2, 3])
groups.union(2, 3)
assert groups.find(3) == groups.find(2)
assert groups.size_of(3) == 2
```

Caesar cipher:

```python
from algokit.caesar import encrypt, decrypt

secret_text = encrypt("Hello World", 4)
assert decrypt(secret_text, 4) == "HelloWorld"
```

`encrypt` drops spaces, so the text that comes back from `decrypt` has no spaces in it.

CPU scheduling:

```python
from algokit.scheduling import Process, shortest_job_first

schedule = shortest_job_first(
    [Process(1, 1, 3), Process(2, 2, 4), Process(3, 1, 2), Process(4, 4, 4)]
)
print(schedule.format_table())
print(schedule.average_waiting_time())
```

AVL tree:

```python
from algokit.avl import AVLTree

tree = AVLTree([10, 20, 30, 40, 50, 25])
print(tree.preorder())   # [30, 20, 10, 25, 40, 50]
print(tree.inorder())
```

## What it does not do

This is a library only. It has no command-line program: nothing reads graphs
or other input from standard input or files, and results are returned as
Python values (or, for `Schedule.format_table` and `StudentList.format_table`,
as strings) for the caller to print.

## Running the tests

```
pytest
```