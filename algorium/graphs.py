"""Shortest paths, depth-first traversal and adjacency-list graphs."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "Edge",
    "NegativeCycleError",
    "bellman_ford",
    "floyd_warshall",
    "Graph",
    "WeightedAdjacencyList",
]


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge between two zero-based vertices."""

    source: int
    destination: int
    weight: float


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError if a
    negative cycle is reachable, and ValueError for vertices out of range.
    """
    if vertex_count <= 0:
        raise ValueError("a graph needs at least one vertex")
    if not 0 <= source < vertex_count:
        raise ValueError(f"source vertex {source} out of range")
    edge_list = list(edges)
    for edge in edge_list:
        for vertex in (edge.source, edge.destination):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge vertex {vertex} out of range")

    dist = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for edge in edge_list:
            start = dist[edge.source]
            if start != math.inf and start + edge.weight < dist[edge.destination]:
                dist[edge.destination] = start + edge.weight

    for edge in edge_list:
        start = dist[edge.source]
        if start != math.inf and start + edge.weight < dist[edge.destination]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances for a square weight matrix.

    A missing edge is given as ``math.inf``. The input is not modified.
    Raises ValueError if the matrix is not square.
    """
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("matrix must be square")
    for k in range(size):
        via = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, from_k in enumerate(via):
                if to_k + from_k < row[j]:
                    row[j] = to_k + from_k
    return dist


class Graph:
    """Undirected graph with vertices numbered from 1."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacent: list[list[int]] = [[] for _ in range(vertex_count)]

    def _index(self, vertex: int) -> int:
        if not 1 <= vertex <= len(self._adjacent):
            raise ValueError(f"vertex {vertex} out of range")
        return vertex - 1

    def add_edge(self, a: int, b: int) -> None:
        """Connect vertices ``a`` and ``b``."""
        i, j = self._index(a), self._index(b)
        self._adjacent[i].append(j)
        self._adjacent[j].append(i)

    def dfs_postorder(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first post-order."""
        root = self._index(start)
        visited = {root}
        order: list[int] = []
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacent[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append((nxt, iter(self._adjacent[nxt])))
                    break
            else:
                stack.pop()
                order.append(vertex + 1)
        return order


class WeightedAdjacencyList:
    """Undirected weighted graph; each vertex lists its newest edge first."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._lists: list[deque[tuple[int, float]]] = [
            deque() for _ in range(vertex_count)
        ]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._lists):
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, start: int, end: int, weight: float) -> None:
        """Add an edge in both directions."""
        self._check(start)
        self._check(end)
        self._lists[start].appendleft((end, weight))
        self._lists[end].appendleft((start, weight))

    def neighbours(self, vertex: int) -> list[tuple[int, float]]:
        """Return ``(vertex, weight)`` pairs adjacent to ``vertex``, newest first."""
        self._check(vertex)
        return list(self._lists[vertex])

    def render(self) -> str:
        """Return one ``v->a->b->null`` line per vertex."""
        return "\n".join(
            f"{vertex}->" + "".join(f"{end}->" for end, _ in entries) + "null"
            for vertex, entries in enumerate(self._lists)
        )