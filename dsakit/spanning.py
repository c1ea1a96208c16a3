"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge between two numbered vertices."""

    src: int
    dest: int
    weight: float


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first.

    Vertices are numbered ``0`` to ``vertex_count - 1``; an edge naming any
    other vertex raises ValueError.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    chosen: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge {edge} names unknown vertex {vertex}")
        src_root, dest_root = find(edge.src), find(edge.dest)
        if src_root != dest_root:
            chosen.append(edge)
            parent[src_root] = dest_root
    return chosen


def prim_mst(matrix: Sequence[Sequence[float]]) -> list[Edge]:
    """Return a minimum spanning tree of a graph given as a weight matrix.

    A zero entry means "no edge". The result holds one edge
    ``(parent, vertex)`` for every vertex but 0, in vertex order. Raises
    ValueError if the matrix is not square or the graph is not connected.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []

    key = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size):
        candidates = [
            vertex
            for vertex, (weight, done) in enumerate(zip(key, in_tree))
            if not done and weight < math.inf
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    return [
        Edge(parent[vertex], vertex, rows[vertex][parent[vertex]])
        for vertex in range(1, size)
    ]


def total_weight(edges: Iterable[Edge]) -> float:
    """Return the sum of the edge weights."""
    return sum(edge.weight for edge in edges)