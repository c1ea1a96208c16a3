"""An adjacency-list graph with breadth- and depth-first traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator


class Graph:
    """A graph stored as an ordered adjacency list."""

    def __init__(self) -> None:
        self._adj: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``, and back unless ``directed``."""
        self._adj.setdefault(u, []).append(v)
        if not directed:
            self._adj.setdefault(v, []).append(u)

    def neighbors(self, node: Hashable) -> list[Hashable]:
        """Return the neighbours of ``node`` in insertion order."""
        return list(self._adj.get(node, ()))

    def nodes(self) -> list[Hashable]:
        """Return every node that has an adjacency entry."""
        return list(self._adj)

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Return the nodes reachable from ``start`` in breadth-first order."""
        visited = {start}
        order: list[Hashable] = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._adj.get(current, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Return the nodes reachable from ``start`` in depth-first order.

        Uses an explicit stack; neighbours are pushed in reverse so that they
        are explored in insertion order.
        """
        visited: set[Hashable] = set()
        order: list[Hashable] = []
        stack = [start]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)
            stack.extend(
                neighbor
                for neighbor in reversed(self._adj.get(current, ()))
                if neighbor not in visited
            )
        return order

    def dfs_recursive(self, start: Hashable) -> list[Hashable]:
        """Return the depth-first preorder that plain recursion would produce.

        Each node is descended into as soon as it is met; the recursion is
        kept on a stack of neighbour iterators so deep graphs are safe.
        """
        visited = {start}
        order = [start]
        pending: list[Iterator[Hashable]] = [iter(self._adj.get(start, ()))]
        while pending:
            for neighbor in pending[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    pending.append(iter(self._adj.get(neighbor, ())))
                    break
            else:
                pending.pop()
        return order

    def adjacency_lines(self) -> list[str]:
        """Return one ``"node -> n1 n2 ..."`` line per node."""
        return [
            f"{node} -> " + " ".join(str(n) for n in neighbors)
            for node, neighbors in self._adj.items()
        ]

    def __repr__(self) -> str:
        return f"Graph({self._adj!r})"