"""Directed graph stored as per-vertex adjacency lists with degree bookkeeping."""

from __future__ import annotations

from collections.abc import Iterator


class Graph:
    """A directed graph over vertices ``1 .. vertex_count``.

    Neighbours of a vertex are reported most recently added first, and the
    graph keeps in/out degrees together with their running maxima.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self.vertex_count = vertex_count
        self.clear()

    def clear(self) -> None:
        """Remove every edge and reset all degree information."""
        size = self.vertex_count + 1
        self._adjacency: list[list[int]] = [[] for _ in range(size)]
        self.in_degree: list[int] = [0] * size
        self.out_degree: list[int] = [0] * size
        self.max_in_degree = 0
        self.max_out_degree = 0
        self.edge_count = 0

    def _check_vertex(self, vertex: int) -> None:
        if not 1 <= vertex <= self.vertex_count:
            raise ValueError(
                f"vertex {vertex} outside the range 1..{self.vertex_count}"
            )

    def add_edge(self, src: int, dst: int) -> None:
        """Add the directed edge ``src -> dst``."""
        self._check_vertex(src)
        self._check_vertex(dst)
        self._adjacency[src].append(dst)
        self.edge_count += 1
        self.in_degree[dst] += 1
        self.out_degree[src] += 1
        self.max_in_degree = max(self.max_in_degree, self.in_degree[dst])
        self.max_out_degree = max(self.max_out_degree, self.out_degree[src])

    def neighbors(self, vertex: int) -> list[int]:
        """Return the out-neighbours of ``vertex``, newest edge first."""
        self._check_vertex(vertex)
        return self._adjacency[vertex][::-1]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every edge as ``(src, dst)``, grouped by source vertex."""
        for src in range(1, self.vertex_count + 1):
            for dst in reversed(self._adjacency[src]):
                yield src, dst