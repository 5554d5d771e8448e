"""Count k-cliques with a degeneracy orientation and the pivoting method."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from math import comb
from pathlib import Path

from cliquecount.graph import Graph
from cliquecount.preprocess import parse_edge_list

Adjacency = tuple[frozenset[int], ...]
Task = tuple[int, Adjacency]


class VertexSet:
    """Set over ``1 .. size`` with O(1) insert and delete by position swapping.

    It starts full. Deleted vertices are kept behind the active part, so a
    deleted vertex can be inserted again.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"set size must be non-negative, got {size}")
        self._items = list(range(1, size + 1))
        self._position = {vertex: index for index, vertex in enumerate(self._items)}
        self._active = size

    def __len__(self) -> int:
        return self._active

    def __iter__(self) -> Iterator[int]:
        return iter(self._items[: self._active])

    def __contains__(self, vertex: object) -> bool:
        position = self._position.get(vertex)  # type: ignore[arg-type]
        return position is not None and position < self._active

    def _swap(self, first: int, second: int) -> None:
        items = self._items
        items[first], items[second] = items[second], items[first]
        self._position[items[first]] = first
        self._position[items[second]] = second

    def _lookup(self, vertex: int) -> int:
        try:
            return self._position[vertex]
        except KeyError:
            raise ValueError(f"vertex {vertex} is outside this set's range") from None

    def insert(self, vertex: int) -> None:
        """Make ``vertex`` active; it goes to the end of the active part."""
        position = self._lookup(vertex)
        if position < self._active:
            return
        self._swap(position, self._active)
        self._active += 1

    def delete(self, vertex: int) -> None:
        """Make ``vertex`` inactive; the last active vertex takes its place."""
        position = self._lookup(vertex)
        if position >= self._active:
            return
        self._active -= 1
        self._swap(position, self._active)


def parse_graph(text: str) -> Graph:
    """Build an undirected graph from ``"n m"`` and ``m`` zero-based vertex pairs."""
    vertex_count, pairs = parse_edge_list(text)
    graph = Graph(vertex_count)
    for u, v in pairs:
        graph.add_edge(u + 1, v + 1)
        graph.add_edge(v + 1, u + 1)
    return graph


def read_graph(path: str | Path) -> Graph:
    """Read an undirected graph from an edge-list file."""
    return parse_graph(Path(path).read_text())


def binomial_table(n: int) -> list[list[int]]:
    """Return Pascal's triangle ``table[i][j] = C(i, j)`` for ``0 <= i, j <= n``."""
    if n < 0:
        raise ValueError(f"table size must be non-negative, got {n}")
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for row in table:
        row[0] = 1
    for i in range(1, n + 1):
        for j in range(1, i + 1):
            table[i][j] = table[i - 1][j - 1] + table[i - 1][j]
    return table


def degree_orientation(graph: Graph) -> Graph:
    """Orient every edge from the lower-degree end (ties by vertex id)."""
    oriented = Graph(graph.vertex_count)
    degree = graph.in_degree
    for u in range(1, graph.vertex_count + 1):
        for v in graph.neighbors(u):
            if (degree[u], u) < (degree[v], v):
                oriented.add_edge(u, v)
    return oriented


def core_decomposition(graph: Graph) -> Graph:
    """Orient the graph along a degeneracy ordering, in linear time.

    The result is acyclic and its largest out-degree is the degeneracy.
    """
    n = graph.vertex_count
    degree = list(graph.in_degree)
    bins = [0] * (graph.max_in_degree + 2)
    for v in range(1, n + 1):
        bins[degree[v] + 1] += 1
    for d in range(1, graph.max_in_degree + 1):
        bins[d] += bins[d - 1]

    rank = [0] * (n + 1)
    order = [0] * (n + 1)
    for v in range(1, n + 1):
        bins[degree[v]] += 1
        rank[v] = bins[degree[v]]
        order[rank[v]] = v

    for position in range(1, n + 1):
        u = order[position]
        for v in graph.neighbors(u):
            if degree[v] <= degree[u]:
                continue
            degree[v] -= 1
            bins[degree[v]] += 1
            w = order[bins[degree[v]]]
            rank[w] = rank[v]
            rank[v] = bins[degree[v]]
            order[rank[v]] = v
            order[rank[w]] = w

    oriented = Graph(n)
    for u in range(1, n + 1):
        for v in graph.neighbors(u):
            if rank[u] < rank[v]:
                oriented.add_edge(u, v)
    return oriented


def local_subgraph(oriented: Graph, vertex: int) -> list[list[int]]:
    """Return the out-neighbourhood of ``vertex`` as a directed graph.

    Out-neighbours get local ids ``0, 1, ...`` in the order the graph reports
    them; entry ``i`` lists the local out-neighbours of local vertex ``i``.
    """
    members = oriented.neighbors(vertex)
    local_id = {v: index for index, v in enumerate(members)}
    return [
        [local_id[w] for w in oriented.neighbors(v) if w in local_id]
        for v in members
    ]


def pivot_count(
    adjacency: Sequence[Iterable[int]],
    k: int,
    clique_size: int,
    counts: MutableSequence[int],
) -> MutableSequence[int]:
    """Add the cliques of an undirected graph to ``counts``.

    Every clique of the graph is counted at index ``clique_size`` plus its
    size, as if ``clique_size`` vertices adjacent to all of it were already
    chosen; sizes beyond ``k`` are not counted. Returns ``counts``.
    """
    neighbours = [frozenset(entry) for entry in adjacency]

    def search(candidates: frozenset[int], held: int, pivots: int) -> None:
        if not candidates or held >= k:
            for extra in range(min(pivots, k - held) + 1):
                counts[held + extra] += comb(pivots, extra)
            return
        pivot = max(sorted(candidates), key=lambda v: len(neighbours[v] & candidates))
        remaining = set(candidates)
        for u in sorted(candidates - neighbours[pivot]):
            is_pivot = u == pivot
            search(
                neighbours[u] & remaining,
                held + (not is_pivot),
                pivots + is_pivot,
            )
            remaining.discard(u)

    search(frozenset(range(len(neighbours))), clique_size, 0)
    return counts


def _induced(adjacency: Sequence[Sequence[int]], vertices: Sequence[int]) -> Adjacency:
    local_id = {v: index for index, v in enumerate(vertices)}
    linked: list[set[int]] = [set() for _ in vertices]
    for v in vertices:
        for w in adjacency[v]:
            if w in local_id:
                linked[local_id[v]].add(local_id[w])
                linked[local_id[w]].add(local_id[v])
    return tuple(frozenset(entry) for entry in linked)


def generate_tasks(adjacency: Sequence[Sequence[int]], level: int) -> Iterator[Task]:
    """Split the cliques of an acyclic directed graph into independent tasks.

    Yields ``(depth, undirected_adjacency)`` pairs. Each chain of ``level``
    vertices along the orientation yields the subgraph of their common
    out-neighbours; each shorter chain yields an empty subgraph standing for
    the chain itself. Counting every task with :func:`pivot_count` at
    ``clique_size = held + depth`` counts every clique exactly once.
    """
    if level < 0:
        raise ValueError(f"task level must be non-negative, got {level}")
    out = [frozenset(entry) for entry in adjacency]

    def expand(active: frozenset[int], depth: int) -> Iterator[Task]:
        if depth == level:
            yield depth, _induced(adjacency, sorted(active))
            return
        yield depth, ()
        for u in sorted(active):
            yield from expand(out[u] & active, depth + 1)

    yield from expand(frozenset(range(len(adjacency))), 0)


def _solve_task(task: Task, k: int, size: int) -> list[int]:
    depth, adjacency = task
    counts = [0] * size
    pivot_count(adjacency, k, 1 + depth, counts)
    return counts


def count_cliques(
    graph: Graph, k: int, workers: int = 1, task_level: int = 1
) -> list[int]:
    """Count the cliques of an undirected graph with up to ``k`` vertices.

    Returns a list whose entry ``i`` is the number of ``i``-cliques; it runs
    up to the degeneracy plus one. With more than one worker the tasks,
    split ``task_level`` vertices deep, are counted in separate processes.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if task_level < 1:
        raise ValueError(f"task level must be at least 1, got {task_level}")

    oriented = core_decomposition(graph)
    size = oriented.max_out_degree + 2
    tasks = (
        task
        for vertex in range(1, oriented.vertex_count + 1)
        for task in generate_tasks(local_subgraph(oriented, vertex), task_level - 1)
    )
    solve = partial(_solve_task, k=k, size=size)
    totals = [0] * size

    def accumulate(results: Iterable[list[int]]) -> None:
        for result in results:
            for index, value in enumerate(result):
                totals[index] += value

    if workers == 1:
        accumulate(map(solve, tasks))
    else:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            accumulate(pool.map(solve, tasks, chunksize=64))
    return totals


def format_counts(counts: Sequence[int]) -> str:
    """Render one ``C(i) = n`` line for every non-zero count from size 1 up."""
    return "".join(
        f"C({size}) = {value}\n"
        for size, value in enumerate(counts)
        if size >= 1 and value > 0
    )