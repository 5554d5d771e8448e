from graphlib import CycleError, TopologicalSorter
from itertools import combinations
from math import comb

import pytest

from cliquecount.cliques import (
    VertexSet,
    binomial_table,
    core_decomposition,
    count_cliques,
    degree_orientation,
    format_counts,
    generate_tasks,
    local_subgraph,
    parse_graph,
    pivot_count,
    read_graph,
)
from cliquecount.graph import Graph


def _text(n, edges):
    lines = [f"{n} {len(edges)}"] + [f"{u} {v}" for u, v in edges]
    return "\n".join(lines) + "\n"


def _complete(n):
    return parse_graph(_text(n, list(combinations(range(n), 2))))


def _mixed_edges():
    return [
        (i, j)
        for i, j in combinations(range(9), 2)
        if (i * j + i + j) % 3 != 0
    ]


def _is_acyclic(graph):
    sorter = TopologicalSorter(
        {v: graph.neighbors(v) for v in range(1, graph.vertex_count + 1)}
    )
    try:
        sorter.prepare()
    except CycleError:
        return False
    return True


def _undirected_pairs(graph):
    return {tuple(sorted(edge)) for edge in graph.edges()}


def test_vertex_set_starts_full():
    s = VertexSet(4)
    assert len(s) == 4
    assert sorted(s) == [1, 2, 3, 4]


def test_vertex_set_delete_and_insert():
    s = VertexSet(5)
    s.delete(2)
    s.delete(2)
    assert len(s) == 4
    assert 2 not in s
    assert sorted(s) == [1, 3, 4, 5]
    s.insert(2)
    s.insert(2)
    assert 2 in s
    assert sorted(s) == [1, 2, 3, 4, 5]


def test_vertex_set_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        VertexSet(3).delete(7)


def test_binomial_table_matches_comb():
    table = binomial_table(6)
    for i in range(7):
        for j in range(i + 1):
            assert table[i][j] == comb(i, j)
        assert all(value == 0 for value in table[i][i + 1 :])


def test_parse_graph_shifts_and_mirrors_edges():
    graph = parse_graph("3 2\n0 1\n1 2\n")
    assert graph.vertex_count == 3
    assert graph.edge_count == 4
    assert graph.neighbors(1) == [2]
    assert sorted(graph.neighbors(2)) == [1, 3]


def test_parse_graph_rejects_vertex_out_of_range():
    with pytest.raises(ValueError):
        parse_graph("2 1\n0 2\n")


def test_read_graph_from_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text(_text(4, list(combinations(range(4), 2))))
    graph = read_graph(path)
    assert graph.edge_count == 12
    assert graph.max_out_degree == 3


@pytest.mark.parametrize("orient", [degree_orientation, core_decomposition])
def test_orientations_keep_each_edge_once(orient):
    graph = parse_graph(_text(9, _mixed_edges()))
    oriented = orient(graph)
    assert oriented.edge_count * 2 == graph.edge_count
    assert _undirected_pairs(oriented) == set(_mixed_edges_shifted())
    assert _is_acyclic(oriented)


def _mixed_edges_shifted():
    return [(u + 1, v + 1) for u, v in _mixed_edges()]


def test_core_decomposition_degeneracy_of_complete_graph():
    assert core_decomposition(_complete(5)).max_out_degree == 4


def test_core_decomposition_degeneracy_of_cycle():
    cycle = parse_graph(_text(6, [(i, (i + 1) % 6) for i in range(6)]))
    assert core_decomposition(cycle).max_out_degree == 2


def test_local_subgraph_of_complete_graph_is_transitive():
    oriented = core_decomposition(_complete(4))
    source = max(range(1, 5), key=lambda v: len(oriented.neighbors(v)))
    local = local_subgraph(oriented, source)
    assert len(local) == 3
    assert sorted(len(entry) for entry in local) == [0, 1, 2]
    assert sum(len(entry) for entry in local) == comb(3, 2)


def test_pivot_count_triangle():
    counts = pivot_count([{1, 2}, {0, 2}, {0, 1}], 3, 0, [0] * 4)
    assert counts == [comb(3, i) for i in range(4)]


def test_pivot_count_respects_k():
    counts = pivot_count([{1, 2}, {0, 2}, {0, 1}], 2, 0, [0] * 4)
    assert counts == [comb(3, 0), comb(3, 1), comb(3, 2), 0]


def test_generate_tasks_level_zero_is_one_task():
    local = [[1, 2], [2], []]
    tasks = list(generate_tasks(local, 0))
    assert len(tasks) == 1
    depth, adjacency = tasks[0]
    assert depth == 0
    assert [sorted(entry) for entry in adjacency] == [[1, 2], [0, 2], [0, 1]]


@pytest.mark.parametrize("level", [1, 2, 3, 4])
def test_generate_tasks_split_preserves_counts(level):
    oriented = core_decomposition(_complete(6))
    source = max(range(1, 7), key=lambda v: len(oriented.neighbors(v)))
    local = local_subgraph(oriented, source)
    whole = [0] * 7
    for depth, adjacency in generate_tasks(local, 0):
        pivot_count(adjacency, 6, 1 + depth, whole)
    split = [0] * 7
    for depth, adjacency in generate_tasks(local, level):
        pivot_count(adjacency, 6, 1 + depth, split)
    assert split == whole
    assert whole == [0] + [comb(5, i - 1) for i in range(1, 7)]


def test_generate_tasks_rejects_negative_level():
    with pytest.raises(ValueError):
        list(generate_tasks([[]], -1))


def test_count_cliques_complete_graph():
    counts = count_cliques(_complete(5), 5)
    assert counts == [0] + [comb(5, i) for i in range(1, 6)]


def test_count_cliques_truncated_at_k():
    counts = count_cliques(_complete(5), 3)
    assert counts[1:4] == [comb(5, 1), comb(5, 2), comb(5, 3)]
    assert counts[4:] == [0, 0]


def test_count_cliques_triangles_outside_pivot_neighbourhood():
    edges = [(0, 1), (0, 2), (0, 3), (0, 4), (0, 5), (1, 2), (3, 4), (3, 5)]
    counts = count_cliques(parse_graph(_text(6, edges)), 4)
    assert counts[:4] == [0, 6, 8, 3]
    assert all(value == 0 for value in counts[4:])


@pytest.mark.parametrize("task_level", [2, 3, 4])
def test_count_cliques_task_level_does_not_change_result(task_level):
    graph = parse_graph(_text(9, _mixed_edges()))
    expected = count_cliques(graph, 9)
    assert count_cliques(graph, 9, 1, task_level) == expected
    assert expected[1] == 9
    assert expected[2] == len(_mixed_edges())


def test_count_cliques_with_worker_processes():
    graph = parse_graph(_text(9, _mixed_edges()))
    assert count_cliques(graph, 9, 2, 2) == count_cliques(graph, 9)


def test_count_cliques_isolated_vertices():
    counts = count_cliques(Graph(3), 4)
    assert counts[1] == 3
    assert sum(counts) == 3


@pytest.mark.parametrize(
    "k, workers, task_level", [(0, 1, 1), (3, 0, 1), (3, 1, 0)]
)
def test_count_cliques_rejects_bad_arguments(k, workers, task_level):
    with pytest.raises(ValueError):
        count_cliques(_complete(3), k, workers, task_level)


def test_format_counts_skips_zero_and_index_zero():
    assert format_counts([7, 5, 10, 0, 1]) == "C(1) = 5\nC(2) = 10\nC(4) = 1\n"


def test_format_counts_empty():
    assert format_counts([0, 0]) == ""