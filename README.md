# cliquecount

Counts the cliques of every size up to k in an undirected graph. The graph is
oriented along a degeneracy (core) ordering, and a pivoting search then counts
cliques of all sizes in one pass.

## Input format

The first line holds two integers: the number of vertices and the number of
edges. Each following pair of integers is one edge, given as two vertex ids
numbered from 0:

```
4 5
0 1
0 2
1 2
1 3
2 3
```

Every vertex in the header is counted as a 1-clique, including vertices
without edges.

## Cleaning an edge list

Raw edge lists often repeat edges or list both directions. Normalize one
before counting:

```
cliquecount-normalize raw.txt graph.txt
```

Each edge is written as `low<TAB>high`. Duplicates are removed and the edges
are sorted. The header is recomputed: its vertex count is the largest vertex
id plus one, and its edge count is the number of edges that remain.

## Counting cliques

```
cliquecount graph.txt 5
```

The second argument is the largest clique size to count. Options:

- `--workers N` – number of worker processes (default 1).
- `--task-level L` – the length of the clique prefix at which the search is
  split into independent tasks (default 1).

The counts go to standard output: a `Result:` line, then one `C(k) = count`
line for every size with a non-zero count. Reading and counting times, the
maximum degree and the degeneracy go to standard error. If the file cannot be
read or an argument is invalid, the command prints `error: ...` and exits
with status 1.

## Library use

```python
from cliquecount.cliques import read_graph, count_cliques, format_counts

graph = read_graph("graph.txt")
counts = count_cliques(graph, k=5, workers=1, task_level=1)
print(format_counts(counts), end="")
```

`count_cliques` returns a list whose entry `i` is the number of `i`-cliques.
It runs up to the degeneracy plus one; sizes above `k` stay zero.

Other pieces of `cliquecount.cliques`:

- `parse_graph(text)` – the same format as `read_graph`, from a string.
- `core_decomposition(graph)` and `degree_orientation(graph)` – return
  oriented copies of a graph.
- `local_subgraph(oriented, vertex)` – the out-neighbourhood of a vertex as a
  small directed graph.
- `generate_tasks(adjacency, level)` and `pivot_count(adjacency, k,
  clique_size, counts)` – the task splitting and the pivoting counter.
- `binomial_table(n)` – Pascal's triangle up to `n`.
- `VertexSet` – a set over `1..size` with constant-time insert and delete.

`cliquecount.graph.Graph` is the directed adjacency structure with in- and
out-degree bookkeeping. `cliquecount.preprocess` offers `parse_edge_list`,
`normalize_edges`, `format_edge_list` and `normalize_file` for the cleaning
step.

## Limits

Counting runs on a single machine. With more than one worker the tasks are
spread over local processes; there is no way to spread work across several
machines.