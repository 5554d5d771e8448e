"""Command line: count the k-cliques of an edge-list graph."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from cliquecount.cliques import count_cliques, format_counts, read_graph


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliquecount",
        description="Count cliques of every size up to k in an undirected graph.",
    )
    parser.add_argument("graph", help="edge-list file: 'n m' then m zero-based pairs")
    parser.add_argument("k", type=int, help="largest clique size to count")
    parser.add_argument(
        "--workers", type=int, default=1, help="number of worker processes"
    )
    parser.add_argument(
        "--task-level",
        type=int,
        default=1,
        help="clique prefix length at which work is split into tasks",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the counter; report timings on stderr and counts on stdout."""
    args = _parser().parse_args(argv)
    try:
        started = time.perf_counter()
        graph = read_graph(args.graph)
        print(
            f"Running time of reading graph: {time.perf_counter() - started:.3f}s",
            file=sys.stderr,
        )
        started = time.perf_counter()
        counts = count_cliques(graph, args.k, args.workers, args.task_level)
        elapsed = time.perf_counter() - started
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(
        f"max degree = {graph.max_out_degree}\ndegeneracy = {len(counts) - 2}",
        file=sys.stderr,
    )
    print(f"Running time of counting cliques: {elapsed:.3f}s", file=sys.stderr)
    sys.stdout.write("Result:\n" + format_counts(counts))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())