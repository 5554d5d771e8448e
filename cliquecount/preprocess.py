"""Normalise an edge-list file: orient pairs low-to-high, sort and drop duplicates."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path


def normalize_edges(edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the edges with each pair ordered ``(low, high)``, sorted and unique."""
    return sorted({(min(u, v), max(u, v)) for u, v in edges})


def parse_edge_list(text: str) -> tuple[int, list[tuple[int, int]]]:
    """Parse ``"n m"`` followed by ``m`` vertex pairs.

    Returns the declared vertex count and the list of pairs. Tokens after the
    ``m`` declared pairs are ignored.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("edge list header needs a vertex count and an edge count")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"edge list holds a non-integer token: {exc}") from exc
    vertex_count, edge_count = numbers[0], numbers[1]
    if edge_count < 0:
        raise ValueError(f"edge count must be non-negative, got {edge_count}")
    body = numbers[2 : 2 + 2 * edge_count]
    if len(body) < 2 * edge_count:
        raise ValueError(
            f"edge list declares {edge_count} edges but holds only {len(body) // 2}"
        )
    pairs = list(zip(body[0::2], body[1::2]))
    return vertex_count, pairs


def format_edge_list(vertex_count: int, edges: Iterable[tuple[int, int]]) -> str:
    """Render a header line and one tab-separated line per edge."""
    edge_list = list(edges)
    lines = [f"{vertex_count}\t{len(edge_list)}"]
    lines.extend(f"{u}\t{v}" for u, v in edge_list)
    return "\n".join(lines) + "\n"


def normalize_file(source: str | Path, target: str | Path) -> tuple[int, list[tuple[int, int]]]:
    """Normalise the edge list in ``source`` and write it to ``target``.

    The header written holds one more than the largest vertex id, so that
    zero-based ids fit. Returns that vertex count and the written edges.
    """
    _, pairs = parse_edge_list(Path(source).read_text())
    edges = normalize_edges(pairs)
    highest = max((max(u, v) for u, v in edges), default=0)
    vertex_count = highest + 1
    Path(target).write_text(format_edge_list(vertex_count, edges))
    return vertex_count, edges


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``preprocess SOURCE TARGET``."""
    parser = argparse.ArgumentParser(
        description="Sort, orient and de-duplicate an edge-list file."
    )
    parser.add_argument("source", help="input edge list")
    parser.add_argument("target", help="output edge list")
    args = parser.parse_args(argv)
    normalize_file(args.source, args.target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())