"""Count cliques of every size in undirected graphs, with edge-list cleaning."""

__version__ = "0.1.0"
__all__ = ["cli", "cliques", "graph", "preprocess"]