# magic_cube/solve/__init__.py
from __future__ import annotations

from magic_cube.solve.bfs_solver import SearchResult, graph_search, solve, tree_search
from magic_cube.solve.neighbors import one_turn_neighbors, one_turn_successors

__all__ = [
    "SearchResult",
    "graph_search",
    "solve",
    "tree_search",
    "one_turn_neighbors",
    "one_turn_successors",
]
