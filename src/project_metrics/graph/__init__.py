"""Dependency graph: edge resolution, adjacency matrix, transitive closure."""

from .adjacency import AdjacencyResult, build_adjacency_matrix, order_reports, path_sort_key
from .closure import VisibilityResult, compute_visibility, shortest_paths
from .resolver import has_edge, is_internal_require, resolves_to

__all__ = [
    "AdjacencyResult",
    "VisibilityResult",
    "build_adjacency_matrix",
    "compute_visibility",
    "has_edge",
    "is_internal_require",
    "order_reports",
    "path_sort_key",
    "resolves_to",
    "shortest_paths",
]
