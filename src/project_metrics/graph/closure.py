"""Transitive closure: visibility matrix and change cost.

Floyd-Warshall over the adjacency matrix gives all-pairs reachability in
O(N^3), against O(N^4) for raising the matrix to successive powers.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ..exceptions import MatrixShapeError
from .adjacency import matrix_density

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisibilityResult:
    """Transitive reachability between modules.

    matrix[i][j] == 1 means module j is reachable from module i through
    any path. The diagonal is always 0.
    """

    matrix: np.ndarray
    change_cost: float


def _as_square(matrix) -> np.ndarray:
    matrix = np.asarray(matrix)
    if matrix.size == 0:
        return matrix.reshape(0, 0)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        n = matrix.shape[0] if matrix.ndim else 0
        raise MatrixShapeError(expected=(n, n), actual=matrix.shape)
    return matrix


def adjacency_to_distance(adjacency: np.ndarray) -> np.ndarray:
    """Convert a 0/1 adjacency matrix to a distance matrix.

    Every module reaches itself at distance 1. Direct edges cost 1, missing
    edges are +inf.
    """
    adjacency = _as_square(adjacency)

    distance = np.where(adjacency != 0, 1.0, np.inf)
    np.fill_diagonal(distance, 1.0)
    return distance


def shortest_paths(distance: np.ndarray) -> np.ndarray:
    """All-pairs shortest paths (Floyd-Warshall). Returns a new matrix.

    The loop over the intermediate node k must run in order. For a fixed k
    all (i, j) cells are relaxed together; row k and column k can't improve
    during step k since d[k][k] >= 0, so this matches the scalar triple loop.
    """
    dist = np.array(_as_square(distance), dtype=float, copy=True)

    for k in range(dist.shape[0]):
        np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :], out=dist)

    return dist


def compute_visibility(adjacency: np.ndarray) -> VisibilityResult:
    """Compute the visibility matrix and change cost from an adjacency matrix.

    Change cost counts every reachable pair, self-pairs included, so an
    isolated module still contributes 1/N^2. The visibility matrix itself
    has a zero diagonal.
    """
    dist = shortest_paths(adjacency_to_distance(adjacency))

    reachable = np.isfinite(dist)
    visibility = reachable.astype(np.int64)
    np.fill_diagonal(visibility, 0)

    change_cost = matrix_density(int(reachable.sum()), visibility)
    logger.debug("Visibility matrix: %d modules, change cost %.2f%%", len(visibility), change_cost)

    return VisibilityResult(matrix=visibility, change_cost=change_cost)
