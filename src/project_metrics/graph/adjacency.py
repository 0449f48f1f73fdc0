"""Adjacency matrix construction over a canonically ordered module set."""

import logging
import os
from dataclasses import dataclass
from types import ModuleType
from typing import Sequence

import numpy as np

from ..models import ModuleReport
from .resolver import has_edge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdjacencyResult:
    """Ordered reports with their direct-dependency matrix.

    matrix[x][y] == 1 means reports[x] depends on reports[y].
    """

    reports: list[ModuleReport]
    matrix: np.ndarray
    first_order_density: float


def percentify(value: float, limit: float) -> float:
    """value / limit as a percentage, 0 when limit is 0."""
    return 0.0 if limit == 0 else (value / limit) * 100


def matrix_density(count: float, matrix: np.ndarray) -> float:
    """Percentage of the N x N cells of ``matrix`` that ``count`` represents."""
    n = matrix.shape[0]
    return percentify(count, n * n)


def path_sort_key(path: str, flavor: ModuleType = os.path) -> tuple[int, str]:
    """Shallower paths first, then plain string order."""
    return len(path.split(flavor.sep)), path


def order_reports(
    reports: Sequence[ModuleReport], flavor: ModuleType = os.path
) -> list[ModuleReport]:
    """Return the reports in canonical order. The input is left untouched.

    The order has nothing to do with dependency direction; it only makes
    matrix indices reproducible across runs.
    """
    return sorted(reports, key=lambda r: path_sort_key(r.path, flavor))


def build_adjacency_matrix(
    reports: Sequence[ModuleReport], flavor: ModuleType = os.path
) -> AdjacencyResult:
    """Order the reports and build their 0/1 adjacency matrix.

    Self-loops are never recorded, even when a module names itself.

    Args:
        reports: Module reports in any order
        flavor: Path module used for ordering and resolution

    Returns:
        AdjacencyResult with reports in canonical order
    """
    ordered = order_reports(reports, flavor)
    n = len(ordered)
    matrix = np.zeros((n, n), dtype=np.int64)

    for x, source in enumerate(ordered):
        for y, target in enumerate(ordered):
            if x != y and has_edge(source, target, flavor):
                matrix[x, y] = 1

    edges = int(matrix.sum())
    density = matrix_density(edges, matrix)
    logger.debug("Adjacency matrix: %d modules, %d edges, density %.2f%%", n, edges, density)

    return AdjacencyResult(reports=ordered, matrix=matrix, first_order_density=density)
