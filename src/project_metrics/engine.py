"""Project metrics pipeline.

Runs the stages in order:
    1. Adjacency matrix + first-order density (always)
    2. Visibility matrix + change cost (unless no_core_size)
    3. Core size (unless no_core_size)
    4. Averages of per-module metrics (always)

Example:
    >>> reports = [
    ...     ModuleReport("/proj/a.js", [Dependency("./b")]),
    ...     ModuleReport("/proj/b.js"),
    ... ]
    >>> metrics = ProjectMetricsEngine(MetricsConfig(path_style="posix")).compute(reports)
    >>> metrics.first_order_density
    25.0
"""

from typing import Optional, Sequence

from .config import DEFAULT_CONFIG, MetricsConfig
from .exceptions import InvalidReportError
from .graph.adjacency import build_adjacency_matrix
from .graph.closure import compute_visibility
from .logging_config import get_logger
from .metrics.averages import compute_averages
from .metrics.core_size import compute_core_size
from .models import ModuleReport, ProjectMetrics, ProjectResult

logger = get_logger(__name__)


class ProjectMetricsEngine:
    """Computes project-level coupling and complexity metrics."""

    def __init__(self, config: Optional[MetricsConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def compute(self, reports: Sequence[ModuleReport]) -> ProjectMetrics:
        """Compute every project metric for ``reports``.

        The input sequence is not modified. The returned ``reports`` tuple
        is in canonical order and matrix indices follow it.

        Raises:
            InvalidReportError: If two reports share a path
        """
        _check_unique_paths(reports)
        flavor = self.config.path_module

        adjacency = build_adjacency_matrix(reports, flavor)

        visibility_matrix = None
        change_cost = None
        core_size = None
        if not self.config.no_core_size:
            visibility = compute_visibility(adjacency.matrix)
            visibility_matrix = visibility.matrix
            change_cost = visibility.change_cost
            core_size = compute_core_size(visibility_matrix, adjacency.first_order_density)
        else:
            logger.debug("Skipping visibility matrix and core size (no_core_size)")

        averages = compute_averages(adjacency.reports)

        logger.info(
            "Computed project metrics for %d modules (density %.2f%%)",
            len(adjacency.reports),
            adjacency.first_order_density,
        )

        return ProjectMetrics(
            reports=tuple(adjacency.reports),
            adjacency_matrix=adjacency.matrix,
            first_order_density=adjacency.first_order_density,
            averages=averages,
            visibility_matrix=visibility_matrix,
            change_cost=change_cost,
            core_size=core_size,
        )

    def run(self, result: ProjectResult) -> ProjectResult:
        """Compute metrics for ``result.reports`` and write them back onto ``result``.

        ``result.reports`` is replaced by a new list in canonical order; the
        list object the caller passed in keeps its original order.
        """
        return result.apply(self.compute(result.reports))


def _check_unique_paths(reports: Sequence[ModuleReport]) -> None:
    seen: set[str] = set()
    for report in reports:
        if report.path in seen:
            raise InvalidReportError("duplicate module path", report.path)
        seen.add(report.path)
