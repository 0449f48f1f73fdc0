"""Project-wide means of per-module metrics."""

from operator import attrgetter
from typing import Callable, Sequence

from ..models import ModuleReport

# (result field, accessor) for every averaged metric
AVERAGED_METRICS: tuple[tuple[str, Callable[[ModuleReport], float]], ...] = (
    ("loc", attrgetter("loc")),
    ("cyclomatic", attrgetter("cyclomatic")),
    ("effort", attrgetter("effort")),
    ("params", attrgetter("params")),
    ("maintainability", attrgetter("maintainability")),
)


def compute_averages(reports: Sequence[ModuleReport]) -> dict[str, float]:
    """Unweighted mean of each averaged metric; all 0.0 for no reports."""
    divisor = len(reports) or 1
    return {
        name: sum(accessor(report) for report in reports) / divisor
        for name, accessor in AVERAGED_METRICS
    }
