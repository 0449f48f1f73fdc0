"""Core size: the share of modules with high transitive fan-in AND fan-out.

Thresholds are the medians of the fan-in and fan-out distributions. Looking
for a discontinuity in the distribution would also work; the median is
simpler and robust to skew. With a median threshold roughly half of the
modules clear each bound on their own.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..exceptions import AnalysisError
from ..graph.adjacency import percentify

logger = logging.getLogger(__name__)


def median(values: Sequence[float]) -> float:
    """Middle value; mean of the two middle values for even lengths."""
    if len(values) == 0:
        return 0.0
    return float(np.median(np.asarray(values, dtype=float)))


def fan_in_out(visibility: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Per-module fan-in (column sums) and fan-out (row sums)."""
    visibility = np.asarray(visibility)
    return visibility.sum(axis=0), visibility.sum(axis=1)


def compute_core_size(
    visibility: Optional[np.ndarray], first_order_density: float
) -> float:
    """Percentage of modules in the architectural core.

    Args:
        visibility: Visibility matrix from compute_visibility()
        first_order_density: Direct-edge density; 0 means no edges at all

    Returns:
        Core size in [0, 100]

    Raises:
        AnalysisError: If the graph has edges but no visibility matrix
    """
    if first_order_density == 0:
        return 0.0

    if visibility is None:
        raise AnalysisError("core size needs a visibility matrix")

    fan_in, fan_out = fan_in_out(visibility)
    fan_in_bound = median(fan_in)
    fan_out_bound = median(fan_out)

    core = (fan_in >= fan_in_bound) & (fan_out >= fan_out_bound)
    core_count = int(core.sum())

    logger.debug(
        "Core size: %d of %d modules (fan-in median %.1f, fan-out median %.1f)",
        core_count,
        len(core),
        fan_in_bound,
        fan_out_bound,
    )
    return percentify(core_count, len(core))
