"""Project metrics derived from the dependency graph and module reports."""

from .averages import AVERAGED_METRICS, compute_averages
from .core_size import compute_core_size, fan_in_out, median

__all__ = [
    "AVERAGED_METRICS",
    "compute_averages",
    "compute_core_size",
    "fan_in_out",
    "median",
]
