"""Exception hierarchy for project-metrics."""

from .analysis import AnalysisError, InvalidReportError, MatrixShapeError
from .base import ProjectMetricsError
from .config import ConfigurationError, InvalidConfigError
from .plugin import InvalidEventError, PluginError, PluginStateError

__all__ = [
    "ProjectMetricsError",
    "AnalysisError",
    "InvalidReportError",
    "MatrixShapeError",
    "ConfigurationError",
    "InvalidConfigError",
    "PluginError",
    "InvalidEventError",
    "PluginStateError",
]
