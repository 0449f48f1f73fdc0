"""
project-metrics - Project-Level Dependency and Complexity Metrics

Builds the module dependency matrix of a project from per-module reports and
derives first-order density, transitive visibility, change cost, core size
and project-wide complexity averages.
"""

__version__ = "0.1.0"

from .config import MetricsConfig, load_config
from .engine import ProjectMetricsEngine
from .models import Dependency, ModuleReport, ModuleSystem, ProjectMetrics, ProjectResult
from .plugin import PluginEvent, ProjectMetricsPlugin

__all__ = [
    "ProjectMetricsEngine",  # Main entry point
    "ProjectMetricsPlugin",  # Host lifecycle adapter
    "PluginEvent",
    "MetricsConfig",
    "load_config",
    "Dependency",
    "ModuleReport",
    "ModuleSystem",
    "ProjectMetrics",
    "ProjectResult",
]
