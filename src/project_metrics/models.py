"""Data models for project-level dependency metrics.

Three layers of data:
  Inputs:  ModuleReport + Dependency, produced by a per-module analyzer
  Outputs: ProjectMetrics, the pure value the engine computes
  Host:    ProjectResult, the mutable document a plugin host passes around

The JSON shape follows escomplex result documents, so reports written by
other tooling can be read directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import numpy as np

from .exceptions import InvalidReportError

# Numeric per-module fields that are averaged across the project
METRIC_FIELDS: tuple[str, ...] = ("loc", "cyclomatic", "effort", "params", "maintainability")


class ModuleSystem(Enum):
    """How a dependency is loaded."""

    REQUIRE_TIME = "cjs"  # CommonJS require(), resolved at call time
    STATIC_IMPORT = "esm"  # ES module import and everything else

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "ModuleSystem":
        """Map a wire tag to a module system. Anything but "cjs" is static."""
        if tag == cls.REQUIRE_TIME.value:
            return cls.REQUIRE_TIME
        return cls.STATIC_IMPORT


@dataclass(frozen=True)
class Dependency:
    """A module's declared reference to another module."""

    path: str  # specifier as written in source
    module_system: ModuleSystem = ModuleSystem.STATIC_IMPORT
    line: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], report_path: Optional[str] = None) -> "Dependency":
        if not isinstance(data, dict):
            raise InvalidReportError("dependency must be an object", report_path)
        specifier = data.get("path")
        if not isinstance(specifier, str):
            raise InvalidReportError("dependency is missing 'path'", report_path)
        return cls(
            path=specifier,
            module_system=ModuleSystem.from_tag(data.get("type")),
            line=data.get("line"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"path": self.path, "type": self.module_system.value}
        if self.line is not None:
            data["line"] = self.line
        return data


@dataclass
class ModuleReport:
    """One analyzed source module."""

    path: str  # absolute, normalized
    dependencies: list[Dependency] = field(default_factory=list)

    loc: float = 0.0
    cyclomatic: float = 0.0
    effort: float = 0.0
    params: float = 0.0
    maintainability: float = 0.0

    # Keys this package doesn't interpret, kept for round trips
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModuleReport":
        """Parse an escomplex-style module report.

        A metric key that is absent reads as 0.0, since analyzers may skip
        metrics they do not compute. A metric that is present but not a
        number is rejected.

        Raises:
            InvalidReportError: If ``path`` or ``dependencies`` is missing,
                or a metric field is not a number.
        """
        if not isinstance(data, dict):
            raise InvalidReportError("report must be an object")

        path = data.get("path")
        if not isinstance(path, str):
            raise InvalidReportError("report is missing 'path'")

        raw_deps = data.get("dependencies")
        if not isinstance(raw_deps, list):
            raise InvalidReportError("report is missing 'dependencies'", path)

        metrics: dict[str, float] = {}
        for name in METRIC_FIELDS:
            value = data.get(name, 0)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidReportError(f"'{name}' must be a number", path)
            metrics[name] = float(value)

        known = {"path", "dependencies", *METRIC_FIELDS}
        return cls(
            path=path,
            dependencies=[Dependency.from_dict(d, path) for d in raw_deps],
            extra={k: v for k, v in data.items() if k not in known},
            **metrics,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data["path"] = self.path
        data["dependencies"] = [d.to_dict() for d in self.dependencies]
        for name in METRIC_FIELDS:
            data[name] = getattr(self, name)
        return data


@dataclass(frozen=True)
class ProjectMetrics:
    """Everything the engine derives from one set of reports.

    ``reports`` is in canonical order; matrix indices follow it. The
    closure fields are None when core size computation was skipped.
    """

    reports: tuple[ModuleReport, ...]
    adjacency_matrix: np.ndarray
    first_order_density: float
    averages: dict[str, float]
    visibility_matrix: Optional[np.ndarray] = None
    change_cost: Optional[float] = None
    core_size: Optional[float] = None

    @property
    def module_count(self) -> int:
        return len(self.reports)

    @property
    def paths(self) -> list[str]:
        return [r.path for r in self.reports]


# JSON key for each derived field on a project result document
_RESULT_KEYS: dict[str, str] = {
    "adjacency_matrix": "adjacencyMatrix",
    "first_order_density": "firstOrderDensity",
    "visibility_matrix": "visibilityMatrix",
    "change_cost": "changeCost",
    "core_size": "coreSize",
}


@dataclass
class ProjectResult:
    """Project-level result document populated in place by the engine."""

    reports: list[ModuleReport] = field(default_factory=list)

    adjacency_matrix: Optional[np.ndarray] = None
    first_order_density: Optional[float] = None
    visibility_matrix: Optional[np.ndarray] = None
    change_cost: Optional[float] = None
    core_size: Optional[float] = None

    # Project averages of METRIC_FIELDS
    loc: Optional[float] = None
    cyclomatic: Optional[float] = None
    effort: Optional[float] = None
    params: Optional[float] = None
    maintainability: Optional[float] = None

    extra: dict[str, Any] = field(default_factory=dict)

    def apply(self, metrics: ProjectMetrics) -> "ProjectResult":
        """Swap in the canonical report order and copy every derived field."""
        self.reports = list(metrics.reports)
        self.adjacency_matrix = metrics.adjacency_matrix
        self.first_order_density = metrics.first_order_density
        self.visibility_matrix = metrics.visibility_matrix
        self.change_cost = metrics.change_cost
        self.core_size = metrics.core_size
        for name, value in metrics.averages.items():
            setattr(self, name, value)
        return self

    @classmethod
    def from_dict(cls, data: Any) -> "ProjectResult":
        """Parse a result document, or a bare list of module reports."""
        if isinstance(data, list):
            return cls(reports=[ModuleReport.from_dict(r) for r in data])
        if not isinstance(data, dict) or not isinstance(data.get("reports"), list):
            raise InvalidReportError("result document must hold a 'reports' list")

        known = {"reports", *METRIC_FIELDS, *_RESULT_KEYS.values()}
        return cls(
            reports=[ModuleReport.from_dict(r) for r in data["reports"]],
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict. Unset derived fields are omitted."""
        data: dict[str, Any] = dict(self.extra)
        data["reports"] = [r.to_dict() for r in self.reports]

        for attr, key in _RESULT_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            data[key] = value.tolist() if isinstance(value, np.ndarray) else float(value)

        for name in METRIC_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = float(value)

        return data
