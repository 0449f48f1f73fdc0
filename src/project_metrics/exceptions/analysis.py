"""Analysis exceptions: malformed reports and matrices handed to the engine."""

from typing import Optional, Tuple

from .base import ProjectMetricsError


class AnalysisError(ProjectMetricsError):
    """Base class for analysis-related errors."""
    pass


class InvalidReportError(AnalysisError):
    """Raised when a module report breaks its input contract."""

    def __init__(self, reason: str, report_path: Optional[str] = None):
        details = {"reason": reason}
        if report_path is not None:
            details["report"] = report_path

        super().__init__(f"Invalid module report: {reason}", details=details)
        self.reason = reason
        self.report_path = report_path


class MatrixShapeError(AnalysisError):
    """Raised when a matrix is not square or does not match the module count."""

    def __init__(self, expected: Tuple[int, int], actual: Tuple[int, ...]):
        super().__init__(
            f"Matrix has shape {actual}, expected {expected}",
            details={"expected": str(expected), "actual": str(actual)},
        )
        self.expected = expected
        self.actual = actual
