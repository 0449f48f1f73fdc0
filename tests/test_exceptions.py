"""Tests for the exception hierarchy."""

from project_metrics.exceptions import (
    AnalysisError,
    ConfigurationError,
    InvalidConfigError,
    InvalidEventError,
    InvalidReportError,
    MatrixShapeError,
    PluginError,
    PluginStateError,
    ProjectMetricsError,
)


class TestHierarchy:
    def test_everything_is_project_metrics_error(self):
        for exc in (
            InvalidConfigError("k", 1, "bad"),
            InvalidReportError("bad"),
            MatrixShapeError((2, 2), (2, 3)),
            InvalidEventError("on_configure", "bad"),
            PluginStateError("on_project_end"),
        ):
            assert isinstance(exc, ProjectMetricsError)

    def test_families(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(InvalidReportError, AnalysisError)
        assert issubclass(MatrixShapeError, AnalysisError)
        assert issubclass(PluginStateError, PluginError)


class TestMessages:
    def test_plain_message(self):
        assert str(ProjectMetricsError("boom")) == "boom"

    def test_details_appended(self):
        exc = InvalidReportError("report is missing 'dependencies'", "/p/a.js")
        assert str(exc) == (
            "Invalid module report: report is missing 'dependencies' "
            "(reason=report is missing 'dependencies', report=/p/a.js)"
        )

    def test_shape_error(self):
        exc = MatrixShapeError((2, 2), (2, 3))
        assert exc.expected == (2, 2)
        assert "(2, 3)" in str(exc)
