"""Tests for canonical ordering and adjacency matrix construction."""

import numpy as np
import pytest

from project_metrics.graph.adjacency import (
    build_adjacency_matrix,
    order_reports,
    path_sort_key,
    percentify,
)
from project_metrics.models import ModuleReport


class TestOrdering:
    """Test the canonical module order."""

    def test_fewer_segments_first_then_lexicographic(self, flavor):
        reports = [ModuleReport(path=p) for p in ("/p/b.js", "/p/a/a.js", "/p/a.js")]
        ordered = order_reports(reports, flavor)
        assert [r.path for r in ordered] == ["/p/a.js", "/p/b.js", "/p/a/a.js"]

    def test_input_not_mutated(self, flavor):
        reports = [ModuleReport(path=p) for p in ("/p/b.js", "/p/a.js")]
        order_reports(reports, flavor)
        assert [r.path for r in reports] == ["/p/b.js", "/p/a.js"]

    def test_sort_key(self, flavor):
        assert path_sort_key("/p/a/a.js", flavor) == (4, "/p/a/a.js")

    def test_depth_beats_lexicographic(self, flavor):
        # "/z.js" > "/a/b.js" as strings, but it is shallower
        reports = [ModuleReport(path="/a/b.js"), ModuleReport(path="/z.js")]
        assert [r.path for r in order_reports(reports, flavor)] == ["/z.js", "/a/b.js"]


class TestBuildAdjacencyMatrix:
    """Test the 0/1 direct-dependency matrix."""

    def test_chain(self, chain_reports, flavor):
        result = build_adjacency_matrix(chain_reports, flavor)
        assert [r.path for r in result.reports] == ["/proj/a.js", "/proj/b.js", "/proj/c.js"]
        assert result.matrix.tolist() == [
            [0, 1, 0],
            [0, 0, 1],
            [0, 0, 0],
        ]
        assert result.first_order_density == pytest.approx(2 / 9 * 100)

    def test_no_self_loops(self, make_report, flavor):
        reports = [make_report("/proj/x.js", "./x"), make_report("/proj/y.js", "./x")]
        result = build_adjacency_matrix(reports, flavor)
        assert np.all(np.diag(result.matrix) == 0)
        assert result.matrix[1, 0] == 1

    def test_empty(self, flavor):
        result = build_adjacency_matrix([], flavor)
        assert result.matrix.shape == (0, 0)
        assert result.first_order_density == 0.0
        assert result.reports == []

    def test_no_edges(self, make_report, flavor):
        reports = [make_report("/proj/a.js", "lodash"), make_report("/proj/b.js")]
        result = build_adjacency_matrix(reports, flavor)
        assert result.matrix.sum() == 0
        assert result.first_order_density == 0.0

    def test_density_bounds(self, star_reports, flavor):
        result = build_adjacency_matrix(star_reports, flavor)
        assert 0.0 <= result.first_order_density <= 100.0
        assert result.first_order_density == pytest.approx(4 / 25 * 100)


class TestPercentify:
    def test_zero_limit(self):
        assert percentify(3, 0) == 0.0

    def test_ratio(self):
        assert percentify(1, 4) == 25.0
