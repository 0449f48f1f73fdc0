"""Tests for median thresholds and core size classification."""

import numpy as np
import pytest

from project_metrics.exceptions import AnalysisError
from project_metrics.metrics.core_size import compute_core_size, fan_in_out, median


class TestMedian:
    def test_odd_length(self):
        assert median([5, 1, 3]) == 3

    def test_even_length_averages_middle(self):
        assert median([4, 1, 3, 2]) == 2.5

    def test_single(self):
        assert median([7]) == 7

    def test_empty(self):
        assert median([]) == 0.0


class TestFanInOut:
    def test_chain(self):
        vis = np.array([[0, 1, 1], [0, 0, 1], [0, 0, 0]])
        fan_in, fan_out = fan_in_out(vis)
        # fan-in counts modules that reach i, fan-out the ones i reaches
        assert fan_in.tolist() == [0, 1, 2]
        assert fan_out.tolist() == [2, 1, 0]


class TestComputeCoreSize:
    """Test core size classification."""

    def test_zero_density_short_circuits(self):
        assert compute_core_size(None, 0.0) == 0.0

    def test_zero_density_ignores_matrix(self):
        vis = np.ones((3, 3), dtype=int)
        assert compute_core_size(vis, 0) == 0.0

    def test_missing_visibility_raises(self):
        with pytest.raises(AnalysisError):
            compute_core_size(None, 10.0)

    def test_chain_core_is_middle_module(self):
        vis = np.array([[0, 1, 1], [0, 0, 1], [0, 0, 0]])
        # medians: fan-in 1, fan-out 1 -> only b qualifies
        assert compute_core_size(vis, 22.2) == pytest.approx(100 / 3)

    def test_star_median_quirk(self):
        """A zero fan-out median lets every leaf with fan-in 1 into the core."""
        vis = np.zeros((5, 5), dtype=int)
        vis[0, 1:] = 1
        assert compute_core_size(vis, 16.0) == pytest.approx(80.0)

    def test_fully_connected_all_core(self):
        vis = np.ones((4, 4), dtype=int)
        np.fill_diagonal(vis, 0)
        assert compute_core_size(vis, 75.0) == 100.0

    def test_bounds(self):
        rng = np.random.default_rng(11)
        vis = (rng.random((9, 9)) < 0.3).astype(int)
        np.fill_diagonal(vis, 0)
        assert 0.0 <= compute_core_size(vis, 30.0) <= 100.0
