"""
Tests for ensemble statistics.
"""

import numpy as np
import pytest

from gbmvar.exceptions import ComputationError
from gbmvar.simulation.statistics import (
    aggregate,
    mean_path,
    nearest_rank,
    percentile_bands,
    terminal_statistics,
    value_at_risk,
)


class TestNearestRank:
    """Test suite for the nearest-rank percentile rule."""

    def test_index_is_floor_of_n_times_fraction(self):
        """Test the 0-based floor(n * fraction) index."""
        values = np.arange(100.0)

        assert nearest_rank(values, 0.05) == 5.0
        assert nearest_rank(values, 0.95) == 95.0
        assert nearest_rank(np.arange(20.0), 0.05) == 1.0
        assert nearest_rank(np.arange(20.0), 0.95) == 19.0

    def test_no_interpolation(self):
        """Test that results are always elements of the input."""
        values = np.array([1.0, 10.0, 100.0, 1000.0, 10000.0])

        assert nearest_rank(values, 0.5) == 100.0
        assert nearest_rank(values, 0.95) == 1000.0

    def test_rows_of_2d_input(self):
        """Test selection along axis 0."""
        ordered = np.arange(40.0).reshape(20, 2)

        np.testing.assert_array_equal(nearest_rank(ordered, 0.05), [2.0, 3.0])

    def test_row_is_a_copy(self):
        """Test that a selected row does not keep the sorted array alive."""
        ordered = np.arange(40.0).reshape(20, 2)

        row = nearest_rank(ordered, 0.95)

        assert row.base is None
        assert not np.shares_memory(row, ordered)

    def test_index_clamped_to_last_element(self):
        """Test that a fraction of 1 does not run past the end."""
        assert nearest_rank(np.arange(10.0), 1.0) == 9.0


class TestAggregation:
    """Test suite for the aggregation passes."""

    def test_hand_checked_statistics(self, hand_checked_paths):
        """Test every statistic on an ensemble with known final prices."""
        p5, p95 = percentile_bands(hand_checked_paths)

        np.testing.assert_array_equal(p5, [10.0, 2.0])
        np.testing.assert_array_equal(p95, [10.0, 20.0])
        np.testing.assert_allclose(mean_path(hand_checked_paths), [10.0, 10.5])
        assert terminal_statistics(hand_checked_paths) == (10.5, 1.0, 20.0)

    def test_value_at_risk(self, hand_checked_paths):
        """Test VaR amount and signed percentage."""
        amount, percent = value_at_risk(hand_checked_paths, 10.0)

        # Second-lowest return: (2 - 10) / 10
        assert amount == pytest.approx(8.0)
        assert percent == pytest.approx(-80.0)

    def test_value_at_risk_keeps_positive_sign(self):
        """Test a quantile that is a gain keeps its sign."""
        paths = np.column_stack([np.full(100, 10.0), np.linspace(11.0, 20.0, 100)])

        amount, percent = value_at_risk(paths, 10.0)

        assert percent > 0
        assert amount == pytest.approx(10.0 * percent / 100)

    def test_aggregate(self, sample_paths):
        """Test invariants of an aggregated simulation."""
        result = aggregate(sample_paths, 100.0)

        assert np.shares_memory(result.paths, sample_paths)
        assert len(result.mean_path) == len(result.p5_path) == len(result.p95_path) == 11
        assert result.mean_path[0] == pytest.approx(100.0)
        assert result.p5_path[0] == result.p95_path[0] == 100.0
        assert np.all(result.p5_path <= result.p95_path)
        assert result.terminal_min <= result.terminal_mean <= result.terminal_max
        assert result.var_95_amount >= 0
        assert result.var_95_amount == pytest.approx(abs(result.var_95_percent))

    def test_aggregate_does_not_modify_paths(self, sample_paths):
        """Test that the ensemble is only read."""
        before = sample_paths.copy()

        aggregate(sample_paths, 100.0)

        np.testing.assert_array_equal(sample_paths, before)

    @pytest.mark.parametrize("paths", [
        np.empty((0, 5)),
        np.empty((5, 0)),
        np.ones(5),
    ])
    def test_aggregate_rejects_bad_shapes(self, paths):
        """Test that empty or flat ensembles raise."""
        with pytest.raises(ComputationError, match="Cannot aggregate"):
            aggregate(paths, 100.0)

    def test_bands_do_not_hold_sorted_ensemble(self, sample_paths):
        """Test that the bands own only horizon_days + 1 values each."""
        result = aggregate(sample_paths, 100.0)

        for band in (result.p5_path, result.p95_path):
            owner = band
            while owner.base is not None:
                owner = owner.base
            assert owner.shape == (11,)

    def test_caller_paths_stay_writeable(self, sample_paths):
        """Test that aggregating leaves the caller's array writeable."""
        result = aggregate(sample_paths, 100.0)

        assert sample_paths.flags.writeable
        assert not result.paths.flags.writeable
