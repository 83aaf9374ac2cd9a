"""Tests for stats module."""

import math

import numpy as np
import pytest

from percolation_threshold.percolation.stats import PercolationStats, run_trial, CONFIDENCE_95


class TestValidation:
    """Tests for constructor validation."""

    @pytest.mark.parametrize("n, trials", [(0, 10), (10, 0), (-1, 5), (5, -1)])
    def test_invalid_arguments(self, n, trials):
        with pytest.raises(ValueError):
            PercolationStats(n, trials)


class TestSingleSiteGrid:
    """n=1 always percolates after exactly one open."""

    @pytest.mark.parametrize("trials", [1, 2, 10])
    def test_degenerate_statistics(self, trials):
        ps = PercolationStats(1, trials, seed=0)

        assert ps.mean() == 1.0
        assert ps.stddev() == 0.0
        assert ps.confidence_interval() == (1.0, 1.0)
        assert len(ps.fractions) == trials


class TestStatistics:
    """Tests for the derived statistics."""

    def test_fractions_in_range(self):
        ps = PercolationStats(10, 20, seed=1)

        assert ps.fractions.shape == (20,)
        assert np.all(ps.fractions > 0.0)
        assert np.all(ps.fractions <= 1.0)

    def test_fractions_read_only(self):
        ps = PercolationStats(5, 3, seed=1)
        with pytest.raises(ValueError):
            ps.fractions[0] = 0.5

    def test_sample_statistics(self):
        """mean/stddev use the sample (N-1) formulas."""
        ps = PercolationStats(8, 15, seed=3)
        f = ps.fractions

        assert ps.mean() == pytest.approx(f.sum() / len(f))
        expected_std = math.sqrt(((f - f.mean()) ** 2).sum() / (len(f) - 1))
        assert ps.stddev() == pytest.approx(expected_std)

    def test_confidence_interval(self):
        ps = PercolationStats(8, 25, seed=4)
        half = CONFIDENCE_95 * ps.stddev() / math.sqrt(25)

        assert ps.confidence_lo() == pytest.approx(ps.mean() - half)
        assert ps.confidence_hi() == pytest.approx(ps.mean() + half)
        assert ps.confidence_lo() <= ps.mean() <= ps.confidence_hi()

    def test_seed_reproducible(self):
        a = PercolationStats(12, 10, seed=123)
        b = PercolationStats(12, 10, seed=123)

        np.testing.assert_array_equal(a.fractions, b.fractions)

    def test_rng_overrides_seed(self):
        a = PercolationStats(6, 5, seed=999, rng=np.random.default_rng(5))
        b = PercolationStats(6, 5, rng=np.random.default_rng(5))

        np.testing.assert_array_equal(a.fractions, b.fractions)

    def test_threshold_estimate_plausible(self):
        """The 2D site percolation threshold is about 0.593."""
        ps = PercolationStats(30, 40, seed=2024)

        assert 0.5 < ps.mean() < 0.7

    def test_summary(self):
        ps = PercolationStats(4, 6, seed=0)
        summary = ps.summary()

        assert summary['n'] == 4
        assert summary['trials'] == 6
        assert summary['mean'] == ps.mean()
        assert summary['stddev'] == ps.stddev()
        assert summary['confidence_lo'] == ps.confidence_lo()
        assert summary['confidence_hi'] == ps.confidence_hi()

    def test_report_format(self):
        ps = PercolationStats(1, 3, seed=0)
        lines = ps.report().splitlines()

        assert lines == [
            "mean                    = 1.0",
            "stddev                  = 0.0",
            "95% confidence interval = [1.0, 1.0]",
        ]

    def test_verbose_prints_trials(self, capsys):
        PercolationStats(3, 4, seed=0, verbose=True)
        out = capsys.readouterr().out

        assert "Trial 1/4" in out
        assert "Trial 4/4" in out


class TestRunTrial:
    """Tests for a single trial."""

    def test_fraction_is_multiple_of_site_count(self):
        n = 7
        fraction = run_trial(n, np.random.default_rng(11))
        opened = fraction * n * n

        assert opened == pytest.approx(round(opened))
        assert n <= round(opened) <= n * n
