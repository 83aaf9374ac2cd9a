"""
Monte Carlo estimate of the percolation threshold.

Each trial opens uniformly random sites of a fresh grid until it percolates
and records the fraction of open sites. The threshold estimate is the sample
mean of those fractions, reported with its sample standard deviation and a
95% confidence interval.
"""

import math
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .grid_percolation import Percolation


# z-score of the two-sided 95% normal interval
CONFIDENCE_95 = 1.96


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Run one trial on a fresh n-by-n grid.

    Args:
        n: Grid size
        rng: Random source for site selection

    Returns:
        Fraction of sites open at the moment the grid first percolates
    """
    perc = Percolation(n)
    while not perc.percolates():
        row, col = rng.integers(1, n + 1, size=2)
        perc.open(int(row), int(col))
    return perc.open_fraction()


class PercolationStats:
    """
    Percolation threshold statistics over independent trials.

    All trials run in the constructor; the accessors only read the results.

    Example:
        ps = PercolationStats(50, 30, seed=42)
        print(ps.mean(), ps.stddev())
        lo, hi = ps.confidence_interval()
    """

    def __init__(self, n: int, trials: int, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None, verbose: bool = False):
        """
        Run ``trials`` independent trials on n-by-n grids.

        Args:
            n: Grid size (must be > 0)
            trials: Number of trials (must be > 0)
            seed: Seed for a new random generator (ignored if ``rng`` is given)
            rng: Random generator to draw sites from
            verbose: Print one progress line per trial
        """
        if n <= 0 or trials <= 0:
            raise ValueError(f"n and trials must be > 0, got n={n}, trials={trials}")

        self.n = n
        self.trials = trials
        if rng is None:
            rng = np.random.default_rng(seed)

        fractions = np.empty(trials, dtype=np.float64)
        for i in range(trials):
            fractions[i] = run_trial(n, rng)
            if verbose:
                print(f"  Trial {i + 1}/{trials}: threshold {fractions[i]:.6f}")

        fractions.flags.writeable = False
        self._fractions = fractions

        self._mean = float(np.mean(fractions))
        if trials > 1:
            self._stddev = float(np.std(fractions, ddof=1))
        else:
            # sample deviation of a single value is undefined
            self._stddev = 0.0

    @property
    def fractions(self) -> np.ndarray:
        """Per-trial open fractions (read-only)."""
        return self._fractions

    def mean(self) -> float:
        return self._mean

    def stddev(self) -> float:
        return self._stddev

    def _half_width(self) -> float:
        return CONFIDENCE_95 * self._stddev / math.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Lower bound of the 95% confidence interval."""
        return self._mean - self._half_width()

    def confidence_hi(self) -> float:
        """Upper bound of the 95% confidence interval."""
        return self._mean + self._half_width()

    def confidence_interval(self) -> Tuple[float, float]:
        return self.confidence_lo(), self.confidence_hi()

    def summary(self) -> Dict[str, Any]:
        """
        Collect the statistics into a flat dict.

        Returns:
            Dict with keys n, trials, mean, stddev, confidence_lo, confidence_hi
        """
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self._mean,
            'stddev': self._stddev,
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }

    def report(self) -> str:
        """Three-line text report: mean, stddev, 95% confidence interval."""
        lo, hi = self.confidence_interval()
        return (
            f"mean                    = {self._mean}\n"
            f"stddev                  = {self._stddev}\n"
            f"95% confidence interval = [{lo}, {hi}]"
        )
