"""Grid percolation engine and Monte Carlo threshold estimation."""

from .union_find import WeightedQuickUnionUF
from .grid_percolation import Percolation
from .stats import PercolationStats, run_trial

__all__ = ['WeightedQuickUnionUF', 'Percolation', 'PercolationStats', 'run_trial']
