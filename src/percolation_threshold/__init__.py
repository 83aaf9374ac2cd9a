"""
Percolation Threshold - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Incremental grid connectivity (weighted quick-union with path compression)
- Site percolation on n-by-n grids without backwash
- Monte Carlo threshold statistics with confidence intervals
- YAML-configured sweeps over grid sizes
"""

__version__ = "1.0.0"
