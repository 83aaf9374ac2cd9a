"""Run definition and grid-size sweeps."""

from .config import RunConfig, run_sweep

__all__ = ['RunConfig', 'run_sweep']
