"""
Run configuration and grid-size sweeps.

The RunConfig loads a YAML run definition listing the grid sizes to
simulate. run_sweep() estimates the threshold for each of them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import yaml

from ..percolation.stats import PercolationStats
from ..utils.timing import Stopwatch


class RunConfig:
    """
    Loads and validates a sweep configuration YAML.

    Example YAML:
        run_name: threshold_sweep
        grid_sizes: [20, 50, 100]
        trials: 100
        seed: 42

    Example:
        config = RunConfig.from_yaml('config/sweep.yaml')
        print(config.run_name, config.grid_sizes)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required keys and value ranges."""
        for key in ['run_name', 'grid_sizes', 'trials']:
            if key not in self._data:
                raise ValueError(f"Missing required config key: '{key}'")

        sizes = self._data['grid_sizes']
        if not isinstance(sizes, list) or not sizes:
            raise ValueError("'grid_sizes' must be a non-empty list")
        for n in sizes:
            if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
                raise ValueError(f"Grid sizes must be positive integers, got {n!r}")

        trials = self._data['trials']
        if isinstance(trials, bool) or not isinstance(trials, int) or trials <= 0:
            raise ValueError(f"'trials' must be a positive integer, got {trials!r}")

        seed = self._data.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            raise ValueError(f"'seed' must be a non-negative integer, got {seed!r}")

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def grid_sizes(self) -> List[int]:
        return list(self._data['grid_sizes'])

    @property
    def trials(self) -> int:
        return self._data['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')


def run_sweep(config: RunConfig, verbose: bool = False) -> List[Dict[str, Any]]:
    """
    Estimate the percolation threshold for every grid size in a config.

    One random generator, seeded from ``config.seed``, feeds all grid sizes
    in order, so a seeded sweep is reproducible end to end.

    Args:
        config: Sweep configuration
        verbose: Print per-trial progress

    Returns:
        One PercolationStats.summary() dict per grid size, with an extra
        'elapsed_seconds' entry
    """
    rng = np.random.default_rng(config.seed)
    results = []

    for n in config.grid_sizes:
        if verbose:
            print(f"Running {config.trials} trials for n={n}...")
        with Stopwatch() as sw:
            ps = PercolationStats(n, config.trials, rng=rng, verbose=verbose)
        summary = ps.summary()
        summary['elapsed_seconds'] = sw.elapsed
        results.append(summary)

    return results
