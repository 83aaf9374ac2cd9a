"""
Wall-clock timing helpers for simulation runs.
"""

import time
from typing import Optional


class Stopwatch:
    """
    Context manager measuring elapsed wall-clock seconds.

    Example:
        with Stopwatch() as sw:
            PercolationStats(100, 50)
        print(format_duration(sw.elapsed))
    """

    def __init__(self):
        self.start: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self) -> 'Stopwatch':
        self.start = time.perf_counter()
        self.elapsed = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return 'N/A'

    if seconds < 60:
        return f"{seconds:.1f}s"
    if seconds < 3600:
        return f"{seconds / 60:.1f}m"
    return f"{seconds / 3600:.2f}h"
