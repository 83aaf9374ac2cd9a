"""Shared utilities."""

from .timing import Stopwatch, format_duration

__all__ = ['Stopwatch', 'format_duration']
