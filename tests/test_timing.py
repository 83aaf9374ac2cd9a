"""Tests for timing utilities."""

import pytest

from percolation_threshold.utils.timing import Stopwatch, format_duration


@pytest.mark.parametrize("seconds, expected", [
    (None, 'N/A'),
    (0.04, '0.0s'),
    (12.34, '12.3s'),
    (90, '1.5m'),
    (4500, '1.25h'),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_stopwatch_records_elapsed():
    with Stopwatch() as sw:
        assert sw.elapsed is None
        sum(range(1000))

    assert sw.elapsed is not None
    assert sw.elapsed >= 0.0
