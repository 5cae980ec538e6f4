"""Basic sample statistics: percentile, mean and variance."""

from __future__ import annotations

import math
from collections.abc import Iterable

_FRACTION_THRESHOLD = 1e-10


def percentile(p: float, data: Iterable[float]) -> float:
    """Return the ``p``-th percentile of ``data``.

    With ``i = n * p / 100``: when ``i`` is whole the result is the mean of the
    sorted values at positions ``i`` and ``i + 1``, otherwise the value at
    ``floor(i) + 1`` (zero-based). Raises ValueError for negative ``p`` and
    IndexError when the position falls outside the data.
    """
    if p < 0:
        raise ValueError("the argument must be non-negative")
    ordered = sorted(data)
    i = len(ordered) * (p / 100)
    index = int(i)
    if i - math.floor(i) < _FRACTION_THRESHOLD:
        if index + 1 >= len(ordered):
            raise IndexError("percentile position lies outside the data")
        return (ordered[index] + ordered[index + 1]) / 2
    if index + 1 >= len(ordered):
        raise IndexError("percentile position lies outside the data")
    return ordered[index + 1]


def sample_mean(sample: Iterable[float]) -> float:
    """Return the arithmetic mean of ``sample``; raise ValueError when it is empty."""
    values = list(sample)
    if not values:
        raise ValueError("the sample must not be empty")
    return sum(values) / len(values)


def sample_variance(sample: Iterable[float]) -> float:
    """Return the population variance of ``sample``: mean of squares minus squared mean."""
    values = list(sample)
    if not values:
        raise ValueError("the sample must not be empty")
    n = len(values)
    mean = sum(values) / n
    mean_of_squares = sum(v * v for v in values) / n
    return mean_of_squares - mean * mean