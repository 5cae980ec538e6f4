"""Algebraic formulas: identities, means, the Cauchy inequality and logarithms."""

from __future__ import annotations

import math
from collections.abc import Iterable


def cubic_difference(a: float, b: float) -> float:
    """Return ``a³ - b³`` computed as ``(a - b)(a² + ab + b²)``."""
    return (a - b) * (a * a + a * b + b * b)


def subset_count(n: int) -> int:
    """Return the number of subsets of a set with ``n`` elements, ``2ⁿ``."""
    if n < 0:
        raise ValueError("the number of elements must not be negative")
    return 2**n


def mean_inequalities(values: Iterable[float]) -> tuple[float, float, float, float]:
    """Return the harmonic, geometric, arithmetic and quadratic means.

    Raises ValueError for an empty collection or one holding a non-positive value.
    """
    numbers = list(values)
    if not numbers:
        raise ValueError("the set must not be empty")
    if any(num <= 0 for num in numbers):
        raise ValueError("every number in the set must be positive")
    n = float(len(numbers))
    harmonic = n / sum(1 / num for num in numbers)
    geometric = math.prod(numbers) ** (1 / n)
    arithmetic = sum(numbers) / n
    quadratic = math.sqrt(sum(num * num for num in numbers) / n)
    return harmonic, geometric, arithmetic, quadratic


def cauchy_equality(a: float, b: float, c: float, d: float) -> float:
    """Return ``(ac + bd)²`` when the Cauchy equality condition ``ad = bc`` holds.

    Raises ValueError otherwise.
    """
    if a * d != b * c:
        raise ValueError("the arguments do not satisfy the Cauchy equality condition")
    return (a * c + b * d) ** 2


def check_log_validity(base: float, x: float) -> bool:
    """Return True if ``base`` and ``x`` are valid for a logarithm, else raise ValueError."""
    if base <= 0 or base == 1:
        raise ValueError("the base of a logarithm must be positive and not equal to 1")
    if x <= 0:
        raise ValueError("the argument of a logarithm must be positive")
    return True


def log(base: float, x: float) -> float:
    """Return the logarithm of ``x`` to ``base``."""
    check_log_validity(base, x)
    return math.log(x) / math.log(base)


def average_growth_rate(present: float, previous: float) -> float:
    """Return ``(present - previous) / previous``.

    Raises ValueError when the base-period value ``previous`` is zero.
    """
    if previous == 0:
        raise ValueError("the base-period value must not be zero")
    return (present - previous) / previous