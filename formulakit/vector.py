"""Three-dimensional vectors: magnitude, collinearity, dot and cross products."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 1e-10


@dataclass(frozen=True)
class Vector:
    """A vector in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def _is_zero(self) -> bool:
        return abs(self.x) < _EPSILON and abs(self.y) < _EPSILON and abs(self.z) < _EPSILON


def _almost_equal(a: float, b: float) -> bool:
    diff = abs(a - b)
    return diff < _EPSILON or diff < _EPSILON * max(abs(a), abs(b))


def are_collinear(a: Vector, b: Vector) -> bool:
    """Return True if the two vectors are collinear; a zero vector is collinear with any."""
    if a._is_zero() or b._is_zero():
        return True
    return (
        _almost_equal(a.x * b.y, a.y * b.x)
        and _almost_equal(a.x * b.z, a.z * b.x)
        and _almost_equal(a.y * b.z, a.z * b.y)
    )


def dot_product(a: Vector, b: Vector) -> float:
    """Return the dot product of ``a`` and ``b``."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cos_angle(a: Vector, b: Vector) -> float:
    """Return the cosine of the angle between ``a`` and ``b``; 0 if either is zero."""
    if a._is_zero() or b._is_zero():
        return 0.0
    return dot_product(a, b) / (a.magnitude() * b.magnitude())


def cross_product(a: Vector, b: Vector) -> Vector:
    """Return the cross product ``a × b``."""
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )