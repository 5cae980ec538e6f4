"""Plane triangle formulas: laws of sines and cosines, medians, centres and area."""

from __future__ import annotations

import math
from dataclasses import dataclass

_TOLERANCE = 1e-9

_LENGTH_NEGATIVE = "the triangle does not exist: a side length is not positive"
_RESULT_NEGATIVE = "the triangle does not exist: the squared result is negative"
_ANGLE_NEGATIVE = "the triangle does not exist: an angle is not positive"
_ANGLE_OUT_OF_RANGE = "the triangle does not exist: an angle is out of range"
_ANGLE_SUM = "the triangle does not exist: the angles do not add up to pi"
_CALIBRATION_FAIL = "the results disagree with one another"
_CALCULATE_FAIL = "the value cannot be calculated"


@dataclass(frozen=True)
class Vector2D:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Triangle:
    """A triangle given by its three vertices."""

    a: Vector2D
    b: Vector2D
    c: Vector2D


def _require_positive_sides(*sides: float) -> None:
    if any(side <= 0 for side in sides):
        raise ValueError(_LENGTH_NEGATIVE)


def _require_triangle_inequality(a: float, b: float, c: float) -> None:
    if a >= b + c or b >= a + c or c >= a + b:
        raise ValueError(_CALIBRATION_FAIL)


def law_of_sines(
    a: float, b: float, c: float, angle_a: float, angle_b: float, angle_c: float
) -> float:
    """Check the law of sines and return the circumradius ``R``.

    Raises ValueError when a side or angle is not positive, the angles do not
    add up to pi, or the ratios ``side / sin(angle)`` disagree.
    """
    _require_positive_sides(a, b, c)
    if angle_a <= 0 or angle_b <= 0 or angle_c <= 0:
        raise ValueError(_ANGLE_NEGATIVE)
    if abs(angle_a + angle_b + angle_c - math.pi) > _TOLERANCE:
        raise ValueError(_ANGLE_SUM)
    r1 = a / math.sin(angle_a)
    r2 = b / math.sin(angle_b)
    r3 = c / math.sin(angle_c)
    if abs(r1 - r2) > _TOLERANCE or abs(r1 - r3) > _TOLERANCE:
        raise ValueError(_CALIBRATION_FAIL)
    return r1 / 2


def law_of_cosines(a: float, b: float, angle_c: float) -> float:
    """Return the side opposite ``angle_c`` given the two sides enclosing it."""
    _require_positive_sides(a, b)
    if angle_c <= 0 or angle_c >= math.pi:
        raise ValueError(_ANGLE_OUT_OF_RANGE)
    c_squared = a * a + b * b - 2 * a * b * math.cos(angle_c)
    if c_squared < 0:
        raise ValueError(_RESULT_NEGATIVE)
    return math.sqrt(c_squared)


def projection_theorem(a: float, b: float, c: float, angle_b: float, angle_c: float) -> bool:
    """Return True if ``a = b·cos C + c·cos B`` holds."""
    _require_positive_sides(a, b, c)
    if angle_b <= 0 or angle_c <= 0 or angle_b + angle_c >= math.pi:
        raise ValueError(_ANGLE_OUT_OF_RANGE)
    right = b * math.cos(angle_c) + c * math.cos(angle_b)
    return abs(a - right) < _TOLERANCE


def median_length(a: float, b: float, c: float) -> float:
    """Return the length of the median to side ``a``."""
    _require_positive_sides(a, b, c)
    _require_triangle_inequality(a, b, c)
    return math.sqrt(2 * b * b + 2 * c * c - a * a) / 2


def centroid(triangle: Triangle) -> Vector2D:
    """Return the intersection of the triangle's medians."""
    t = triangle
    return Vector2D((t.a.x + t.b.x + t.c.x) / 3, (t.a.y + t.b.y + t.c.y) / 3)


def incenter(triangle: Triangle) -> Vector2D:
    """Return the centre of the triangle's inscribed circle."""
    t = triangle
    a = distance(t.b, t.c)
    b = distance(t.a, t.c)
    c = distance(t.a, t.b)
    _require_positive_sides(a, b, c)
    total = a + b + c
    return Vector2D(
        (a * t.a.x + b * t.b.x + c * t.c.x) / total,
        (a * t.a.y + b * t.b.y + c * t.c.y) / total,
    )


def circumcenter(triangle: Triangle) -> Vector2D:
    """Return the centre of the triangle's circumscribed circle."""
    t = triangle
    area = heron_formula(distance(t.b, t.c), distance(t.a, t.c), distance(t.a, t.b))
    if area == 0:
        raise ValueError(_CALCULATE_FAIL)
    a_sq = t.a.x * t.a.x + t.a.y * t.a.y
    b_sq = t.b.x * t.b.x + t.b.y * t.b.y
    c_sq = t.c.x * t.c.x + t.c.y * t.c.y
    d = 2 * (t.a.x * (t.b.y - t.c.y) + t.b.x * (t.c.y - t.a.y) + t.c.x * (t.a.y - t.b.y))
    x = (a_sq * (t.b.y - t.c.y) + b_sq * (t.c.y - t.a.y) + c_sq * (t.a.y - t.b.y)) / d
    y = (a_sq * (t.c.x - t.b.x) + b_sq * (t.a.x - t.c.x) + c_sq * (t.b.x - t.a.x)) / d
    return Vector2D(x, y)


def _is_vertical(p1: Vector2D, p2: Vector2D) -> bool:
    return abs(p2.x - p1.x) < _TOLERANCE


def orthocenter(triangle: Triangle) -> Vector2D:
    """Return the intersection of the triangle's altitudes."""
    t = triangle
    if _is_vertical(t.a, t.b):
        return Vector2D(t.a.x, t.c.y)
    if _is_vertical(t.b, t.c):
        return Vector2D(t.b.x, t.a.y)
    if _is_vertical(t.a, t.c):
        return Vector2D(t.c.x, t.b.y)
    slope_ab = (t.b.y - t.a.y) / (t.b.x - t.a.x)
    slope_bc = (t.c.y - t.b.y) / (t.c.x - t.b.x)
    x = (
        slope_ab * slope_bc * (t.a.y - t.c.y)
        + slope_bc * (t.b.x - t.a.x)
        - slope_ab * (t.c.x - t.b.x)
    ) / (slope_bc - slope_ab)
    y = slope_ab * (x - t.a.x) + t.a.y
    return Vector2D(x, y)


def heron_formula(a: float, b: float, c: float) -> float:
    """Return the area of a triangle from its three side lengths."""
    _require_positive_sides(a, b, c)
    _require_triangle_inequality(a, b, c)
    s = (a + b + c) / 2
    area_squared = s * (s - a) * (s - b) * (s - c)
    if area_squared < 0:
        raise ValueError(_LENGTH_NEGATIVE)
    return math.sqrt(area_squared)


def distance(p1: Vector2D, p2: Vector2D) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)