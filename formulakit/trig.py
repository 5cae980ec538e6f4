"""Trigonometric functions and identities in radians."""

from __future__ import annotations

import math

_THRESHOLD = 1e-10

_UNDEFINED = "the function is not defined here"
_OUT_OF_RANGE = "the sine or cosine value is out of range"
_ZERO_OMEGA = "omega must not be zero"


def _require_unit_range(value: float) -> None:
    if not -1 <= value <= 1:
        raise ValueError(_OUT_OF_RANGE)


def sin(rad: float) -> float:
    """Return the sine of ``rad``."""
    return math.sin(rad)


def cos(rad: float) -> float:
    """Return the cosine of ``rad``."""
    return math.cos(rad)


def tan(rad: float) -> float:
    """Return the tangent of ``rad``; raise ValueError where it is undefined."""
    if abs(math.cos(rad)) < _THRESHOLD:
        raise ValueError(_UNDEFINED)
    return math.tan(rad)


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180 / math.pi


def sin_to_cos(sin_value: float) -> float:
    """Return the non-negative cosine matching a sine value."""
    _require_unit_range(sin_value)
    return math.sqrt(1 - sin_value * sin_value)


def cos_to_sin(cos_value: float) -> float:
    """Return the non-negative sine matching a cosine value."""
    _require_unit_range(cos_value)
    return math.sqrt(1 - cos_value * cos_value)


def sin_add(rad_a: float, rad_b: float) -> float:
    """Return ``sin(A + B)`` by the angle-sum formula."""
    return sin(rad_a) * cos(rad_b) + cos(rad_a) * sin(rad_b)


def sin_sub(rad_a: float, rad_b: float) -> float:
    """Return ``sin(A - B)`` by the angle-difference formula."""
    return sin(rad_a) * cos(rad_b) - cos(rad_a) * sin(rad_b)


def cos_add(rad_a: float, rad_b: float) -> float:
    """Return ``cos(A + B)`` by the angle-sum formula."""
    return cos(rad_a) * cos(rad_b) - sin(rad_a) * sin(rad_b)


def cos_sub(rad_a: float, rad_b: float) -> float:
    """Return ``cos(A - B)`` by the angle-difference formula."""
    return cos(rad_a) * cos(rad_b) + sin(rad_a) * sin(rad_b)


def sin_double(rad: float) -> float:
    """Return ``sin(2θ)``."""
    return 2 * sin(rad) * cos(rad)


def cos_double(rad: float) -> float:
    """Return ``cos(2θ)``."""
    return 2 * cos(rad) * cos(rad) - 1


def tan_double(rad: float) -> float:
    """Return ``tan(2θ)``; raise ValueError where it is undefined."""
    t = tan(rad)
    if abs(1 - t * t) < _THRESHOLD:
        raise ValueError(_UNDEFINED)
    return 2 * t / (1 - t * t)


def sin_sum_to_product(rad_a: float, rad_b: float) -> float:
    """Return ``sin A + sin B`` written as a product."""
    return 2 * sin((rad_a + rad_b) / 2) * cos((rad_a - rad_b) / 2)


def sin_sub_to_product(rad_a: float, rad_b: float) -> float:
    """Return ``sin A - sin B`` written as a product."""
    return 2 * cos((rad_a + rad_b) / 2) * sin((rad_a - rad_b) / 2)


def cos_sum_to_product(rad_a: float, rad_b: float) -> float:
    """Return ``cos A + cos B`` written as a product."""
    return 2 * cos((rad_a + rad_b) / 2) * cos((rad_a - rad_b) / 2)


def cos_sub_to_product(rad_a: float, rad_b: float) -> float:
    """Return ``cos A - cos B`` written as a product."""
    return -2 * sin((rad_a + rad_b) / 2) * sin((rad_a - rad_b) / 2)


def sin_cos_to_sum(rad_a: float, rad_b: float) -> tuple[float, float]:
    """Return the two terms whose sum is ``sin A · cos B``."""
    return 0.5 * sin(rad_a + rad_b), 0.5 * sin(rad_a - rad_b)


def sin_sin_to_sum(rad_a: float, rad_b: float) -> tuple[float, float]:
    """Return the two terms whose sum is ``sin A · sin B``."""
    return 0.5 * cos(rad_a - rad_b), -0.5 * cos(rad_a + rad_b)


def cos_cos_to_sum(rad_a: float, rad_b: float) -> tuple[float, float]:
    """Return the two terms whose sum is ``cos A · cos B``."""
    return 0.5 * cos(rad_a - rad_b), 0.5 * cos(rad_a + rad_b)


def sin_half(cos_value: float) -> float:
    """Return the non-negative ``sin(θ/2)`` from ``cos θ``."""
    _require_unit_range(cos_value)
    return math.sqrt((1 - cos_value) / 2)


def cos_half(cos_value: float) -> float:
    """Return the non-negative ``cos(θ/2)`` from ``cos θ``."""
    _require_unit_range(cos_value)
    return math.sqrt((1 + cos_value) / 2)


def tan_half(cos_value: float) -> float:
    """Return the non-negative ``tan(θ/2)`` from ``cos θ``."""
    _require_unit_range(cos_value)
    if abs(1 + cos_value) < _THRESHOLD:
        raise ValueError(_UNDEFINED)
    return math.sqrt((1 - cos_value) / (1 + cos_value))


def sin_from_tan_half(tan_value: float) -> float:
    """Return ``sin θ`` from ``tan(θ/2)``."""
    return 2 * tan_value / (1 + tan_value * tan_value)


def cos_from_tan_half(tan_value: float) -> float:
    """Return ``cos θ`` from ``tan(θ/2)``."""
    return (1 - tan_value * tan_value) / (1 + tan_value * tan_value)


def tan_from_tan_half(tan_value: float) -> float:
    """Return ``tan θ`` from ``tan(θ/2)``."""
    return 2 * tan_value / (1 - tan_value * tan_value)


def auxiliary_angle(a: float, b: float) -> tuple[float, float]:
    """Write ``a·sin θ + b·cos θ`` as ``A·sin(θ + φ)`` and return ``(A, φ)``."""
    if a == 0 and b == 0:
        raise ValueError(_UNDEFINED)
    return math.sqrt(a * a + b * b), math.atan2(b, a)


def inverse_auxiliary_angle(amplitude: float, phase: float) -> tuple[float, float]:
    """Split ``A·sin(θ + φ)`` back into the coefficients ``(a, b)``."""
    return amplitude * math.cos(phase), amplitude * math.sin(phase)


def period(omega: float) -> float:
    """Return the period ``2π / ω``; raise ValueError when ``omega`` is zero."""
    if omega == 0:
        raise ValueError(_ZERO_OMEGA)
    return 2 * math.pi / omega