"""Arithmetic on complex numbers held as a real and an imaginary part."""

from __future__ import annotations

import math
from dataclasses import dataclass

_ZERO_THRESHOLD = 1e-10


@dataclass(frozen=True)
class Complex:
    """A complex number ``real + imaginary * i``."""

    real: float = 0.0
    imaginary: float = 0.0


def add(a: Complex, b: Complex) -> Complex:
    """Return ``a + b``."""
    return Complex(a.real + b.real, a.imaginary + b.imaginary)


def multiply(a: Complex, b: Complex) -> Complex:
    """Return ``a * b``."""
    return Complex(
        a.real * b.real - a.imaginary * b.imaginary,
        a.real * b.imaginary + a.imaginary * b.real,
    )


def divide(a: Complex, b: Complex) -> Complex:
    """Return ``a / b``.

    Raises ZeroDivisionError when ``b`` is zero or very close to zero.
    """
    denominator = b.real * b.real + b.imaginary * b.imaginary
    if abs(denominator) < _ZERO_THRESHOLD:
        raise ZeroDivisionError("attempted to divide by zero or a number very close to zero")
    return Complex(
        (a.real * b.real + a.imaginary * b.imaginary) / denominator,
        (a.imaginary * b.real - a.real * b.imaginary) / denominator,
    )


def conjugate(a: Complex) -> Complex:
    """Return the complex conjugate of ``a``."""
    return Complex(a.real, -a.imaginary)


def modulus(a: Complex) -> float:
    """Return the modulus (absolute value) of ``a``."""
    return math.sqrt(a.real * a.real + a.imaginary * a.imaginary)