"""Formulas for solids: surface areas, volumes and Euler's polyhedron formula."""

from __future__ import annotations

import math

_INVALID_DIMENSIONS = "invalid negative parameter"
_EULER_VIOLATION = "the values do not satisfy Euler's formula"


def is_valid_dimensions(*args: float) -> bool:
    """Return True if every dimension is non-negative."""
    return all(dim >= 0 for dim in args)


def _require_valid(*dims: float) -> None:
    if not is_valid_dimensions(*dims):
        raise ValueError(_INVALID_DIMENSIONS)


def cylinder_surface_area(r: float, h: float) -> float:
    """Return the total surface area of a cylinder of radius ``r`` and height ``h``."""
    _require_valid(r, h)
    return 2 * math.pi * r * (r + h)


def frustum_volume(s1: float, s2: float, h: float) -> float:
    """Return the volume of a frustum with base areas ``s1``, ``s2`` and height ``h``."""
    _require_valid(s1, s2, h)
    return (s1 + s2 + math.sqrt(s1 * s2)) * h / 3


def sphere_surface_area(r: float) -> float:
    """Return the surface area of a sphere of radius ``r``."""
    _require_valid(r)
    return 4 * math.pi * r**2


def sphere_volume(r: float) -> float:
    """Return the volume of a sphere of radius ``r``."""
    _require_valid(r)
    return 4 * math.pi * r**3 / 3


def euler_characteristic(v: int, e: int, f: int) -> int:
    """Solve or check Euler's formula ``V - E + F = 2`` for a polyhedron.

    A zero among ``v``, ``e`` and ``f`` (checked in that order) marks the
    unknown, which is computed and returned. When none is zero the triple is
    checked and 0 is returned. Raises ValueError for impossible inputs.
    """
    if v < 0 or e < 0 or f < 0:
        raise ValueError(_INVALID_DIMENSIONS)
    if v == 0:
        if e < f:
            raise ValueError(_INVALID_DIMENSIONS)
        return 2 - f + e
    if e == 0:
        if v + f < 2:
            raise ValueError(_INVALID_DIMENSIONS)
        return v + f - 2
    if f == 0:
        if v < 2 or e < v - 2:
            raise ValueError(_INVALID_DIMENSIONS)
        return 2 + e - v
    if v - e + f != 2:
        raise ValueError(_EULER_VIOLATION)
    return 0