"""Solid geometry in space: vectors, planes and the classic spatial theorems."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 1e-10


class ZeroVectorError(ValueError):
    """A zero vector was given where a direction is required."""

    def __init__(self, message: str = "a zero vector has no direction") -> None:
        super().__init__(message)


class NotPerpendicularError(ValueError):
    """Two directions or planes that must be perpendicular are not."""

    def __init__(self, message: str = "the two vectors are not perpendicular") -> None:
        super().__init__(message)


class NotCoplanarError(ValueError):
    """The given points do not determine a plane."""

    def __init__(self, message: str = "the given points do not determine a plane") -> None:
        super().__init__(message)


class NotParallelError(ValueError):
    """Two directions or planes that must be parallel are not."""

    def __init__(self, message: str = "the two vectors are not parallel") -> None:
        super().__init__(message)


class InvalidParameterError(ValueError):
    """A parameter lies outside its allowed range."""

    def __init__(self, message: str = "the given parameter is invalid") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Vec3:
    """A three-dimensional vector, used for points and directions alike."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Vec3) -> Vec3:
        """Return ``self + other``."""
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vec3) -> Vec3:
        """Return ``self - other``."""
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vec3:
        """Return the vector multiplied by ``scalar``."""
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self × other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Return the unit vector in the same direction; raise ZeroVectorError for zero."""
        mag = self.magnitude()
        if mag < _EPSILON:
            raise ZeroVectorError()
        return Vec3(self.x / mag, self.y / mag, self.z / mag)

    def is_collinear(self, other: Vec3) -> bool:
        """Return True if both vectors point the same or opposite way."""
        dot = self.normalize().dot(other.normalize())
        return abs(abs(dot) - 1) < _EPSILON

    def _is_small(self) -> bool:
        return self.magnitude() < _EPSILON


@dataclass(frozen=True)
class Plane:
    """The plane ``a*x + b*y + c*z + d = 0``."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    @classmethod
    def from_points(cls, pa: Vec3, pb: Vec3, pc: Vec3) -> Plane:
        """Build the plane through three points; raise NotCoplanarError if they are collinear."""
        normal = pb.subtract(pa).cross(pc.subtract(pa))
        if normal._is_small():
            raise NotCoplanarError()
        d = -(normal.x * pa.x + normal.y * pa.y + normal.z * pa.z)
        return cls(normal.x, normal.y, normal.z, d)

    def normal(self) -> Vec3:
        """Return the plane's normal vector."""
        return Vec3(self.a, self.b, self.c)


def _require_nonzero(*vectors: Vec3) -> None:
    if any(v._is_small() for v in vectors):
        raise ZeroVectorError()


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def is_line_parallel_to_plane(line: Vec3, plane_normal: Vec3) -> bool:
    """Return True if a line with direction ``line`` is parallel to a plane with ``plane_normal``."""
    _require_nonzero(line, plane_normal)
    return abs(line.dot(plane_normal)) < _EPSILON


def are_planes_parallel(p1: Plane, p2: Plane) -> bool:
    """Return True if the two planes are parallel."""
    n1, n2 = p1.normal(), p2.normal()
    _require_nonzero(n1, n2)
    return n1.cross(n2).magnitude() < _EPSILON


def are_lines_perpendicular_to_same_plane(line_dir1: Vec3, line_dir2: Vec3, plane: Plane) -> bool:
    """Return True if both lines are perpendicular to ``plane`` and so parallel to each other."""
    perp1 = is_line_perpendicular_to_plane(line_dir1, plane)
    perp2 = is_line_perpendicular_to_plane(line_dir2, plane)
    if not (perp1 and perp2):
        return False
    return line_dir1.cross(line_dir2).magnitude() < _EPSILON


def get_plane_intersection_dirs(p1: Plane, p2: Plane, intersecting_plane: Plane) -> tuple[Vec3, Vec3]:
    """Return the directions of the lines where two parallel planes meet a third plane.

    Raises NotParallelError when ``p1`` and ``p2`` are not parallel.
    """
    if not are_planes_parallel(p1, p2):
        raise NotParallelError()
    n = intersecting_plane.normal()
    return p1.normal().cross(n), p2.normal().cross(n)


def get_line_plane_intersection_dir(line_dir: Vec3, plane: Plane) -> Vec3:
    """Return the cross product of a line parallel to ``plane`` with the plane's normal.

    Raises NotParallelError when the line is not parallel to the plane.
    """
    normal = plane.normal()
    _require_nonzero(line_dir, normal)
    if not is_line_parallel_to_plane(line_dir, normal):
        raise NotParallelError()
    return line_dir.cross(normal)


def are_planes_perpendicular(p1: Plane, p2: Plane) -> bool:
    """Return True if the two planes are perpendicular."""
    n1, n2 = p1.normal(), p2.normal()
    _require_nonzero(n1, n2)
    return abs(n1.dot(n2)) < _EPSILON


def is_line_perpendicular_to_plane(line_dir: Vec3, plane: Plane) -> bool:
    """Return True if the line is perpendicular to the plane."""
    _require_nonzero(line_dir)
    normal = plane.normal()
    _require_nonzero(normal)
    return line_dir.cross(normal).magnitude() < _EPSILON


def is_line_perpendicular_to_plane_by_inters(line_dir: Vec3, p1: Plane, p2: Plane) -> bool:
    """Decide perpendicularity to ``p2`` through the intersection of perpendicular planes.

    Raises NotPerpendicularError when ``p1`` and ``p2`` are not perpendicular.
    """
    if not are_planes_perpendicular(p1, p2):
        raise NotPerpendicularError()
    intersection_dir = p1.normal().cross(p2.normal())
    if abs(line_dir.dot(intersection_dir)) > _EPSILON:
        return False
    return is_line_perpendicular_to_plane(line_dir, p2)


def project_onto_plane(v: Vec3, normal: Vec3) -> Vec3:
    """Return the component of ``v`` perpendicular to ``normal``."""
    unit = normal.normalize()
    return v.subtract(unit.scale(v.dot(unit)))


def projected_area(original_area: float, normal1: Vec3, normal2: Vec3) -> float:
    """Return the area of a region with normal ``normal1`` projected onto a plane with ``normal2``."""
    if original_area < 0:
        raise InvalidParameterError()
    _require_nonzero(normal1, normal2)
    cos_theta = abs(normal1.dot(normal2)) / (normal1.magnitude() * normal2.magnitude())
    return original_area * cos_theta


def minimum_angle_between_line_and_plane(line_dir: Vec3, plane: Plane) -> float:
    """Return the angle in radians between a line and a plane."""
    _require_nonzero(line_dir)
    normal = plane.normal()
    _require_nonzero(normal)
    cos_theta = line_dir.dot(normal) / (line_dir.magnitude() * normal.magnitude())
    return math.asin(_clamp_unit(abs(cos_theta)))


def maximum_angle_between_skew_lines(line_dir1: Vec3, line_dir2: Vec3) -> float:
    """Return the angle in radians, within [0, π/2], between two lines."""
    _require_nonzero(line_dir1, line_dir2)
    cos_theta = line_dir1.dot(line_dir2) / (line_dir1.magnitude() * line_dir2.magnitude())
    return math.acos(_clamp_unit(abs(cos_theta)))


def is_line_perpendicular_to_oblique(line_dir: Vec3, oblique_dir: Vec3, plane_normal: Vec3) -> bool:
    """Apply the three-perpendiculars theorem to a line and an oblique line."""
    proj = project_onto_plane(oblique_dir, plane_normal)
    if abs(line_dir.dot(proj)) > _EPSILON:
        return False
    return abs(line_dir.dot(oblique_dir)) < _EPSILON


def _check_acute(*angles: float) -> None:
    if any(angle < 0 or angle > math.pi / 2 for angle in angles):
        raise InvalidParameterError()


def three_cosine_theorem(angle_oab: float, angle_bac: float) -> float:
    """Return ``cos(OAB) * cos(BAC)``, the cosine of the angle between oblique and line."""
    _check_acute(angle_oab, angle_bac)
    return math.cos(angle_oab) * math.cos(angle_bac)


def three_sine_theorem(angle_oac: float, angle_aoc: float) -> float:
    """Return ``sin(OAC) * sin(AOC)`` from the three-sines theorem."""
    _check_acute(angle_oac, angle_aoc)
    return math.sin(angle_oac) * math.sin(angle_aoc)