import math

import pytest

from formulakit.space import (
    InvalidParameterError,
    NotCoplanarError,
    NotParallelError,
    NotPerpendicularError,
    Plane,
    Vec3,
    ZeroVectorError,
    are_lines_perpendicular_to_same_plane,
    are_planes_parallel,
    are_planes_perpendicular,
    get_line_plane_intersection_dir,
    get_plane_intersection_dirs,
    is_line_parallel_to_plane,
    is_line_perpendicular_to_oblique,
    is_line_perpendicular_to_plane,
    is_line_perpendicular_to_plane_by_inters,
    maximum_angle_between_skew_lines,
    minimum_angle_between_line_and_plane,
    project_onto_plane,
    projected_area,
    three_cosine_theorem,
    three_sine_theorem,
)

X = Vec3(1, 0, 0)
Y = Vec3(0, 1, 0)
Z = Vec3(0, 0, 1)
ZERO = Vec3()
XY_PLANE = Plane(0, 0, 1, 0)
XZ_PLANE = Plane(0, 1, 0, 0)


def test_add_subtract_round_trip():
    a, b = Vec3(1.5, -2, 3), Vec3(4, 5, -6)
    assert a.add(b).subtract(b) == a


def test_scale_is_linear_in_dot():
    a, b = Vec3(1, 2, 3), Vec3(-1, 4, 2)
    assert a.scale(3).dot(b) == pytest.approx(3 * a.dot(b))


def test_cross_of_axes():
    assert X.cross(Y) == Z


def test_cross_is_orthogonal_and_anticommutative():
    a, b = Vec3(1, 2, 3), Vec3(-2, 0, 5)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0)
    assert c.dot(b) == pytest.approx(0)
    assert b.cross(a) == c.scale(-1)


def test_magnitude_matches_self_dot():
    a = Vec3(2, -3, 6)
    assert a.magnitude() ** 2 == pytest.approx(a.dot(a))


def test_normalize_gives_unit_vector():
    n = Vec3(3, 4, 12).normalize()
    assert n.magnitude() == pytest.approx(1)
    assert n.is_collinear(Vec3(3, 4, 12))


def test_normalize_zero_raises():
    with pytest.raises(ZeroVectorError):
        ZERO.normalize()


def test_is_collinear():
    a = Vec3(1, 2, 3)
    assert a.is_collinear(a.scale(-2.5))
    assert not X.is_collinear(Y)
    with pytest.raises(ZeroVectorError):
        a.is_collinear(ZERO)


def test_plane_from_points_contains_points():
    pa, pb, pc = Vec3(1, 0, 2), Vec3(0, 3, 1), Vec3(2, 2, 0)
    plane = Plane.from_points(pa, pb, pc)
    for p in (pa, pb, pc):
        assert plane.a * p.x + plane.b * p.y + plane.c * p.z + plane.d == pytest.approx(0)
    assert plane.normal().dot(pb.subtract(pa)) == pytest.approx(0)


def test_plane_from_collinear_points_raises():
    with pytest.raises(NotCoplanarError):
        Plane.from_points(Vec3(0, 0, 0), Vec3(1, 1, 1), Vec3(2, 2, 2))


def test_is_line_parallel_to_plane():
    assert is_line_parallel_to_plane(X, Z)
    assert not is_line_parallel_to_plane(Z, Z)
    with pytest.raises(ZeroVectorError):
        is_line_parallel_to_plane(ZERO, Z)


def test_are_planes_parallel():
    assert are_planes_parallel(XY_PLANE, Plane(0, 0, 2, -5))
    assert not are_planes_parallel(XY_PLANE, XZ_PLANE)
    with pytest.raises(ZeroVectorError):
        are_planes_parallel(Plane(0, 0, 0, 1), XY_PLANE)


def test_are_lines_perpendicular_to_same_plane():
    assert are_lines_perpendicular_to_same_plane(Z, Z.scale(-3), XY_PLANE)
    assert not are_lines_perpendicular_to_same_plane(Z, X, XY_PLANE)
    with pytest.raises(ZeroVectorError):
        are_lines_perpendicular_to_same_plane(ZERO, Z, XY_PLANE)


def test_get_plane_intersection_dirs():
    d1, d2 = get_plane_intersection_dirs(XY_PLANE, Plane(0, 0, 1, -4), XZ_PLANE)
    for d in (d1, d2):
        assert d.magnitude() > 0
        assert d.dot(XY_PLANE.normal()) == pytest.approx(0)
        assert d.dot(XZ_PLANE.normal()) == pytest.approx(0)
    assert d1.is_collinear(d2)


def test_get_plane_intersection_dirs_requires_parallel():
    with pytest.raises(NotParallelError):
        get_plane_intersection_dirs(XY_PLANE, XZ_PLANE, Plane(1, 0, 0, 0))


def test_get_line_plane_intersection_dir():
    line = Vec3(1, 2, 0)
    d = get_line_plane_intersection_dir(line, XY_PLANE)
    assert d.dot(line) == pytest.approx(0)
    assert d.dot(XY_PLANE.normal()) == pytest.approx(0)
    with pytest.raises(NotParallelError):
        get_line_plane_intersection_dir(Vec3(1, 0, 1), XY_PLANE)
    with pytest.raises(ZeroVectorError):
        get_line_plane_intersection_dir(ZERO, XY_PLANE)


def test_are_planes_perpendicular():
    assert are_planes_perpendicular(XY_PLANE, XZ_PLANE)
    assert not are_planes_perpendicular(XY_PLANE, Plane(0, 1, 1, 0))


def test_is_line_perpendicular_to_plane():
    assert is_line_perpendicular_to_plane(Z.scale(2), XY_PLANE)
    assert not is_line_perpendicular_to_plane(Vec3(0, 1, 1), XY_PLANE)
    with pytest.raises(ZeroVectorError):
        is_line_perpendicular_to_plane(Z, Plane(0, 0, 0, 3))


def test_is_line_perpendicular_to_plane_by_inters():
    assert is_line_perpendicular_to_plane_by_inters(Z, XZ_PLANE, XY_PLANE)
    assert not is_line_perpendicular_to_plane_by_inters(X, XZ_PLANE, XY_PLANE)
    with pytest.raises(NotPerpendicularError):
        is_line_perpendicular_to_plane_by_inters(Z, XY_PLANE, Plane(0, 0, 1, 2))


def test_project_onto_plane():
    v, normal = Vec3(3, -1, 7), Vec3(1, 1, 1)
    proj = project_onto_plane(v, normal)
    assert proj.dot(normal) == pytest.approx(0)
    in_plane = Vec3(2, 5, 0)
    assert project_onto_plane(in_plane, Z) == in_plane
    with pytest.raises(ZeroVectorError):
        project_onto_plane(v, ZERO)


def test_projected_area():
    assert projected_area(12.5, Z, Z.scale(4)) == pytest.approx(12.5)
    assert projected_area(12.5, Z, X) == pytest.approx(0)
    with pytest.raises(InvalidParameterError):
        projected_area(-1, Z, Z)
    with pytest.raises(ZeroVectorError):
        projected_area(1, ZERO, Z)


def test_minimum_angle_between_line_and_plane():
    assert minimum_angle_between_line_and_plane(Z, XY_PLANE) == pytest.approx(math.pi / 2)
    assert minimum_angle_between_line_and_plane(X, XY_PLANE) == pytest.approx(0)
    with pytest.raises(ZeroVectorError):
        minimum_angle_between_line_and_plane(ZERO, XY_PLANE)


def test_maximum_angle_between_skew_lines():
    assert maximum_angle_between_skew_lines(X, Y) == pytest.approx(math.pi / 2)
    assert maximum_angle_between_skew_lines(X, X.scale(-2)) == pytest.approx(0, abs=1e-7)
    angle = maximum_angle_between_skew_lines(Vec3(1, 2, -1), Vec3(-3, 1, 4))
    assert 0 <= angle <= math.pi / 2
    with pytest.raises(ZeroVectorError):
        maximum_angle_between_skew_lines(X, ZERO)


def test_is_line_perpendicular_to_oblique():
    oblique = Vec3(1, 0, 1)
    assert is_line_perpendicular_to_oblique(Y, oblique, Z)
    assert not is_line_perpendicular_to_oblique(X, oblique, Z)
    with pytest.raises(ZeroVectorError):
        is_line_perpendicular_to_oblique(Y, oblique, ZERO)


def test_three_cosine_theorem():
    assert three_cosine_theorem(0, 0) == pytest.approx(1)
    assert three_cosine_theorem(0, 0.7) == pytest.approx(math.cos(0.7))
    with pytest.raises(InvalidParameterError):
        three_cosine_theorem(-0.1, 0.2)
    with pytest.raises(InvalidParameterError):
        three_cosine_theorem(0.2, math.pi)


def test_three_sine_theorem():
    assert three_sine_theorem(math.pi / 2, math.pi / 2) == pytest.approx(1)
    assert three_sine_theorem(0, 0.9) == pytest.approx(0)
    with pytest.raises(InvalidParameterError):
        three_sine_theorem(2.0, 0.1)