import math

import pytest

from projective_kernel import Line, Point, difference, dot, join, meet


def _assert_proportional(actual, expected, tol=1e-9):
    # homogeneous triples are equal up to a nonzero scale
    cross = (
        actual[1] * expected[2] - actual[2] * expected[1],
        actual[2] * expected[0] - actual[0] * expected[2],
        actual[0] * expected[1] - actual[1] * expected[0],
    )
    assert all(abs(c) <= tol for c in cross), (tuple(actual), tuple(expected))
    assert any(abs(c) > 0 for c in actual)


def _close_xy(point, x, y, tol=1e-9):
    px, py = point.as_vector()
    return math.isclose(px, x, abs_tol=tol) and math.isclose(py, y, abs_tol=tol)


_POINTS = [
    Point(0.0, 0.0),
    Point(3.0, 0.0),
    Point(1.5, -2.0),
    Point(4.0, 6.0, 2.0),
    Point(-7.0, 2.5, 0.5),
    Point(1.0, 1.0, 0.0),
]


@pytest.mark.parametrize("p", _POINTS)
@pytest.mark.parametrize("q", _POINTS)
def test_join_is_incident_with_both_points(p, q):
    line = join(p, q)

    assert math.isclose(dot(line, p), 0.0, abs_tol=1e-9)
    assert math.isclose(dot(line, q), 0.0, abs_tol=1e-9)


def test_join_of_two_points_on_x_axis():
    line = Line.join(Point.from_coordinates(0, 0), Point.from_coordinates(3, 0))

    assert line == Line(0.0, 3.0, 0.0)
    _assert_proportional(line, Line.X_AXIS)


def test_join_and_meet_are_anti_commutative():
    p = Point(1.0, 2.0)
    q = Point(-4.0, 0.5, 2.0)
    l1 = Line(1.0, -1.0, 2.0)
    l2 = Line(0.5, 3.0, -1.0)

    assert join(q, p) == join(p, q).scale(-1)
    assert meet(l2, l1) == meet(l1, l2).scale(-1)


def test_meet_of_crossing_lines():
    point = meet(Line(1.0, 0.0, -2.0), Line(0.0, 1.0, -5.0))

    assert point.is_finite
    assert _close_xy(point, 2.0, 5.0)


def test_meet_of_parallel_lines_is_ideal():
    point = Point.meet(Line(1.0, 1.0, 0.0), Line(2.0, 2.0, 7.0))

    assert not point.is_finite
    _assert_proportional(point, Point(1.0, -1.0, 0.0))


def test_ideal_point_gives_infinite_distance_without_raising():
    ideal = Point(1.0, 0.0, 0.0)

    assert math.isinf(ideal.distance_to(Point.ORIGIN))
    assert math.isinf(ideal.as_vector()[0])
    assert math.isnan(Point.EMPTY.as_vector()[0])


def test_signed_distance_and_weights():
    line = Line(3.0, 4.0, -10.0)
    point = Point(2.0, 6.0, 2.0)

    assert line.weight == 5.0
    assert point.weight == 2.0
    assert math.isclose(line.signed_distance_to(point), 1.0)
    assert math.isclose(point.signed_distance_to(line), 1.0)
    assert math.isclose(line.negate().signed_distance_to(point), -1.0)
    assert math.isclose(point.distance_to(line.negate()), 1.0)


def test_closest_point_is_orthogonal_projection():
    line = Line(1.0, -1.0, 0.0)
    foot = line.closest_point(Point(2.0, 0.0))

    assert _close_xy(foot, 1.0, 1.0)
    assert foot.is_coincident(line, tolerance=1e-12)
    assert math.isclose(line.distance_to(Point(2.0, 0.0)), math.sqrt(2.0))


def test_offset_changes_signed_distance_by_offset():
    line = Line(2.0, -1.0, 3.0)
    sample = line.center()
    for d in (-2.5, 0.0, 1.25, 7.0):
        shifted = line.offset(d)
        delta = line.signed_distance_to(sample) - shifted.signed_distance_to(sample)
        assert math.isclose(delta, d, abs_tol=1e-9)
        assert shifted.is_coincident(line.parallel_through(shifted.center()), tolerance=1e-12)


def test_parallel_and_perpendicular_through():
    line = Line(1.0, 2.0, -4.0)
    point = Point(3.0, -1.0)

    parallel = line.parallel_through(point)
    perpendicular = line.perpendicular_through(point)

    assert parallel.is_coincident(point)
    assert perpendicular.is_coincident(point)
    assert math.isclose(parallel.a * line.b - parallel.b * line.a, 0.0, abs_tol=1e-12)
    assert math.isclose(perpendicular.a * line.a + perpendicular.b * line.b, 0.0, abs_tol=1e-12)
    assert perpendicular.is_coincident(line.closest_point(point), tolerance=1e-9)


@pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 2, 2.0, -1.1, math.pi])
def test_rotation_preserves_distance_to_fulcrum(angle):
    fulcrum = Point(2.0, -1.0, 0.5)
    for point in (Point(1.0, 1.0), Point(-3.0, 4.0, 2.0), Point(5.0, 0.0)):
        rotated = point.rotate_about(fulcrum, angle)
        assert math.isclose(rotated.distance_to(fulcrum), point.distance_to(fulcrum), rel_tol=1e-9)


def test_point_rotation_quarter_turn():
    rotated = Point(2.0, 1.0).rotate_about(Point(1.0, 1.0), math.pi / 2)

    assert _close_xy(rotated, 1.0, 2.0)


def test_rotation_of_direction_keeps_it_ideal():
    rotated = Point.ALONG_X.rotate_about(Point(5.0, 5.0), math.pi / 2)

    assert not rotated.is_finite
    _assert_proportional(rotated, Point.ALONG_Y)


def test_line_rotation_carries_its_points():
    line = Line(1.0, -2.0, 3.0)
    fulcrum = Point(0.5, 2.0)
    angle = 0.7
    rotated = line.rotate_about(fulcrum, angle)
    for t in (-1.0, 0.0, 2.5):
        moved = line.point_at(t).rotate_about(fulcrum, angle)
        assert math.isclose(dot(rotated, moved.normalized()), 0.0, abs_tol=1e-9)


def test_mirror_point_about_axes():
    assert _close_xy(Point(3.0, 2.0).mirror_about(Line.X_AXIS), 3.0, -2.0)
    assert _close_xy(Point(3.0, 2.0).mirror_about(Line.Y_AXIS), -3.0, 2.0)
    assert _close_xy(Point(0.0, 0.0).mirror_about(Line(1.0, 1.0, -2.0)), 2.0, 2.0)


def test_mirror_line_about_axes():
    assert Line(1.0, 0.0, -1.0).mirror_about(Line(1.0, 0.0, 0.0)) == Line(1.0, 0.0, 1.0)
    _assert_proportional(Line(1.0, -1.0, 0.0).mirror_about(Line.X_AXIS), Line(1.0, 1.0, 0.0))


def test_mirror_is_an_involution():
    axis = Line(0.3, -1.2, 2.0)
    point = Point(4.0, -1.0, 2.0)

    twice = point.mirror_about(axis).mirror_about(axis)

    assert twice.is_coincident(point, tolerance=1e-9)


def test_line_views():
    line = Line(0.0, 2.0, -6.0)

    assert _close_xy(line.center(), 0.0, 3.0)
    assert line.direction() == (1.0, 0.0)
    assert line.normalized() == Line(0.0, 1.0, -3.0)
    assert _close_xy(line.point_at(2.0), 2.0, 3.0)
    assert math.isclose(line.parallel_distance_to(Point(5.0, 7.0)), 5.0)
    assert _close_xy(line.point_from(Point(5.0, 7.0), -1.0), 4.0, 3.0)
    assert line.vector_to(Point(5.0, 7.0)) == (0.0, 4.0)


def test_line_factories():
    ray = Line.ray(Point(1.0, 1.0), (1.0, 1.0))
    away = Line.through_point_away_from_origin(Point(0.0, 2.0))

    assert ray.is_coincident(Point(5.0, 5.0))
    assert away.is_coincident(Point(0.0, 2.0))
    _assert_proportional(away, Line(0.0, 1.0, -2.0))


def test_line_coincidence_ignores_positive_scale():
    line = Line(1.0, 2.0, 3.0)

    assert line.is_coincident(line.scale(4.0), tolerance=1e-12)
    assert not line.is_coincident(line.scale(-1.0))
    assert not line.is_coincident(Line(1.0, 2.0, 3.5))
    assert line.is_finite
    assert not Line.HORIZON.is_finite


def test_point_coincidence_is_cartesian():
    assert Point(1.0, 2.0).is_coincident(Point(2.0, 4.0, 2.0))
    assert Point(1.0, 2.0).is_coincident(Point(1.0 + 1e-7, 2.0), tolerance=1e-6)
    assert not Point(1.0, 2.0).is_coincident(Point(1.1, 2.0), tolerance=1e-6)


def test_point_algebra():
    p = Point(1.0, 2.0, 1.0)
    q = Point(3.0, -1.0, 2.0)

    assert p.add(q) == Point(4.0, 1.0, 3.0)
    assert p.subtract(q) == Point(-2.0, 3.0, -1.0)
    assert p.negate() == Point(-1.0, -2.0, -1.0)
    assert q.add_vector((1.0, 1.0)) == Point(5.0, 1.0, 2.0)
    assert q.subtract_vector((1.0, 1.0)) == Point(1.0, -3.0, 2.0)
    assert difference(q, p) == (0.5, -2.5)
    assert p.vector_to(q) == (0.5, -2.5)
    assert q.normalized() == Point(1.5, -0.5, 1.0)


def test_line_algebra():
    l1 = Line(1.0, 2.0, 3.0)
    l2 = Line(-1.0, 0.5, 2.0)

    assert l1.add(l2) == Line(0.0, 2.5, 5.0)
    assert l1.subtract(l2) == Line(2.0, 1.5, 1.0)
    assert l1.scale(2.0) == Line(2.0, 4.0, 6.0)
    assert l1.dot(Point(1.0, 1.0)) == Point(1.0, 1.0).dot(l1) == 6.0


def test_indexed_access_and_unpacking():
    point = Point(1.0, 2.0, 3.0)
    line = Line(4.0, 5.0, 6.0)

    assert [point[i] for i in range(3)] == [1.0, 2.0, 3.0]
    assert [line[i] for i in range(3)] == [4.0, 5.0, 6.0]
    x, y, w = point
    assert (x, y, w) == point.coords
    assert len(line) == 3


@pytest.mark.parametrize("index", [3, -1, 10])
def test_indexed_access_out_of_range(index):
    with pytest.raises(IndexError):
        Point(1.0, 2.0)[index]
    with pytest.raises(IndexError):
        Line(1.0, 2.0, 3.0)[index]


def test_values_are_immutable():
    point = Point(1.0, 2.0)

    with pytest.raises(AttributeError):
        point.x = 5.0


def test_textual_rendering():
    assert str(Line(1.0, -2.0, 3.5)) == "1*x + -2*y + 3.5 = 0"
    assert str(Line(0.0, 1.0, 0.0)) == "1*y = 0"
    assert str(Line.EMPTY) == "0 = 0"
    assert format(Line(1.0 / 3.0, 0.0, 1.0), ".2f") == "0.33*x + 1.00 = 0"
    assert str(Point(3.0, 1.0, 2.0)) == "Point(x=1.5, y=0.5)"
