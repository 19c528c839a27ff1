import math

import pytest

from csdkit.geometry import AnalyticalCircle, Circle, Point


def test_create_cartesian_keeps_coordinates():
    p = Point.create_cartesian(1.5, -2.0)
    assert (p.x, p.y) == (1.5, -2.0)


def test_create_polar_on_axis():
    p = Point.create_polar(2.0, 0.0)
    assert p.x == pytest.approx(2.0)
    assert p.y == pytest.approx(0.0)


def test_create_polar_distance_equals_radius():
    p = Point.create_polar(7.0, 1.1)
    assert p.distance() == pytest.approx(7.0)


def test_offset_two_arguments():
    p = Point.create_cartesian(1.0, 2.0)
    p.offset(3.0, -1.0)
    assert (p.x, p.y) == (4.0, 1.0)


def test_offset_single_argument_moves_both():
    p = Point.create_cartesian(1.0, 2.0)
    p.offset(2.0)
    assert (p.x, p.y) == (3.0, 4.0)


def test_distance_to_origin_matches_distance_to():
    p = Point.create_cartesian(3.0, 4.0)
    assert p.distance() == p.distance_to(0, 0)
    assert p.distance() == 5.0


def test_distance_is_symmetric():
    p = Point.create_cartesian(1.0, 2.0)
    q = Point.create_cartesian(-4.0, 7.5)
    assert p.distance(q) == pytest.approx(q.distance(p))
    assert p.distance(q) == pytest.approx(p.distance_to(q.x, q.y))


def test_getitem():
    p = Point.create_cartesian(8.0, 9.0)
    assert p[Point.X] == 8.0
    assert p[Point.Y] == 9.0


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        Point.create_cartesian(1.0, 1.0)[2]


def test_str_and_parse_round_trip():
    p = Point.create_cartesian(1.0, 2.5)
    assert str(p) == "(1, 2.5)"
    q = Point.parse("1 2.5")
    assert q == p


def test_parse_rejects_bad_input():
    with pytest.raises(ValueError):
        Point.parse("1")


def test_circle_negative_radius_made_positive():
    c = Circle(-2.5)
    assert c.radius == 2.5
    c.radius = -4
    assert c.radius == 4.0


def test_circle_unit_area_uses_source_pi():
    assert Circle(1).area() == 3.14


def test_circle_circumference_relation():
    c = Circle(3.0)
    assert c.circumference() / (2 * c.radius) == pytest.approx(c.area() / c.radius ** 2)


def test_circle_str():
    assert str(Circle(1)) == "Radius: 1, Area: 3.14, Circumference: 6.28"


def test_circle_parse_takes_absolute_value():
    assert Circle.parse("-2.5").radius == 2.5


def test_circle_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Circle.parse("abc")


def test_default_circle_is_zero():
    c = Circle()
    assert c.radius == 0.0
    assert c.area() == 0.0


def test_analytical_circle_defaults():
    c = AnalyticalCircle()
    assert (c.radius, c.x, c.y) == (0.0, 0.0, 0.0)


def test_analytical_circle_centre_and_radius():
    c = AnalyticalCircle(-3.0, 1.0, 2.0)
    assert c.radius == 3.0
    assert (c.x, c.y) == (1.0, 2.0)
    assert c.area() == Circle(3.0).area()


def test_analytical_circle_offset():
    c = AnalyticalCircle(1.0, 1.0, 2.0)
    c.offset(2.0, 3.0)
    assert (c.x, c.y) == (3.0, 5.0)
    c.offset(1.0)
    assert (c.x, c.y) == (4.0, 6.0)


def test_analytical_circle_setters():
    c = AnalyticalCircle(1.0)
    c.x = 5.0
    c.y = -5.0
    assert (c.x, c.y) == (5.0, -5.0)
    assert isinstance(c, Circle) and c.radius == 1.0


def test_polar_quarter_turn():
    p = Point.create_polar(2.0, math.pi / 2)
    assert p.x == pytest.approx(0.0, abs=1e-12)
    assert p.y == pytest.approx(2.0)