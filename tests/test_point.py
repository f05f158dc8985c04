import math

import pytest

from mixedfrac.point import Point, distance


def test_default_is_origin():
    p = Point()
    assert (p.x, p.y) == (0, 0)


def test_single_argument_sets_x_only():
    p = Point(5)
    assert (p.x, p.y) == (5, 0)


def test_str_format():
    assert str(Point(2, 3)) == "X = 2\tY = 3"


def test_str_fractional_coordinates():
    assert str(Point(2.5, -1.25)) == "X = 2.5\tY = -1.25"


def test_distance_right_triangle():
    assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5.0)


@pytest.mark.parametrize(
    "a, b",
    [((2, 3), (7, 8)), ((-1, 4), (6, -2)), ((0.5, 0.5), (0.5, 0.5))],
)
def test_distance_symmetric_and_matches_function(a, b):
    pa, pb = Point(*a), Point(*b)
    assert pa.distance(pb) == pytest.approx(pb.distance(pa))
    assert distance(pa, pb) == pytest.approx(pa.distance(pb))
    assert distance(pa, pb) == pytest.approx(distance(pb, pa))


def test_distance_to_self_is_zero():
    p = Point(7, 8)
    assert p.distance(p) == 0


def test_distance_squared_relation():
    a, b = Point(2, 3), Point(7, 8)
    assert distance(a, b) ** 2 == pytest.approx(50.0)
    assert distance(a, b) == pytest.approx(math.sqrt(50))


def test_increment_mutates_and_returns_self():
    p = Point(2, 3)
    result = p.increment()
    assert result is p
    assert (p.x, p.y) == (3, 4)


def test_add_is_component_wise_and_leaves_operands():
    a, b = Point(1, 2), Point(3, 4)
    c = a + b
    assert c == Point(4, 6)
    assert a == Point(1, 2)
    assert b == Point(3, 4)


def test_add_origin_is_identity():
    a = Point(2.5, -7)
    assert a + Point() == a


def test_add_rejects_non_point():
    with pytest.raises(TypeError):
        Point(1, 2) + 3