import math

import pytest

from melonsim.geometry import (
    Aabb2d,
    BoundingCircle,
    Collider,
    Vec2,
    aabb2d,
    bounding_circle,
    from_angle,
)


def test_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 7.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert (a * 4.0) / 4.0 == a


def test_dot_is_symmetric_and_matches_length():
    a = Vec2(3.0, -1.0)
    b = Vec2(-2.0, 5.0)
    assert a.dot(b) == b.dot(a)
    assert math.isclose(a.dot(a), a.length() ** 2)


def test_length_of_pythagorean_vector():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_distance_is_symmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(-4.0, 6.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


@pytest.mark.parametrize("vec", [Vec2(3.0, 4.0), Vec2(-0.1, 0.0), Vec2(100.0, -7.5)])
def test_normalize_gives_unit_vector(vec):
    unit = vec.normalize()
    assert unit.is_normalized()
    assert unit.dot(vec) == pytest.approx(vec.length())


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_is_normalized_rejects_long_vector():
    assert not Vec2(2.0, 0.0).is_normalized()


@pytest.mark.parametrize("angle", [0.0, 0.5, math.pi, -2.0])
def test_from_angle_is_unit(angle):
    vec = from_angle(angle)
    assert vec.is_normalized()
    assert math.atan2(vec.y, vec.x) == pytest.approx(math.atan2(math.sin(angle), math.cos(angle)))


def test_circles_touching_intersect():
    a = BoundingCircle(Vec2(0.0, 0.0), 2.0)
    b = BoundingCircle(Vec2(4.0, 0.0), 2.0)
    assert a.intersects(b)
    assert b.intersects(a)


def test_circles_apart_do_not_intersect():
    a = BoundingCircle(Vec2(0.0, 0.0), 2.0)
    b = BoundingCircle(Vec2(4.5, 0.0), 2.0)
    assert not a.intersects(b)


def test_bounding_circle_offsets_by_radius():
    circle = bounding_circle(16.0, Vec2(10.0, 20.0))
    assert circle.radius == 16.0 / 2
    assert circle.center == Vec2(10.0 + 16.0 / 2, 20.0 + 16.0 / 2)


def test_aabb2d_from_collider():
    collider = Collider(Vec2(2.0, 3.0))
    box = aabb2d(Vec2(1.0, 1.0), collider)
    assert box.half_size == collider.half_size
    assert box.min == Vec2(1.0, 1.0)
    assert box.center == Vec2(1.0, 1.0) + collider.half_size


def test_aabb_from_center_round_trip():
    box = Aabb2d.from_center(Vec2(5.0, -5.0), Vec2(1.0, 2.0))
    assert box.center == Vec2(5.0, -5.0)
    assert box.half_size == Vec2(1.0, 2.0)