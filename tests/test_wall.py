import pytest

from melonsim import wall
from melonsim.fruit import make_fruit
from melonsim.geometry import Vec2
from melonsim.wall import (
    WallLocation,
    add_walls,
    constrain_objects,
    make_wall,
)


def test_positions_follow_constants():
    assert WallLocation.LEFT.position() == Vec2(wall.LEFT_WALL, 0.0)
    assert WallLocation.RIGHT.position() == Vec2(wall.RIGHT_WALL, 0.0)
    assert WallLocation.BOTTOM.position() == Vec2(0.0, wall.BOTTOM_WALL)
    assert WallLocation.TOP.position() == Vec2(0.0, wall.TOP_WALL)


def test_vertical_walls_are_thin_and_tall():
    for location in (WallLocation.LEFT, WallLocation.RIGHT):
        size = location.size()
        assert size.x == wall.WALL_THICKNESS
        assert size.y == wall.BOTTOM_WALL - wall.TOP_WALL + wall.WALL_THICKNESS


def test_horizontal_walls_are_wide_and_thin():
    for location in (WallLocation.BOTTOM, WallLocation.TOP):
        size = location.size()
        assert size.y == wall.WALL_THICKNESS
        assert size.x == wall.RIGHT_WALL - wall.LEFT_WALL + wall.WALL_THICKNESS


def test_make_wall_uses_half_size():
    built = make_wall(WallLocation.BOTTOM)
    assert built.location is WallLocation.BOTTOM
    assert built.translation == WallLocation.BOTTOM.position()
    assert built.collider.half_size * 2.0 == WallLocation.BOTTOM.size()
    assert built.physics is True


def test_add_walls_order():
    walls = add_walls()
    assert [w.location for w in walls] == [
        WallLocation.LEFT,
        WallLocation.RIGHT,
        WallLocation.BOTTOM,
        WallLocation.TOP,
    ]


def test_fruit_inside_is_untouched():
    fruit = make_fruit(Vec2(100.0, 50.0), Vec2(3.0, -4.0))
    constrain_objects([fruit])
    assert fruit.position == Vec2(100.0, 50.0)
    assert fruit.velocity == Vec2(3.0, -4.0)


def test_fruit_past_left_wall_is_clamped_and_bounces():
    fruit = make_fruit(Vec2(10.0, 50.0), Vec2(-10.0, 2.0))
    constrain_objects([fruit])
    assert fruit.position.x == wall.LEFT_WALL
    assert fruit.position.y == 50.0
    assert 0.0 < fruit.velocity.x < 10.0
    assert fruit.velocity.y == 2.0


def test_fruit_past_bottom_is_clamped_to_diameter():
    fruit = make_fruit(Vec2(100.0, 500.0), Vec2(0.0, 30.0))
    constrain_objects([fruit])
    assert fruit.position.y == wall.BOTTOM_WALL - fruit.diameter
    assert fruit.velocity.y < 0.0
    assert abs(fruit.velocity.y) < 30.0


def test_moon_physics_reflects_fully():
    fruit = make_fruit(Vec2(1000.0, -5.0), Vec2(10.0, -7.0))
    constrain_objects([fruit], moon_physics=True)
    assert fruit.position == Vec2(wall.RIGHT_WALL - fruit.diameter, wall.TOP_WALL)
    assert fruit.velocity == Vec2(-10.0, 7.0)


def test_oversized_fruit_raises():
    fruit = make_fruit(Vec2(100.0, 50.0), diameter=1000.0)
    with pytest.raises(ValueError):
        constrain_objects([fruit])