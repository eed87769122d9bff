"""The arena walls and the constraint that keeps fruits inside them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from melonsim.fruit import Fruit
from melonsim.geometry import Collider, Vec2

WALL_THICKNESS = 1.0
LEFT_WALL = 62.0
RIGHT_WALL = 179.0 - WALL_THICKNESS
# y coordinates
BOTTOM_WALL = 148.0 - WALL_THICKNESS
TOP_WALL = 0.0

WALL_RESTITUTION = -0.2
MOON_WALL_RESTITUTION = -1.0


class WallLocation(enum.Enum):
    """Which side of the arena a wall is on."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"

    def position(self) -> Vec2:
        """Location of the wall's anchor point."""
        if self is WallLocation.LEFT:
            return Vec2(LEFT_WALL, 0.0)
        if self is WallLocation.RIGHT:
            return Vec2(RIGHT_WALL, 0.0)
        if self is WallLocation.BOTTOM:
            return Vec2(0.0, BOTTOM_WALL)
        return Vec2(0.0, TOP_WALL)

    def size(self) -> Vec2:
        """Width and height of the wall."""
        arena_height = BOTTOM_WALL - TOP_WALL
        arena_width = RIGHT_WALL - LEFT_WALL
        if self in (WallLocation.LEFT, WallLocation.RIGHT):
            return Vec2(WALL_THICKNESS, arena_height + WALL_THICKNESS)
        return Vec2(arena_width + WALL_THICKNESS, WALL_THICKNESS)


@dataclass(frozen=True)
class Wall:
    """A static wall with its position and collision box."""

    location: WallLocation
    translation: Vec2
    collider: Collider
    physics: bool = True


def make_wall(location: WallLocation) -> Wall:
    """Build the wall for one side of the arena."""
    return Wall(
        location=location,
        translation=location.position(),
        collider=Collider(half_size=location.size() / 2.0),
    )


def add_walls() -> list[Wall]:
    """All four arena walls: left, right, bottom, top."""
    return [
        make_wall(WallLocation.LEFT),
        make_wall(WallLocation.RIGHT),
        make_wall(WallLocation.BOTTOM),
        make_wall(WallLocation.TOP),
    ]


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def constrain_objects(fruits: Iterable[Fruit], moon_physics: bool = False) -> None:
    """Keep fruits inside the arena, reflecting and damping velocity on contact."""
    restitution = MOON_WALL_RESTITUTION if moon_physics else WALL_RESTITUTION
    for fruit in fruits:
        x_max = RIGHT_WALL - fruit.diameter
        y_max = BOTTOM_WALL - fruit.diameter
        if x_max < LEFT_WALL or y_max < TOP_WALL:
            raise ValueError(f"fruit of diameter {fruit.diameter} does not fit the arena")

        x, y = fruit.position
        vx, vy = fruit.velocity
        clamped_x = _clamp(x, LEFT_WALL, x_max)
        clamped_y = _clamp(y, TOP_WALL, y_max)
        if clamped_x != x:
            vx *= restitution
        if clamped_y != y:
            vy *= restitution

        fruit.velocity = Vec2(vx, vy)
        fruit.position = Vec2(clamped_x, clamped_y)