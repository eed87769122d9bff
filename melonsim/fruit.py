"""Fruit objects that fall, collide and bounce inside the arena."""

from __future__ import annotations

from dataclasses import dataclass, field

from melonsim.geometry import ZERO, Vec2

FRUIT_DIAMETER = 16.0
DROP_POSITION = Vec2(100.0, 0.0)
MOON_DROP_VELOCITY = Vec2(0.7, 10.0)
INITIAL_FRUIT_POSITIONS: tuple[Vec2, ...] = ()


@dataclass(eq=False)
class Fruit:
    """A single fruit; ``position`` is its top-left corner."""

    position: Vec2 = ZERO
    velocity: Vec2 = ZERO
    acting_forces: Vec2 = ZERO
    diameter: float = FRUIT_DIAMETER
    collided: int = 0
    gravity: bool = True
    physics: bool = field(default=True)


def make_fruit(
    position: Vec2, velocity: Vec2 = ZERO, diameter: float = FRUIT_DIAMETER
) -> Fruit:
    """Create a fruit at rest with no forces acting on it yet."""
    return Fruit(position=position, velocity=velocity, diameter=diameter)


def dropped_fruit(moon_physics: bool = False) -> Fruit:
    """Create the fruit dropped in by the player."""
    velocity = MOON_DROP_VELOCITY if moon_physics else ZERO
    return make_fruit(DROP_POSITION, velocity, FRUIT_DIAMETER)