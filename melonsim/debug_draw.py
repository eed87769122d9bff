"""Geometry helpers for drawing debug overlays in screen space."""

from __future__ import annotations

import math
from dataclasses import dataclass

from melonsim.geometry import Collider, Vec2

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
ORANGE_RED: Color = (255, 69, 0)
YELLOW: Color = (255, 255, 0)
GREEN: Color = (0, 128, 0)
BLUE: Color = (0, 0, 255)
PURPLE: Color = (128, 0, 128)
HOT_PINK: Color = (255, 105, 180)

RAINBOW: tuple[Color, ...] = (RED, ORANGE_RED, YELLOW, GREEN, BLUE, PURPLE, HOT_PINK)

MIRROR_Y = Vec2(1.0, -1.0)
CAMERA_OFFSET = Vec2(-110.0, 0.0)

_HORIZONTAL_WALL_OFFSET = Vec2(120.0 - 8.0, 0.0 - 8.0)
_VERTICAL_WALL_OFFSET = Vec2(0.0 - 8.0, 74.0 - 8.0)


@dataclass(frozen=True)
class Segment:
    """A rotated rectangle standing in for a thick line."""

    center: Vec2
    size: Vec2
    rotation: float


@dataclass(frozen=True)
class WallRect:
    """Where and how large to draw a wall."""

    center: Vec2
    size: Vec2


def line_segment(start: Vec2, end: Vec2, thickness: float) -> Segment:
    """Rectangle of the given thickness spanning ``start`` to ``end``."""
    length = start.distance(end)
    diff = start - end
    theta = math.atan2(diff.y, diff.x)
    midpoint = (start + end) / 2.0
    return Segment(center=midpoint, size=Vec2(length, thickness), rotation=theta)


def collision_color(count: int) -> Color:
    """Colour cycling through the rainbow with the number of collisions."""
    if count < 0:
        raise ValueError("collision count cannot be negative")
    return RAINBOW[count % len(RAINBOW)]


def to_screen(position: Vec2) -> Vec2:
    """Map a world position onto the mirrored, offset desktop view."""
    return position * MIRROR_Y + CAMERA_OFFSET


def wall_rect(translation: Vec2, collider: Collider) -> WallRect:
    """Rectangle used to display a wall with the given collider."""
    horizontal = collider.half_size.y < collider.half_size.x
    offset = _HORIZONTAL_WALL_OFFSET if horizontal else _VERTICAL_WALL_OFFSET
    return WallRect(center=translation + offset, size=collider.half_size * 2.0)