"""Two-dimensional vectors and bounding volumes used by the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

_NORMALIZED_TOLERANCE = 2e-4


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec2:
        return cls(value, value)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vec2, float]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def normalize(self) -> Vec2:
        """Return the unit vector pointing the same way; raise for a zero vector."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize vector {self}")
        return self / length

    def is_normalized(self) -> bool:
        return abs(self.length_squared() - 1.0) <= _NORMALIZED_TOLERANCE


ZERO = Vec2(0.0, 0.0)


def from_angle(angle: float) -> Vec2:
    """Unit vector at ``angle`` radians from the positive x axis."""
    return Vec2(math.cos(angle), math.sin(angle))


@dataclass(frozen=True)
class BoundingCircle:
    """A circle given by its centre and radius."""

    center: Vec2
    radius: float

    def intersects(self, other: BoundingCircle) -> bool:
        """True when the circles overlap or touch."""
        reach = self.radius + other.radius
        return (self.center - other.center).length_squared() <= reach * reach


@dataclass(frozen=True)
class Aabb2d:
    """An axis-aligned box given by its corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_center(cls, center: Vec2, half_size: Vec2) -> Aabb2d:
        return cls(center - half_size, center + half_size)

    @property
    def center(self) -> Vec2:
        return (self.min + self.max) / 2.0

    @property
    def half_size(self) -> Vec2:
        return (self.max - self.min) / 2.0


@dataclass(frozen=True)
class Collider:
    """A rectangular collision shape described by its half extents."""

    half_size: Vec2


def bounding_circle(diameter: float, translation: Vec2) -> BoundingCircle:
    """Circle for an object whose translation is its top-left corner."""
    radius = diameter / 2.0
    return BoundingCircle(translation + Vec2.splat(radius), radius)


def aabb2d(translation: Vec2, collider: Collider) -> Aabb2d:
    """Box for a collider whose translation is its top-left corner."""
    return Aabb2d.from_center(translation + collider.half_size, collider.half_size)