"""Forces, integration and collision response for fruits."""

from __future__ import annotations

import enum
import itertools
import math
from dataclasses import dataclass
from typing import Iterable

from melonsim.fruit import Fruit
from melonsim.geometry import ZERO, Vec2, bounding_circle, from_angle

ELASTICITY = 0.7
MASS = 16.0
INV_MASS = 1.0 / MASS
GRAVITY_STEP = 0.4
TERMINAL_VELOCITY = 20.0
FRICTION_COEFFICIENT = 0.9
BIAS_FACTOR = 0.2


@dataclass(frozen=True)
class Body:
    """The properties of one side of a contact."""

    restitution: float
    velocity: Vec2
    inverse_mass: float


@dataclass(frozen=True)
class Contact:
    """Two bodies touching along a unit normal pointing from ``a`` to ``b``."""

    normal: Vec2
    a: Body
    b: Body


class Collision(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class ImpulseGizmoEvent:
    """An impulse applied to a body at a position, for debug drawing."""

    pos: Vec2
    imp: Vec2
    mass: float


def resolve_collision(contact: Contact) -> Vec2:
    """Impulse to add to body ``a`` (and subtract from ``b``) for a linear collision."""
    if not contact.normal.is_normalized():
        raise ValueError("A normalized normal vector is needed.")
    a, b = contact.a, contact.b
    e = min(a.restitution, b.restitution)
    if not 0.0 <= e <= 1.0:
        raise ValueError(f"coefficient of restitution {e} is outside [0, 1]")
    rel_v = a.velocity - b.velocity
    impulse_mag = -(1.0 + e) * rel_v.dot(contact.normal) / (a.inverse_mass + b.inverse_mass)
    return contact.normal * impulse_mag


def apply_gravity(fruits: Iterable[Fruit]) -> None:
    """Add a gravity step to every fruit subject to gravity."""
    for fruit in fruits:
        if not fruit.gravity:
            continue
        forces = fruit.acting_forces
        y = min(max(forces.y + GRAVITY_STEP, -TERMINAL_VELOCITY), TERMINAL_VELOCITY)
        fruit.acting_forces = Vec2(forces.x, y)


def apply_friction(fruits: Iterable[Fruit]) -> None:
    """Damp the accumulated forces of every fruit."""
    for fruit in fruits:
        fruit.acting_forces = fruit.acting_forces * FRICTION_COEFFICIENT


def integrate_position(fruits: Iterable[Fruit], dt: float) -> None:
    """Semi-implicit Euler step: apply forces to velocity, then move."""
    for fruit in fruits:
        acceleration = fruit.acting_forces
        fruit.acting_forces = ZERO
        fruit.velocity = fruit.velocity + acceleration
        fruit.position = fruit.position + fruit.velocity * dt


def apply_collisions(fruits: Iterable[Fruit], dt: float) -> list[ImpulseGizmoEvent]:
    """Resolve every overlapping pair of fruits and return the applied impulses."""
    if dt <= 0.0:
        raise ValueError("time step must be positive")
    events: list[ImpulseGizmoEvent] = []
    physical = [fruit for fruit in fruits if fruit.physics]
    for a, b in itertools.combinations(physical, 2):
        a_bound = bounding_circle(a.diameter, a.position)
        b_bound = bounding_circle(b.diameter, b.position)
        if not a_bound.intersects(b_bound):
            continue

        a.collided += 1
        b.collided += 1

        offset = b.position - a.position
        normal = from_angle(math.atan2(offset.y, offset.x)).normalize()

        moving_away = (b.velocity - a.velocity).dot(offset) > 0.0
        if moving_away:
            continue

        impulse = resolve_collision(
            Contact(
                normal=normal,
                a=Body(ELASTICITY, a.velocity, INV_MASS),
                b=Body(ELASTICITY, b.velocity, INV_MASS),
            )
        )

        # Baumgarte stabilisation
        penetration_depth = (a.position - b.position).length() - (a.diameter + b.diameter) / 2.0
        bias = (BIAS_FACTOR / dt) * max(abs(penetration_depth), 0.0)

        events.append(ImpulseGizmoEvent(a.position, impulse, MASS))
        events.append(ImpulseGizmoEvent(b.position, -impulse, MASS))

        change = (impulse + Vec2.splat(bias)) / MASS
        a.velocity = a.velocity + change
        b.velocity = b.velocity - change
    return events