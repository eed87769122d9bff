"""The simulation world: root transform, walls, fruits and the physics step."""

from __future__ import annotations

from dataclasses import dataclass, field

from melonsim.fruit import FRUIT_DIAMETER, INITIAL_FRUIT_POSITIONS, Fruit, dropped_fruit, make_fruit
from melonsim.geometry import Vec2
from melonsim.physics import (
    ImpulseGizmoEvent,
    apply_collisions,
    apply_friction,
    apply_gravity,
    integrate_position,
)
from melonsim.wall import Wall, add_walls, constrain_objects

DESKTOP_FIXED_HZ = 64.0 * 16.0
HANDHELD_FIXED_HZ = 60.0
DESKTOP_ROOT_OFFSET = -110.0


@dataclass(frozen=True)
class Root:
    """The parent transform every game object hangs from."""

    name: str = "Root"
    translation: Vec2 = Vec2(0.0, 0.0)
    z: float = 1.0
    scale: Vec2 = Vec2(1.0, 1.0)


def make_root(desktop: bool = False) -> Root:
    """Root transform; on desktop it is shifted left and flipped vertically."""
    if desktop:
        return Root(translation=Vec2(DESKTOP_ROOT_OFFSET, 0.0), scale=Vec2(1.0, -1.0))
    return Root()


@dataclass
class World:
    """Holds all game objects and advances the fixed-step physics."""

    desktop: bool = False
    moon_physics: bool = False
    root: Root = field(init=False)
    walls: list[Wall] = field(init=False)
    fruits: list[Fruit] = field(init=False)
    impulses: list[ImpulseGizmoEvent] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.root = make_root(self.desktop)
        self.walls = add_walls()
        self.fruits = [
            make_fruit(position, diameter=FRUIT_DIAMETER) for position in INITIAL_FRUIT_POSITIONS
        ]

    @property
    def fixed_hz(self) -> float:
        return DESKTOP_FIXED_HZ if self.desktop else HANDHELD_FIXED_HZ

    def place_fruit(self) -> Fruit:
        """Drop a new fruit into the arena and return it."""
        fruit = dropped_fruit(self.moon_physics)
        self.fruits.append(fruit)
        return fruit

    def remove_fruit(self, fruit: Fruit) -> None:
        """Remove a fruit; raise ValueError if it is not in the world."""
        for index, existing in enumerate(self.fruits):
            if existing is fruit:
                del self.fruits[index]
                return
        raise ValueError("fruit is not in the world")

    def step(self, dt: float) -> list[ImpulseGizmoEvent]:
        """Run one physics step of ``dt`` seconds and return the impulses applied."""
        if not self.moon_physics:
            apply_gravity(self.fruits)
            apply_friction(self.fruits)
        integrate_position(self.fruits, dt)
        events = apply_collisions(self.fruits, dt)
        constrain_objects(self.fruits, self.moon_physics)
        self.impulses = events
        return events