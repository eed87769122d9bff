# melonsim

A small two-dimensional fruit-dropping physics playground. Round fruits fall
under gravity. They bounce off each other through impulse-based collision
resolution with positional bias, and four walls keep them inside an arena.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Running the viewer

```
melonsim
```

This opens a pygame window. The window draws the arena walls and the fruits.
The simulation runs at a fixed step of 1/1024 s. Stepping starts switched off,
so the simulation runs freely from the start.

| Input | Action |
| --- | ------ |
| Space | Drop a new fruit |
| Gamepad button 1 | Drop a new fruit |
| Left mouse click on a fruit | Remove that fruit |
| 4 | Turn stepping on, which pauses the simulation |
| 1 | While stepping is on, advance by one frame |
| 2 (hold) | While stepping is on, keep running while the key is held |
| 3 | Turn stepping off so that the simulation runs freely |

Options:

- `--scale N`: pixels per world unit (default 1.0).
- `--fps N`: frame rate limit (default 60).
- `--moon-physics`: no gravity or friction, fully elastic walls, and dropped
  fruits start with an initial velocity.

## Using the library

```python
from melonsim.world import World

world = World()
world.place_fruit()
for _ in range(100):
    impulses = world.step(1 / 60)
```

`World.step(dt)` runs one physics step. It applies gravity and friction when
moon physics is off, then integrates positions, resolves fruit collisions and
constrains the fruits to the walls. It returns the `ImpulseGizmoEvent`s that
were applied during the step. `World.remove_fruit(fruit)` raises `ValueError`
for a fruit that is not in the world.

The modules are:

- `melonsim.geometry`: `Vec2`, `from_angle`, `BoundingCircle`, `Aabb2d`,
  `Collider`, `bounding_circle` and `aabb2d`.
- `melonsim.fruit`: the `Fruit` class, `make_fruit` and `dropped_fruit`.
- `melonsim.physics`: `apply_gravity`, `apply_friction`, `integrate_position`
  and `apply_collisions`, with `resolve_collision` working on a `Contact`
  between two `Body` values.
- `melonsim.wall`: `WallLocation`, `Wall`, `make_wall`, `add_walls` and
  `constrain_objects`.
- `melonsim.world`: `Root`, `make_root` and `World`.
- `melonsim.debug_draw`: screen-space helpers `line_segment`,
  `collision_color`, `to_screen` and `wall_rect`.
- `melonsim.gamepad_vis`: `GamepadVis`, which holds the state of a gamepad
  display (pressed buttons, trigger values, stick positions and the
  connected-gamepads text), and `format_value`.
- `melonsim.app`: the viewer (`main`) and `Stepping`.

## What it does not do

The viewer draws only walls and fruits. It does not draw the velocity arrows,
impulse arrows or collision-count rings for which `melonsim.debug_draw`
provides geometry. `GamepadVis` keeps the display state, but nothing puts it
on screen. There is no scoring, no fruit merging and no sprite art.

## Tests

```
pytest
```