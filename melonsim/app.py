"""Desktop front end: window, fixed-step simulation and frame stepping."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field
from typing import Collection, Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from melonsim.debug_draw import wall_rect  # noqa: E402
from melonsim.fruit import Fruit  # noqa: E402
from melonsim.geometry import Vec2  # noqa: E402
from melonsim.world import World  # noqa: E402

WINDOW_SIZE = (1280, 720)
MAX_DELTA = 5.0
CLEAR_COLOR = (26, 26, 26)
WALL_COLOR = (89, 89, 89)
FRUIT_COLOR = (255, 0, 255)
EAST_BUTTON = 1

_STEP_KEYS = {pygame.K_1: "1", pygame.K_2: "2", pygame.K_3: "3", pygame.K_4: "4"}


@dataclass
class Stepping:
    """Frame stepping: when enabled, the simulation only runs on request."""

    enabled: bool = False
    _pending: bool = field(default=False, repr=False)

    def continue_frame(self) -> None:
        """Let the simulation run for one frame."""
        self._pending = True

    def enable(self) -> None:
        self.enabled = True
        self._pending = False

    def disable(self) -> None:
        self.enabled = False
        self._pending = False

    def should_run(self) -> bool:
        """Whether the simulation runs this frame; consumes a requested frame."""
        if not self.enabled:
            return True
        run, self._pending = self._pending, False
        return run


def _handle_stepping_keys(
    stepping: Stepping, just_pressed: Collection[str], held: Collection[str]
) -> None:
    # 1 steps one frame, holding 2 keeps stepping, 3 runs freely, 4 steps again.
    if "1" in just_pressed or "2" in held:
        stepping.continue_frame()
    elif "3" in just_pressed:
        stepping.disable()
    elif "4" in just_pressed:
        stepping.enable()


def _positive(text: str) -> float:
    value = float(text)
    if value <= 0.0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="melonsim", description="Drop fruits into a box.")
    parser.add_argument("--scale", type=_positive, default=1.0, help="pixels per world unit")
    parser.add_argument("--fps", type=_positive, default=60.0, help="frame rate limit")
    parser.add_argument("--moon-physics", action="store_true", help="no gravity, full bounce")
    return parser.parse_args(argv)


def _to_screen(world: World, position: Vec2, size: tuple[int, int], scale: float) -> Vec2:
    root = world.root
    x = root.translation.x + position.x * root.scale.x
    y = root.translation.y + position.y * root.scale.y
    return Vec2(size[0] / 2.0 + x * scale, size[1] / 2.0 - y * scale)


def _fruit_at(
    world: World, point: tuple[int, int], size: tuple[int, int], scale: float
) -> Optional[Fruit]:
    target = Vec2(float(point[0]), float(point[1]))
    for fruit in reversed(world.fruits):
        centre = _to_screen(world, fruit.position, size, scale)
        if centre.distance(target) <= fruit.diameter / 2.0 * scale:
            return fruit
    return None


def _draw(surface: "pygame.Surface", world: World, scale: float) -> None:
    size = surface.get_size()
    surface.fill(CLEAR_COLOR)
    for wall in world.walls:
        rect = wall_rect(wall.translation, wall.collider)
        centre = _to_screen(world, rect.center, size, scale)
        box = pygame.Rect(0, 0, max(1, round(rect.size.x * scale)), max(1, round(rect.size.y * scale)))
        box.center = (round(centre.x), round(centre.y))
        pygame.draw.rect(surface, WALL_COLOR, box)
    for fruit in world.fruits:
        centre = _to_screen(world, fruit.position, size, scale)
        radius = max(1, round(fruit.diameter / 2.0 * scale))
        pygame.draw.circle(surface, FRUIT_COLOR, (round(centre.x), round(centre.y)), radius)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("melonsim")
        clock = pygame.time.Clock()
        world = World(desktop=True, moon_physics=args.moon_physics)
        stepping = Stepping()
        step = 1.0 / world.fixed_hz
        accumulator = 0.0
        joysticks = {}
        running = True
        while running:
            dt = min(clock.tick(args.fps) / 1000.0, MAX_DELTA)
            just_pressed: set[str] = set()
            place = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in _STEP_KEYS:
                        just_pressed.add(_STEP_KEYS[event.key])
                    elif event.key == pygame.K_SPACE:
                        place = True
                elif event.type == pygame.JOYDEVICEADDED:
                    joystick = pygame.joystick.Joystick(event.device_index)
                    joysticks[joystick.get_instance_id()] = joystick
                elif event.type == pygame.JOYDEVICEREMOVED:
                    joysticks.pop(event.instance_id, None)
                elif event.type == pygame.JOYBUTTONDOWN and event.button == EAST_BUTTON:
                    place = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    fruit = _fruit_at(world, event.pos, screen.get_size(), args.scale)
                    if fruit is not None:
                        world.remove_fruit(fruit)
            keys = pygame.key.get_pressed()
            held = {name for key, name in _STEP_KEYS.items() if keys[key]}
            _handle_stepping_keys(stepping, just_pressed, held)

            accumulator += dt
            if stepping.should_run():
                while accumulator >= step:
                    world.step(step)
                    accumulator -= step
            else:
                accumulator = 0.0

            if place:
                world.place_fruit()

            _draw(screen, world, args.scale)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())