"""State of an on-screen gamepad visualiser: buttons, triggers, sticks and connections."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Optional

from melonsim.geometry import Vec2

BUTTON_RADIUS = 25.0
BUTTON_CLUSTER_RADIUS = 50.0
START_SIZE = Vec2(30.0, 15.0)
TRIGGER_SIZE = Vec2(70.0, 20.0)
STICK_BOUNDS_SIZE = 100.0

BUTTONS_X = 150.0
BUTTONS_Y = 80.0
STICKS_X = 150.0
STICKS_Y = -135.0

NORMAL_BUTTON_COLOR = (0.3, 0.3, 0.3)
ACTIVE_BUTTON_COLOR = (0.5, 0.0, 0.5)
LIVE_COLOR = (0.4, 0.4, 0.4)
DEAD_COLOR = (0.13, 0.13, 0.13)

CONNECTED_HEADER = "Connected Gamepads:\n"
NO_GAMEPADS = "None"


class GamepadButton(enum.Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    SELECT = "select"
    START = "start"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"
    LEFT_TRIGGER = "left_trigger"
    RIGHT_TRIGGER = "right_trigger"
    LEFT_TRIGGER2 = "left_trigger2"
    RIGHT_TRIGGER2 = "right_trigger2"
    LEFT_THUMB = "left_thumb"
    RIGHT_THUMB = "right_thumb"


class GamepadAxis(enum.Enum):
    LEFT_STICK_X = "left_stick_x"
    LEFT_STICK_Y = "left_stick_y"
    LEFT_Z = "left_z"
    RIGHT_STICK_X = "right_stick_x"
    RIGHT_STICK_Y = "right_stick_y"
    RIGHT_Z = "right_z"


class Shape(enum.Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    START_PAUSE = "start_pause"
    TRIGGER = "trigger"


class Stick(enum.Enum):
    """An analogue stick, its two axes, its thumb button and where it is drawn."""

    LEFT = (GamepadAxis.LEFT_STICK_X, GamepadAxis.LEFT_STICK_Y, GamepadButton.LEFT_THUMB, -STICKS_X)
    RIGHT = (GamepadAxis.RIGHT_STICK_X, GamepadAxis.RIGHT_STICK_Y, GamepadButton.RIGHT_THUMB, STICKS_X)

    @property
    def x_axis(self) -> GamepadAxis:
        return self.value[0]

    @property
    def y_axis(self) -> GamepadAxis:
        return self.value[1]

    @property
    def button(self) -> GamepadButton:
        return self.value[2]

    @property
    def center(self) -> Vec2:
        return Vec2(self.value[3], STICKS_Y)


@dataclass(frozen=True)
class ButtonSpot:
    """Where a button is drawn, with which shape and rotation."""

    position: Vec2
    shape: Shape
    rotation: float = 0.0


BUTTON_LAYOUT: dict[GamepadButton, ButtonSpot] = {
    GamepadButton.NORTH: ButtonSpot(Vec2(BUTTONS_X, BUTTONS_Y + BUTTON_CLUSTER_RADIUS), Shape.CIRCLE),
    GamepadButton.SOUTH: ButtonSpot(Vec2(BUTTONS_X, BUTTONS_Y - BUTTON_CLUSTER_RADIUS), Shape.CIRCLE),
    GamepadButton.WEST: ButtonSpot(Vec2(BUTTONS_X - BUTTON_CLUSTER_RADIUS, BUTTONS_Y), Shape.CIRCLE),
    GamepadButton.EAST: ButtonSpot(Vec2(BUTTONS_X + BUTTON_CLUSTER_RADIUS, BUTTONS_Y), Shape.CIRCLE),
    GamepadButton.SELECT: ButtonSpot(Vec2(-30.0, BUTTONS_Y), Shape.START_PAUSE),
    GamepadButton.START: ButtonSpot(Vec2(30.0, BUTTONS_Y), Shape.START_PAUSE),
    GamepadButton.DPAD_UP: ButtonSpot(
        Vec2(-BUTTONS_X, BUTTONS_Y + BUTTON_CLUSTER_RADIUS), Shape.TRIANGLE
    ),
    GamepadButton.DPAD_DOWN: ButtonSpot(
        Vec2(-BUTTONS_X, BUTTONS_Y - BUTTON_CLUSTER_RADIUS), Shape.TRIANGLE, math.pi
    ),
    GamepadButton.DPAD_LEFT: ButtonSpot(
        Vec2(-BUTTONS_X - BUTTON_CLUSTER_RADIUS, BUTTONS_Y), Shape.TRIANGLE, math.pi / 2.0
    ),
    GamepadButton.DPAD_RIGHT: ButtonSpot(
        Vec2(-BUTTONS_X + BUTTON_CLUSTER_RADIUS, BUTTONS_Y), Shape.TRIANGLE, -math.pi / 2.0
    ),
    GamepadButton.LEFT_TRIGGER: ButtonSpot(Vec2(-BUTTONS_X, BUTTONS_Y + 115.0), Shape.TRIGGER),
    GamepadButton.RIGHT_TRIGGER: ButtonSpot(Vec2(BUTTONS_X, BUTTONS_Y + 115.0), Shape.TRIGGER),
    GamepadButton.LEFT_TRIGGER2: ButtonSpot(Vec2(-BUTTONS_X, BUTTONS_Y + 145.0), Shape.TRIGGER),
    GamepadButton.RIGHT_TRIGGER2: ButtonSpot(Vec2(BUTTONS_X, BUTTONS_Y + 145.0), Shape.TRIGGER),
    GamepadButton.LEFT_THUMB: ButtonSpot(Stick.LEFT.center, Shape.CIRCLE),
    GamepadButton.RIGHT_THUMB: ButtonSpot(Stick.RIGHT.center, Shape.CIRCLE),
}

VALUE_BUTTONS = (GamepadButton.LEFT_TRIGGER2, GamepadButton.RIGHT_TRIGGER2)


def format_value(value: float) -> str:
    """Format an analogue value with three decimals."""
    return f"{value:.3f}"


class GamepadVis:
    """Tracks what the visualiser shows for the current gamepad input."""

    def __init__(self) -> None:
        self._active: set[GamepadButton] = set()
        self._values: dict[GamepadButton, float] = {button: 0.0 for button in VALUE_BUTTONS}
        self._axes: dict[GamepadAxis, float] = {axis: 0.0 for axis in GamepadAxis}

    def press(self, button: GamepadButton) -> None:
        """Show ``button`` in the active colour."""
        self._active.add(button)

    def release(self, button: GamepadButton) -> None:
        """Show ``button`` in the normal colour."""
        self._active.discard(button)

    def is_active(self, button: GamepadButton) -> bool:
        return button in self._active

    def color(self, button: GamepadButton) -> tuple[float, float, float]:
        return ACTIVE_BUTTON_COLOR if self.is_active(button) else NORMAL_BUTTON_COLOR

    def set_button_value(self, button: GamepadButton, value: float) -> Optional[str]:
        """Record an analogue button value; return its new label, or None if it has none."""
        if button not in self._values:
            return None
        self._values[button] = value
        return format_value(value)

    def set_axis(self, axis: GamepadAxis, value: float) -> None:
        self._axes[axis] = value

    def stick_position(self, stick: Stick) -> Vec2:
        """Offset of the stick marker from the centre of its bounds."""
        return Vec2(
            self._axes[stick.x_axis] * STICK_BOUNDS_SIZE,
            self._axes[stick.y_axis] * STICK_BOUNDS_SIZE,
        )

    def axis_text(self, stick: Stick) -> str:
        """Label above a stick showing both axis values."""
        x = format_value(self._axes[stick.x_axis])
        y = format_value(self._axes[stick.y_axis])
        return f"{x}, {y}"

    def connected_text(self, gamepads: Iterable[tuple[object, str]]) -> str:
        """Text listing connected gamepads given as ``(entity, name)`` pairs."""
        formatted = "\n".join(f"{entity} - {name}" for entity, name in gamepads)
        return CONNECTED_HEADER + (formatted or NO_GAMEPADS)