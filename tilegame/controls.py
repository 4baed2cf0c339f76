"""Keyboard and touch input turned into movement, and camera controls."""

from __future__ import annotations

from collections.abc import Container, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tilegame.geometry import Vec2

FOLLOW_EPSILON = 5.0

_CAMERA_SPEED = 500.0
_ZOOM_STEP = 0.1
_MIN_SCALE = 0.5
_LINE_SCROLL_FACTOR = 0.1
_PIXEL_SCROLL_FACTOR = 0.01


class GameControl(Enum):
    """A direction the player can steer in, with its two key bindings."""

    UP = ("KeyW", "ArrowUp")
    DOWN = ("KeyS", "ArrowDown")
    LEFT = ("KeyA", "ArrowLeft")
    RIGHT = ("KeyD", "ArrowRight")

    def pressed(self, keys: Container[str]) -> bool:
        """True if any key bound to this control is among the pressed ``keys``."""
        return any(key in keys for key in self.value)


def get_movement(control: GameControl, keys: Container[str]) -> float:
    return 1.0 if control.pressed(keys) else 0.0


@dataclass
class Actions:
    """The player's requested movement, a unit vector or None."""

    player_movement: Optional[Vec2] = None


def movement_vector(
    keys: Container[str],
    touch_position: Optional[Vec2] = None,
    player_position: Optional[Vec2] = None,
) -> Optional[Vec2]:
    """Normalised movement from keys, overridden by a touch far enough away."""
    movement = Vec2(
        get_movement(GameControl.RIGHT, keys) - get_movement(GameControl.LEFT, keys),
        get_movement(GameControl.UP, keys) - get_movement(GameControl.DOWN, keys),
    )

    if touch_position is not None:
        if player_position is None:
            raise ValueError("a touch needs the player's position")
        diff = touch_position - player_position
        if diff.length() > FOLLOW_EPSILON:
            movement = diff.normalize()

    if movement == Vec2(0.0, 0.0):
        return None
    return movement.normalize()


def set_movement_actions(
    actions: Actions,
    keys: Container[str],
    touch_position: Optional[Vec2] = None,
    player_position: Optional[Vec2] = None,
) -> None:
    """Store the current movement request in ``actions``."""
    actions.player_movement = movement_vector(keys, touch_position, player_position)


class ScrollUnit(Enum):
    LINE = "line"
    PIXEL = "pixel"


@dataclass(frozen=True)
class MouseWheel:
    unit: ScrollUnit
    y: float
    x: float = 0.0


@dataclass
class Camera:
    """An orthographic camera: position, depth and zoom scale."""

    position: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    z: float = 0.0
    scale: float = 1.0


def camera_movement(camera: Camera, keys: Container[str], delta_secs: float) -> None:
    """Pan with WASD and zoom with Z/X; the scale never drops below 0.5."""
    dx = (1.0 if "KeyD" in keys else 0.0) - (1.0 if "KeyA" in keys else 0.0)
    dy = (1.0 if "KeyW" in keys else 0.0) - (1.0 if "KeyS" in keys else 0.0)

    if "KeyZ" in keys:
        camera.scale += _ZOOM_STEP
    if "KeyX" in keys:
        camera.scale -= _ZOOM_STEP
    camera.scale = max(camera.scale, _MIN_SCALE)

    camera.position = camera.position + Vec2(dx, dy) * (delta_secs * _CAMERA_SPEED)


def zoom_scroll(camera: Camera, events: Iterable[MouseWheel]) -> None:
    """Change the camera scale by each mouse-wheel event in turn."""
    for event in events:
        if event.unit is ScrollUnit.LINE:
            camera.scale += event.y * _LINE_SCROLL_FACTOR
        else:
            camera.scale += event.y * _PIXEL_SCROLL_FACTOR