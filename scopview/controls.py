"""Keyboard driven state of the viewer: camera motion, wireframe and fading."""

from __future__ import annotations

import enum
from collections.abc import Container, Sequence
from dataclasses import dataclass

TRANS_SPEED = 0.025
MOVE_SPEED = 25.0

FOV_DEF = 45
WIDTH_DEF = 800
HEIGHT_DEF = 600


class Key(enum.Enum):
    """Keys the viewer reacts to."""

    ESCAPE = "escape"
    COMMA = "comma"
    T = "t"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    RIGHT_SHIFT = "right_shift"
    RIGHT_CONTROL = "right_control"


@dataclass
class RenderConfig:
    """Rendering settings changed by user input.

    ``fov`` is handed to the projection as an angle in radians.  The latch
    flags remember that a toggle key is held so that holding it toggles
    only once.
    """

    fov: float = FOV_DEF
    width: int = WIDTH_DEF
    height: int = HEIGHT_DEF
    wireframe: bool = False
    wireframe_latch: bool = False
    current_alpha: float = 0.0
    target_alpha: float = 0.0
    alpha_latch: bool = False


def update_wireframe(config: RenderConfig, pressed: bool) -> bool:
    """Toggle wireframe mode on a fresh press; return whether it toggled."""
    toggled = False
    if pressed and not config.wireframe_latch:
        config.wireframe_latch = True
        config.wireframe = not config.wireframe
        toggled = True
    if config.wireframe_latch and not pressed:
        config.wireframe_latch = False
    return toggled


def update_alpha(config: RenderConfig, pressed: bool) -> float:
    """Flip the target alpha on a fresh press and step the current alpha.

    The current alpha moves towards the target by ``TRANS_SPEED`` per call
    and never overshoots.  Returns the new current alpha.
    """
    if pressed and not config.alpha_latch:
        config.alpha_latch = True
        config.target_alpha = float(int(config.target_alpha + 1) % 2)
    elif config.alpha_latch and not pressed:
        config.alpha_latch = False
    if config.target_alpha > config.current_alpha:
        config.current_alpha = min(config.current_alpha + TRANS_SPEED, config.target_alpha)
    elif config.target_alpha < config.current_alpha:
        config.current_alpha = max(config.current_alpha - TRANS_SPEED, config.target_alpha)
    return config.current_alpha


_MOTION = {
    Key.LEFT: (0, -1.0),
    Key.RIGHT: (0, 1.0),
    Key.UP: (1, 1.0),
    Key.DOWN: (1, -1.0),
    Key.RIGHT_SHIFT: (2, 1.0),
    Key.RIGHT_CONTROL: (2, -1.0),
}


def process_input(
    pressed: Container[Key],
    camera_pos: Sequence[float],
    config: RenderConfig,
    delta_time: float,
) -> tuple[tuple[float, float, float], bool]:
    """Apply one frame of input.

    Returns the moved camera position and whether the viewer should close.
    """
    should_close = Key.ESCAPE in pressed
    update_wireframe(config, Key.COMMA in pressed)
    update_alpha(config, Key.T in pressed)
    position = [float(value) for value in camera_pos[:3]]
    step = MOVE_SPEED * delta_time
    for key, (axis, direction) in _MOTION.items():
        if key in pressed:
            position[axis] += direction * step
    return (position[0], position[1], position[2]), should_close