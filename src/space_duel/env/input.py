"""
Keyboard mapping for the two crafts.

Movement is level-triggered from the held-key map; firing is
edge-triggered from key-down events and handled by the combat module.
"""

from dataclasses import dataclass
from typing import Mapping, Tuple

import pygame

from space_duel.core.config import GameConfig
from space_duel.core.constants import Side

from .craft import Craft


@dataclass(frozen=True)
class Controls:
    up: int
    down: int
    left: int
    right: int
    fire: int

    @property
    def keys(self) -> frozenset[int]:
        return frozenset((self.up, self.down, self.left, self.right, self.fire))


DEFAULT_CONTROLS = {
    Side.YELLOW: Controls(
        up=pygame.K_w, down=pygame.K_s, left=pygame.K_a, right=pygame.K_d, fire=pygame.K_f
    ),
    Side.RED: Controls(
        up=pygame.K_UP,
        down=pygame.K_DOWN,
        left=pygame.K_LEFT,
        right=pygame.K_RIGHT,
        fire=pygame.K_m,
    ),
}


@dataclass(frozen=True)
class Bounds:
    """Inclusive range of valid top-left positions for a craft."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def movement_bounds(side: Side, config: GameConfig) -> Bounds:
    """Each craft is confined to its own half of the arena."""
    half_border = config.border_width / 2
    max_y = config.height - config.craft_height

    if side is Side.YELLOW:
        return Bounds(
            min_x=0.0,
            max_x=config.half_width - half_border - config.craft_width,
            min_y=0.0,
            max_y=max_y,
        )
    return Bounds(
        min_x=config.half_width + half_border,
        max_x=config.width - config.craft_width,
        min_y=0.0,
        max_y=max_y,
    )


def movement_delta(
    held_keys: Mapping[int, bool], controls: Controls, velocity: float
) -> Tuple[float, float]:
    """
    Raw per-tick movement requested by the held keys.

    Axes are independent, so diagonals move the full velocity on both.
    Opposing keys cancel out.
    """
    dx = 0.0
    dy = 0.0
    if held_keys.get(controls.left, False):
        dx -= velocity
    if held_keys.get(controls.right, False):
        dx += velocity
    if held_keys.get(controls.up, False):
        dy -= velocity
    if held_keys.get(controls.down, False):
        dy += velocity
    return dx, dy


def apply_movement(
    craft: Craft, held_keys: Mapping[int, bool], controls: Controls, bounds: Bounds
) -> None:
    """Move `craft` along each axis whose move keeps it inside `bounds`."""
    dx, dy = movement_delta(held_keys, controls, craft.config.velocity)

    if dx and not bounds.min_x <= craft.x + dx <= bounds.max_x:
        dx = 0.0
    if dy and not bounds.min_y <= craft.y + dy <= bounds.max_y:
        dy = 0.0

    if dx or dy:
        craft.move(dx, dy)


def side_for_fire_key(key: int, controls: Mapping[Side, Controls]) -> Side | None:
    for side, side_controls in controls.items():
        if side_controls.fire == key:
            return side
    return None
