from dataclasses import dataclass, fields
from typing import Tuple

from omegaconf import DictConfig, OmegaConf

# Padding subtracted from the desktop size when no world size is configured
WINDOW_PADDING = 10


@dataclass
class GameConfig:
    """
    Configuration for arena geometry and combat tuning.

    Attributes:
        world_size: Width and height of the arena in pixels.
        craft_width: Width of a craft's bounding box.
        craft_height: Height of a craft's bounding box.
        velocity: Distance a craft moves per tick on each held axis.
        max_bullets: Maximum live projectiles per craft.
        bullet_velocity: Distance a projectile travels per tick.
        bullet_width: Width of a projectile.
        bullet_height: Height of a projectile.
        max_health: Starting health of each craft.
        border_width: Width of the centre divider.
        yellow_start: Initial top-left corner of the yellow craft.
        red_start_offset: Distance of the red craft from the right edge.
        red_start_y: Initial y of the red craft.
        event_queue_size: Capacity of the per-match input event queue.
        fps: Target ticks per second.
    """
    # Arena
    world_size: Tuple[float, float] = (900.0, 500.0)
    border_width: float = 10.0

    # Craft
    craft_width: float = 75.0
    craft_height: float = 60.0
    velocity: float = 5.0
    max_health: int = 10
    yellow_start: Tuple[float, float] = (100.0, 300.0)
    red_start_offset: float = 200.0
    red_start_y: float = 300.0

    # Projectiles
    max_bullets: int = 3
    bullet_velocity: float = 8.0
    bullet_width: float = 10.0
    bullet_height: float = 5.0

    # Loop
    event_queue_size: int = 64
    fps: int = 60

    def __post_init__(self) -> None:
        self.world_size = (float(self.world_size[0]), float(self.world_size[1]))
        self.yellow_start = (float(self.yellow_start[0]), float(self.yellow_start[1]))

        width, height = self.world_size
        if width <= 0 or height <= 0:
            raise ValueError(f"world_size must be positive, got {self.world_size}")
        if self.craft_width <= 0 or self.craft_height <= 0:
            raise ValueError("craft dimensions must be positive")
        if self.bullet_width <= 0 or self.bullet_height <= 0:
            raise ValueError("bullet dimensions must be positive")
        if self.max_bullets < 1:
            raise ValueError(f"max_bullets must be at least 1, got {self.max_bullets}")
        if self.max_health < 1:
            raise ValueError(f"max_health must be at least 1, got {self.max_health}")
        if self.event_queue_size < 1:
            raise ValueError("event_queue_size must be at least 1")
        if self.half_width - self.border_width / 2 < self.craft_width:
            raise ValueError(
                f"world_size {self.world_size} is too narrow for two crafts of width {self.craft_width}"
            )
        if height < self.craft_height:
            raise ValueError(
                f"world_size {self.world_size} is too short for crafts of height {self.craft_height}"
            )

        # Starting positions must lie inside each side's movement bounds
        half_border = self.border_width / 2
        max_y = height - self.craft_height
        yellow_x, yellow_y = self.yellow_start
        if not (
            0 <= yellow_x <= self.half_width - half_border - self.craft_width
            and 0 <= yellow_y <= max_y
        ):
            raise ValueError(
                f"yellow_start {self.yellow_start} is outside the left half of {self.world_size}"
            )
        red_x, red_y = self.red_start
        if not (
            self.half_width + half_border <= red_x <= width - self.craft_width
            and 0 <= red_y <= max_y
        ):
            raise ValueError(
                f"red start {self.red_start} is outside the right half of {self.world_size}"
            )

    @property
    def width(self) -> float:
        return self.world_size[0]

    @property
    def height(self) -> float:
        return self.world_size[1]

    @property
    def half_width(self) -> float:
        return self.world_size[0] / 2

    @property
    def red_start(self) -> Tuple[float, float]:
        return (self.width - self.red_start_offset, self.red_start_y)

    @classmethod
    def from_cfg(cls, cfg: DictConfig, world_size: Tuple[float, float] | None = None) -> "GameConfig":
        """
        Build a GameConfig from the `game` section of a Hydra config.

        Unknown keys are ignored. A null `world_size` is replaced by the
        `world_size` argument (typically the desktop size), or the default
        when that is not given either.
        """
        values = OmegaConf.to_container(cfg, resolve=True)
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in values.items() if k in known and v is not None}

        if "world_size" not in kwargs and world_size is not None:
            kwargs["world_size"] = world_size

        for key in ("world_size", "yellow_start"):
            if key in kwargs:
                kwargs[key] = tuple(kwargs[key])

        return cls(**kwargs)

