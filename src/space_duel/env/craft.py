from space_duel.core.config import GameConfig
from space_duel.core.constants import Side
from space_duel.core.geometry import Rect

from .bullets import Bullets

# Bullets spawn this far behind the craft's forward edge
MUZZLE_INSET = 10.0
# Vertical offset from the craft's centre line to the bullet's top edge
MUZZLE_DROP = 2.0


class Craft:
    def __init__(
        self,
        side: Side,
        config: GameConfig,
        initial_x: float,
        initial_y: float,
    ):
        self.side = side
        self.config = config

        self.health = config.max_health
        self.position = initial_x + 1j * initial_y
        self.bullets = Bullets(
            max_bullets=config.max_bullets,
            width=config.bullet_width,
            height=config.bullet_height,
        )

    @property
    def x(self) -> float:
        return self.position.real

    @property
    def y(self) -> float:
        return self.position.imag

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.config.craft_width, self.config.craft_height)

    def muzzle(self) -> complex:
        """Top-left corner of a bullet fired from this craft's forward edge."""
        y = self.y + self.config.craft_height / 2 - MUZZLE_DROP
        if self.side.fire_direction > 0:
            x = self.x + self.config.craft_width - MUZZLE_INSET
        else:
            x = self.x - MUZZLE_INSET
        return x + 1j * y

    def move(self, dx: float, dy: float) -> None:
        self.position += dx + 1j * dy

    def damage_craft(self, damage: int = 1) -> None:
        self.health -= damage

