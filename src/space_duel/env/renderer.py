"""
Pygame-based rendering for the duel arena.

Handles drawing of the background, divider, crafts, bullets and text
overlays, as well as forwarding keyboard events to the match.
"""

import logging
import os
from typing import Tuple

import pygame

from space_duel.core.config import GameConfig
from space_duel.core.constants import MatchStatus, Side
from space_duel.core.types import RenderCraft, RenderState

from .match import Match

log = logging.getLogger(__name__)

BACKGROUND_COLOR = (10, 10, 20)
DIVIDER_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)

SIDE_COLORS = {
    Side.YELLOW: (255, 255, 0),
    Side.RED: (255, 0, 0),
}

# Sprites face up; rotate them to face the opponent (degrees, clockwise)
SPRITE_ROTATION = {
    Side.YELLOW: 270,
    Side.RED: 90,
}

RESTART_KEY = pygame.K_r
QUIT_KEY = pygame.K_ESCAPE


class GameRenderer:
    """Handles pygame rendering and keyboard input for a match."""

    def __init__(
        self,
        config: GameConfig,
        target_fps: int = 60,
        asset_dir: str | None = None,
        sprites: dict[Side, str] | None = None,
        background: str | None = None,
        caption: str = "Space Duel",
        headless: bool = False,
    ):
        """
        Initialize the game renderer.

        Args:
            config: Arena geometry.
            target_fps: Target frames per second for rendering.
            asset_dir: Directory holding sprite and background images.
            sprites: Image file name per side, relative to `asset_dir`.
            background: Background image file name, relative to `asset_dir`.
            caption: Window title.
            headless: Render to a dummy video driver.
        """
        self.config = config
        self.target_fps = target_fps
        self.asset_dir = asset_dir
        self.sprite_files = sprites or {}
        self.background_file = background
        self.caption = caption
        self.headless = headless or bool(os.environ.get("HEADLESS"))

        self.world_size = (int(config.width), int(config.height))

        # Pygame components
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.font: pygame.font.Font | None = None
        self.banner_font: pygame.font.Font | None = None
        self.sprites: dict[Side, pygame.Surface] = {}
        self.background: pygame.Surface | None = None
        self.initialized = False

        self.restart_requested = False

    def initialize(self) -> None:
        """Initialize pygame components."""
        if self.initialized:
            return

        if self.headless:
            os.environ["SDL_VIDEODRIVER"] = "dummy"

        try:
            pygame.init()
            if not pygame.display.get_init():
                pygame.display.init()

            self.screen = pygame.display.set_mode(self.world_size)
            pygame.display.set_caption(self.caption)
            self.clock = pygame.time.Clock()
            self.font = pygame.font.Font(None, 36)
            self.banner_font = pygame.font.Font(None, 96)
        except pygame.error as e:
            raise RuntimeError(
                f"Failed to initialize pygame: {e}. Make sure you have a display available."
            ) from e

        self._load_assets()
        self.initialized = True

    def _asset_path(self, name: str) -> str:
        return os.path.join(self.asset_dir, name) if self.asset_dir else name

    def _load_image(self, name: str) -> pygame.Surface | None:
        path = self._asset_path(name)
        if not os.path.exists(path):
            log.warning(f"Image not found, drawing shapes instead: {path}")
            return None
        try:
            return pygame.image.load(path).convert_alpha()
        except pygame.error as e:
            log.warning(f"Could not load image {path}: {e}")
            return None

    def _load_assets(self) -> None:
        size = (int(self.config.craft_width), int(self.config.craft_height))
        for side, name in self.sprite_files.items():
            image = self._load_image(name)
            if image is None:
                continue
            image = pygame.transform.scale(image, size)
            # pygame rotates counter-clockwise
            self.sprites[side] = pygame.transform.rotate(image, -SPRITE_ROTATION[side])

        if self.background_file:
            image = self._load_image(self.background_file)
            if image is not None:
                self.background = pygame.transform.scale(image, self.world_size)

    def handle_events(self, match: Match) -> bool:
        """
        Forward pygame keyboard events to the match.

        Returns:
            True if the game should continue running, False if quit was requested.
        """
        if not self.initialized:
            self.initialize()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                if event.key == QUIT_KEY:
                    return False
                if event.key == RESTART_KEY and match.ended:
                    self.restart_requested = True
                    continue
                match.key_down(event.key)
            elif event.type == pygame.KEYUP:
                match.key_up(event.key)
        return True

    def _render_craft(self, craft: RenderCraft) -> None:
        x, y = craft.position.real, craft.position.imag
        rect = pygame.Rect(
            int(x), int(y), int(self.config.craft_width), int(self.config.craft_height)
        )

        sprite = self.sprites.get(craft.side)
        if sprite is None:
            pygame.draw.rect(self.screen, SIDE_COLORS[craft.side], rect)
        else:
            self.screen.blit(sprite, sprite.get_rect(center=rect.center))

    def _render_bullets(self, craft: RenderCraft) -> None:
        color = SIDE_COLORS[craft.side]
        width = int(self.config.bullet_width)
        height = int(self.config.bullet_height)
        for x, y in zip(craft.bullet_x, craft.bullet_y):
            pygame.draw.rect(self.screen, color, (int(x), int(y), width, height))

    def _render_text(
        self, text: str, font: pygame.font.Font, **position: Tuple[int, int]
    ) -> None:
        surface = font.render(text, True, TEXT_COLOR)
        self.screen.blit(surface, surface.get_rect(**position))

    def _render_ui(self, state: RenderState) -> None:
        width, height = self.world_size

        yellow = state.crafts[Side.YELLOW]
        red = state.crafts[Side.RED]
        self._render_text(f"Health: {yellow.health}", self.font, topleft=(10, 10))
        self._render_text(f"Health: {red.health}", self.font, topright=(width - 10, 10))

        if state.status is MatchStatus.ENDED and state.winner_text:
            self._render_text(
                state.winner_text, self.banner_font, center=(width // 2, height // 2)
            )
            self._render_text(
                "Press R to restart", self.font, center=(width // 2, height // 2 + 60)
            )

    def render(self, state: RenderState) -> None:
        """
        Render a frame.

        Args:
            state: Match snapshot to draw.
        """
        if not self.initialized:
            self.initialize()

        if self.background is None:
            self.screen.fill(BACKGROUND_COLOR)
        else:
            self.screen.blit(self.background, (0, 0))

        border = self.config.border_width
        divider = pygame.Rect(
            int(self.config.half_width - border / 2), 0, int(border), self.world_size[1]
        )
        pygame.draw.rect(self.screen, DIVIDER_COLOR, divider)

        for craft in state.crafts.values():
            self._render_craft(craft)
        for craft in state.crafts.values():
            self._render_bullets(craft)

        self._render_ui(state)

        pygame.display.flip()
        self.clock.tick(self.target_fps)

    def close(self) -> None:
        """Clean up pygame resources."""
        if self.initialized:
            pygame.quit()
            self.initialized = False
            self.screen = None
            self.clock = None
            self.font = None
            self.banner_font = None
            self.sprites.clear()
            self.background = None
