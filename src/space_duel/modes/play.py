import logging
import os

import pygame
from omegaconf import DictConfig

from space_duel.core.config import GameConfig, WINDOW_PADDING
from space_duel.core.constants import Side
from space_duel.env.audio import AudioPlayer
from space_duel.env.event import EventType
from space_duel.env.match import Match, reset, tick
from space_duel.env.renderer import GameRenderer

log = logging.getLogger(__name__)


def run_match(
    match: Match,
    renderer: GameRenderer,
    audio: AudioPlayer | None = None,
    max_ticks: int | None = None,
) -> Side | None:
    """
    Drive one match until it ends.

    Each iteration forwards pending keyboard events, advances the match
    one tick, plays the resulting cues and renders the frame.

    Args:
        match: Match to run.
        renderer: Render sink and keyboard source.
        audio: Audio sink for shot and hit cues.
        max_ticks: Stop after this many iterations even if nobody won.

    Returns:
        The winning side, or None if the player quit or the tick budget ran out.
    """
    iterations = 0
    while not match.ended:
        if max_ticks is not None and iterations >= max_ticks:
            return None

        if not renderer.handle_events(match):
            return None

        events = tick(match)
        if audio is not None:
            audio.handle(events)

        renderer.render(match.snapshot())
        iterations += 1

    return match.winner


def wait_for_restart(match: Match, renderer: GameRenderer) -> bool:
    """
    Keep showing the final frame until a restart or quit is requested.

    Returns:
        True to start a new match, False to quit.
    """
    renderer.restart_requested = False
    final_frame = match.snapshot()
    while not renderer.restart_requested:
        if not renderer.handle_events(match):
            return False
        renderer.render(final_frame)
    return True


def _resolve_world_size(cfg: DictConfig) -> tuple[float, float] | None:
    """Desktop size minus padding when no world size is configured."""
    if cfg.game.get("world_size") is not None:
        return None
    if cfg.render.headless:
        return None

    pygame.display.init()
    desktop_sizes = pygame.display.get_desktop_sizes()
    if not desktop_sizes:
        return None
    width, height = desktop_sizes[0]
    return (float(width - WINDOW_PADDING), float(height - WINDOW_PADDING))


def play(cfg: DictConfig) -> None:
    """
    Run the game in play mode with rendering and keyboard control.

    Args:
        cfg: Configuration dictionary containing:
            - game: Arena and combat tuning (see GameConfig).
            - render: Window, frame rate and asset settings.
            - audio: Sound file names and volume.
    """
    log.info("Starting play mode...")

    game_config = GameConfig.from_cfg(cfg.game, world_size=_resolve_world_size(cfg))
    log.info(f"Arena size: {game_config.world_size}")

    asset_dir = cfg.render.asset_dir
    renderer = GameRenderer(
        game_config,
        target_fps=cfg.render.target_fps,
        asset_dir=asset_dir,
        sprites={
            Side.YELLOW: cfg.render.yellow_sprite,
            Side.RED: cfg.render.red_sprite,
        },
        background=cfg.render.background,
        caption=cfg.render.caption,
        headless=cfg.render.headless,
    )
    renderer.initialize()

    sounds = {
        EventType.FIRE: cfg.audio.fire_sound,
        EventType.HIT: cfg.audio.hit_sound,
    }
    if asset_dir:
        sounds = {key: os.path.join(asset_dir, name) for key, name in sounds.items()}
    audio = AudioPlayer(sounds, volume=cfg.audio.volume, enabled=cfg.audio.enabled)

    max_ticks = cfg.get("max_ticks")

    try:
        while True:
            match = reset(game_config)
            winner = run_match(match, renderer, audio, max_ticks=max_ticks)
            if winner is None:
                break
            if max_ticks is not None or not wait_for_restart(match, renderer):
                break

    except KeyboardInterrupt:
        log.info("Game interrupted by user")
    finally:
        audio.close()
        renderer.close()
        log.info("Play mode ended")
