"""
Sound effects for shots and hits via pygame.mixer.

Audio is optional: if the mixer cannot initialise or a file is missing,
a warning is logged and the corresponding cue becomes a no-op.
"""

import logging
import os
from typing import Iterable

import pygame

from .event import Event, EventType

log = logging.getLogger(__name__)


class AudioPlayer:
    """Plays one sound per cue, restarting it from the beginning each time."""

    def __init__(
        self,
        sounds: dict[EventType, str] | None = None,
        volume: float = 1.0,
        enabled: bool = True,
    ):
        self.enabled = enabled
        self.volume = volume
        self.sounds: dict[EventType, pygame.mixer.Sound] = {}

        if not self.enabled:
            return

        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
        except pygame.error as e:
            log.warning(f"Audio disabled, mixer init failed: {e}")
            self.enabled = False
            return

        for event_type, path in (sounds or {}).items():
            self._load(event_type, path)

    def _load(self, event_type: EventType, path: str) -> None:
        if not os.path.exists(path):
            log.warning(f"Sound file not found for {event_type}: {path}")
            return
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as e:
            log.warning(f"Could not load sound {path}: {e}")
            return
        sound.set_volume(self.volume)
        self.sounds[event_type] = sound

    def play(self, event_type: EventType) -> None:
        sound = self.sounds.get(event_type)
        if sound is None:
            return
        # Cut off the previous cue instead of overlapping it
        sound.stop()
        sound.play()

    def handle(self, events: Iterable[Event]) -> None:
        if not self.enabled:
            return
        for event in events:
            if event.event_type in (EventType.FIRE, EventType.HIT):
                self.play(event.event_type)

    def close(self) -> None:
        for sound in self.sounds.values():
            sound.stop()
        self.sounds.clear()
