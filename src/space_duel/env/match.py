"""
Match state and the per-tick update.

A Match owns both crafts, the held-key map and a bounded queue of
input events. Input callbacks only enqueue; `tick` drains the queue at
the start of each update so a tick always sees one consistent input
snapshot.
"""

from collections import deque
import logging
from typing import Mapping

from space_duel.core.config import GameConfig
from space_duel.core.constants import MatchStatus, Side, WINNER_TEXT
from space_duel.core.types import RenderCraft, RenderState

from .combat import advance_bullets, fire
from .craft import Craft
from .event import Event, EventType, InputEvent, InputEventType
from .input import (
    DEFAULT_CONTROLS,
    Controls,
    apply_movement,
    movement_bounds,
    side_for_fire_key,
)

log = logging.getLogger(__name__)


class Match:
    """
    Complete state of one match.

    Attributes:
        config: Arena and combat tuning.
        crafts: Mapping from side to Craft.
        held_keys: Key code -> currently pressed.
        status: RUNNING until one side's health drops to zero.
        winner: Winning side once the match has ended.
        tick_count: Number of ticks that performed an update.
    """

    def __init__(
        self,
        config: GameConfig,
        controls: Mapping[Side, Controls] = DEFAULT_CONTROLS,
    ) -> None:
        self.config = config
        self.controls = dict(controls)

        yellow_x, yellow_y = config.yellow_start
        red_x, red_y = config.red_start
        self.crafts = {
            Side.YELLOW: Craft(Side.YELLOW, config, yellow_x, yellow_y),
            Side.RED: Craft(Side.RED, config, red_x, red_y),
        }
        self.bounds = {side: movement_bounds(side, config) for side in Side}

        self.held_keys: dict[int, bool] = {}
        self.events: deque[InputEvent] = deque()

        self.status = MatchStatus.RUNNING
        self.winner: Side | None = None
        self.tick_count = 0

    @property
    def yellow(self) -> Craft:
        return self.crafts[Side.YELLOW]

    @property
    def red(self) -> Craft:
        return self.crafts[Side.RED]

    @property
    def ended(self) -> bool:
        return self.status is MatchStatus.ENDED

    @property
    def winner_text(self) -> str | None:
        return WINNER_TEXT[self.winner] if self.winner is not None else None

    def _enqueue(self, input_event: InputEvent) -> None:
        # A full queue drops new presses and shots; releases are always kept
        # so a key can never stay held
        if (
            len(self.events) >= self.config.event_queue_size
            and input_event.event_type is not InputEventType.KEY_UP
        ):
            log.debug(f"Input queue full, dropping {input_event.event_type}")
            return
        self.events.append(input_event)

    def key_down(self, key: int) -> None:
        """Record a key press. Pressing a fire key also queues a shot."""
        if self.ended:
            return
        self._enqueue(InputEvent(InputEventType.KEY_DOWN, key=key))

    def key_up(self, key: int) -> None:
        if self.ended:
            return
        self._enqueue(InputEvent(InputEventType.KEY_UP, key=key))

    def fire(self, side: Side) -> None:
        """Queue a single shot for `side`, independent of any key."""
        if self.ended:
            return
        self._enqueue(InputEvent(InputEventType.FIRE, side=side))

    def snapshot(self) -> RenderState:
        crafts = {}
        for side, craft in self.crafts.items():
            bullet_x, bullet_y = craft.bullets.get_active_positions()
            crafts[side] = RenderCraft(
                side=side,
                position=craft.position,
                health=craft.health,
                bullet_x=bullet_x,
                bullet_y=bullet_y,
            )
        return RenderState(
            crafts=crafts,
            status=self.status,
            winner_text=check_winner(self),
            tick=self.tick_count,
        )


def check_winner(match: Match) -> str | None:
    """Winner banner text for the current health totals, if any."""
    if match.yellow.health <= 0:
        return WINNER_TEXT[Side.RED]
    if match.red.health <= 0:
        return WINNER_TEXT[Side.YELLOW]
    return None


def update_status(match: Match) -> MatchStatus:
    """Move the state machine to ENDED once a craft has run out of health."""
    if match.ended:
        return match.status

    if match.yellow.health <= 0:
        match.winner = Side.RED
    elif match.red.health <= 0:
        match.winner = Side.YELLOW
    else:
        return match.status

    match.status = MatchStatus.ENDED
    match.events.clear()
    log.info(f"{match.winner_text} after {match.tick_count} ticks")
    return match.status


def drain_input(match: Match) -> list[Event]:
    """Apply every queued input event in arrival order."""
    events = []
    while match.events:
        input_event = match.events.popleft()

        if input_event.event_type is InputEventType.KEY_UP:
            match.held_keys[input_event.key] = False
            continue

        if input_event.event_type is InputEventType.KEY_DOWN:
            match.held_keys[input_event.key] = True
            side = side_for_fire_key(input_event.key, match.controls)
        else:
            side = input_event.side

        if side is None:
            continue

        fired = fire(match.crafts[side])
        if fired is not None:
            events.append(fired)
    return events


def tick(match: Match) -> list[Event]:
    """
    Advance the match by one tick.

    The terminal check runs first, so a tick on an ended match changes
    nothing.

    Returns:
        Events produced during this tick (shots, hits, the win).
    """
    if match.ended:
        return []

    if update_status(match) is MatchStatus.ENDED:
        return [Event(EventType.WIN, source=match.winner, target=match.winner.opponent)]

    events = drain_input(match)

    for side, craft in match.crafts.items():
        apply_movement(craft, match.held_keys, match.controls[side], match.bounds[side])

    for side, craft in match.crafts.items():
        events.extend(advance_bullets(craft, match.crafts[side.opponent], match.config.width))

    match.tick_count += 1
    return events


def reset(config: GameConfig, controls: Mapping[Side, Controls] = DEFAULT_CONTROLS) -> Match:
    """Build a fresh match from initial conditions."""
    log.info("Starting new match")
    return Match(config, controls)
