from dataclasses import dataclass
from enum import StrEnum, auto

from space_duel.core.constants import Side


class EventType(StrEnum):
    FIRE = auto()
    HIT = auto()
    WIN = auto()


@dataclass
class Event:
    event_type: EventType
    source: Side | None = None
    target: Side | None = None
    amount: int | None = None  # damage dealt, remaining health, etc.


class InputEventType(StrEnum):
    KEY_DOWN = auto()
    KEY_UP = auto()
    FIRE = auto()


@dataclass
class InputEvent:
    event_type: InputEventType
    key: int | None = None
    side: Side | None = None
