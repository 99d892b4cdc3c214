"""
Central constants and enumerations for Space Duel.

Defines the two sides of the arena, match status values and the
winner banner text.
"""

from enum import StrEnum, auto


class Side(StrEnum):
    YELLOW = auto()
    RED = auto()

    @property
    def opponent(self) -> "Side":
        return Side.RED if self is Side.YELLOW else Side.YELLOW

    @property
    def fire_direction(self) -> int:
        """+1 for a craft firing towards +x, -1 towards -x."""
        return 1 if self is Side.YELLOW else -1


class MatchStatus(StrEnum):
    RUNNING = auto()
    ENDED = auto()


WINNER_TEXT = {
    Side.YELLOW: "Yellow Wins!",
    Side.RED: "Red Wins!",
}
