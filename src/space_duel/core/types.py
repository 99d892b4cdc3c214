from dataclasses import dataclass
from typing import Dict, Optional
import numpy as np

from space_duel.core.constants import MatchStatus, Side


@dataclass
class RenderCraft:
    """Snapshot of a craft's state for rendering purposes."""
    side: Side
    position: complex
    health: int

    # Bullet data as contiguous arrays for efficient rendering
    bullet_x: np.ndarray # (N_bullets,)
    bullet_y: np.ndarray # (N_bullets,)


@dataclass
class RenderState:
    """
    Snapshot of the entire match for rendering purposes.

    `winner_text` is derived from health, so it is set on the tick a craft
    reaches zero health, one tick before `status` becomes ENDED.
    """
    crafts: Dict[Side, RenderCraft]
    status: MatchStatus
    winner_text: Optional[str]
    tick: int
