import numpy as np

from space_duel.core.geometry import Rect, overlaps_many


class Bullets:
    """
    Fixed-capacity, firing-ordered projectile store for a single craft.

    Active bullets always occupy the front `num_active` slots, oldest first.
    """

    def __init__(self, max_bullets: int, width: float, height: float) -> None:
        self.num_active = 0
        self.max_bullets = max_bullets
        self.width = width
        self.height = height

        self.x = np.zeros(self.max_bullets, dtype=np.float32)
        self.y = np.zeros(self.max_bullets, dtype=np.float32)

    def __len__(self) -> int:
        return self.num_active

    @property
    def is_full(self) -> bool:
        return self.num_active >= self.max_bullets

    def add_bullet(self, x: float, y: float) -> int:
        if self.is_full:
            return -1

        slot = self.num_active
        self.x[slot] = x
        self.y[slot] = y

        self.num_active += 1
        return slot

    def advance(self, dx: float) -> None:
        if self.num_active == 0:
            return

        self.x[: self.num_active] += dx

    def hits(self, target: Rect) -> np.ndarray:
        """Boolean mask of active bullets overlapping `target`."""
        return overlaps_many(
            self.x[: self.num_active],
            self.y[: self.num_active],
            self.width,
            self.height,
            target,
        )

    def retain(self, keep_mask: np.ndarray) -> int:
        """
        Keep only the bullets selected by `keep_mask`, preserving order.

        Returns:
            Number of bullets removed.
        """
        if self.num_active == 0:
            return 0

        keep_indices = np.where(keep_mask)[0]
        new_active_count = len(keep_indices)
        removed = self.num_active - new_active_count

        if removed == 0:
            return 0

        # Compact arrays - move kept bullets to front
        self.x[:new_active_count] = self.x[keep_indices]
        self.y[:new_active_count] = self.y[keep_indices]
        self.num_active = new_active_count
        return removed

    def get_active_positions(self) -> tuple[np.ndarray, np.ndarray]:
        if self.num_active == 0:
            return np.array([], dtype=np.float32), np.array([], dtype=np.float32)

        return (
            self.x[: self.num_active].copy(),
            self.y[: self.num_active].copy(),
        )

