from dataclasses import dataclass

import numpy as np


@dataclass
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def overlaps(a: Rect, b: Rect) -> bool:
    """
    Check whether two rectangles intersect with non-zero area.

    Edges that only touch do not count as a collision.
    """
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def overlaps_many(
    x: np.ndarray, y: np.ndarray, width: float, height: float, target: Rect
) -> np.ndarray:
    """
    Vectorised `overlaps` for a batch of same-sized rectangles.

    Args:
        x: (N,) left edges.
        y: (N,) top edges.
        width: Width shared by every rectangle in the batch.
        height: Height shared by every rectangle in the batch.
        target: Rectangle to test against.

    Returns:
        (N,) boolean mask, True where the rectangle overlaps `target`.
    """
    return (
        (x < target.right)
        & (x + width > target.x)
        & (y < target.bottom)
        & (y + height > target.y)
    )
