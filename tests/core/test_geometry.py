import numpy as np
import pytest

from space_duel.core.geometry import Rect, overlaps, overlaps_many


class TestOverlaps:
    """Tests for the scalar rectangle overlap check."""

    def test_overlapping_rects(self):
        assert overlaps(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))

    def test_contained_rect(self):
        assert overlaps(Rect(0, 0, 100, 100), Rect(40, 40, 5, 5))

    def test_separate_rects(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(50, 50, 10, 10))

    @pytest.mark.parametrize(
        "other",
        [
            Rect(10, 0, 10, 10),  # touching right edge
            Rect(-10, 0, 10, 10),  # touching left edge
            Rect(0, 10, 10, 10),  # touching bottom edge
            Rect(0, -10, 10, 10),  # touching top edge
            Rect(10, 10, 10, 10),  # touching corner
        ],
    )
    def test_touching_edges_do_not_collide(self, other):
        assert not overlaps(Rect(0, 0, 10, 10), other)
        assert not overlaps(other, Rect(0, 0, 10, 10))

    def test_symmetric(self):
        a = Rect(3, 4, 10, 5)
        b = Rect(12, 8, 75, 60)
        assert overlaps(a, b) == overlaps(b, a)


class TestOverlapsMany:
    """Tests for the vectorised overlap check used by bullets."""

    def test_matches_scalar_check(self):
        target = Rect(700, 300, 75, 60)
        x = np.array([600, 690, 691, 765, 775, 700], dtype=np.float32)
        y = np.array([320, 320, 320, 320, 320, 360], dtype=np.float32)

        mask = overlaps_many(x, y, 10, 5, target)

        expected = [overlaps(Rect(float(bx), float(by), 10, 5), target) for bx, by in zip(x, y)]
        assert mask.tolist() == expected
        assert mask.tolist() == [False, False, True, True, False, False]

    def test_empty_batch(self):
        mask = overlaps_many(np.array([]), np.array([]), 10, 5, Rect(0, 0, 1, 1))
        assert mask.shape == (0,)
