"""
Tests for firing and bullet resolution between two crafts.
"""

import pytest

from space_duel.core.constants import Side
from space_duel.env.combat import advance_bullets, fire
from space_duel.env.craft import Craft
from space_duel.env.event import EventType


class TestCraft:
    """Tests for craft geometry helpers."""

    def test_initial_state(self, yellow_craft, game_config):
        assert yellow_craft.health == game_config.max_health
        assert yellow_craft.position == 100 + 300j
        assert len(yellow_craft.bullets) == 0

    def test_rect(self, red_craft):
        rect = red_craft.rect
        assert (rect.x, rect.y, rect.width, rect.height) == (700.0, 300.0, 75.0, 60.0)

    def test_yellow_muzzle_at_forward_edge(self, yellow_craft):
        assert yellow_craft.muzzle() == (100 + 75 - 10) + (300 + 30 - 2) * 1j

    def test_red_muzzle_at_forward_edge(self, red_craft):
        assert red_craft.muzzle() == (700 - 10) + (300 + 30 - 2) * 1j

    def test_damage(self, yellow_craft):
        yellow_craft.damage_craft(10)
        assert yellow_craft.health == 0


class TestFire:
    """Tests for spawning bullets."""

    def test_fire_creates_bullet_at_muzzle(self, yellow_craft):
        event = fire(yellow_craft)

        assert event.event_type is EventType.FIRE
        assert event.source is Side.YELLOW
        x, y = yellow_craft.bullets.get_active_positions()
        assert x.tolist() == [165.0]
        assert y.tolist() == [328.0]

    def test_fire_at_cap_is_noop(self, yellow_craft, game_config):
        for _ in range(game_config.max_bullets):
            assert fire(yellow_craft) is not None

        before = yellow_craft.bullets.get_active_positions()
        assert fire(yellow_craft) is None

        after = yellow_craft.bullets.get_active_positions()
        assert len(yellow_craft.bullets) == game_config.max_bullets
        assert after[0].tolist() == before[0].tolist()


class TestAdvanceBullets:
    """Tests for moving bullets and resolving hits."""

    def test_direction_follows_owner(self, yellow_craft, red_craft):
        fire(yellow_craft)
        fire(red_craft)

        advance_bullets(yellow_craft, red_craft, 900.0)
        advance_bullets(red_craft, yellow_craft, 900.0)

        assert yellow_craft.bullets.x[0] == 165.0 + 8.0
        assert red_craft.bullets.x[0] == 690.0 - 8.0

    def test_touching_bullet_does_not_hit(self, yellow_craft, red_craft):
        # Right edge lands exactly on red's left edge after one step
        yellow_craft.bullets.add_bullet(700.0 - 10.0 - 8.0, 320.0)

        events = advance_bullets(yellow_craft, red_craft, 900.0)

        assert events == []
        assert red_craft.health == 10
        assert len(yellow_craft.bullets) == 1

        events = advance_bullets(yellow_craft, red_craft, 900.0)
        assert [e.event_type for e in events] == [EventType.HIT]
        assert red_craft.health == 9
        assert len(yellow_craft.bullets) == 0

    def test_hit_event_reports_remaining_health(self, yellow_craft, red_craft):
        red_craft.bullets.add_bullet(180.0, 320.0)

        events = advance_bullets(red_craft, yellow_craft, 900.0)

        assert len(events) == 1
        assert events[0].source is Side.RED
        assert events[0].target is Side.YELLOW
        assert events[0].amount == 9

    def test_off_screen_bullet_removed_without_hit(self, game_config):
        yellow = Craft(Side.YELLOW, game_config, 100.0, 300.0)
        # Red box hangs past the right edge so an exiting bullet still overlaps it
        red = Craft(Side.RED, game_config, 900.0 - 20.0, 300.0)
        yellow.bullets.add_bullet(898.0, 320.0)

        events = advance_bullets(yellow, red, 900.0)

        assert events == []
        assert red.health == 10
        assert len(yellow.bullets) == 0

    def test_red_bullet_leaves_left_edge(self, red_craft, game_config):
        yellow = Craft(Side.YELLOW, game_config, 0.0, 0.0)
        red_craft.bullets.add_bullet(5.0, 320.0)

        advance_bullets(red_craft, yellow, 900.0)

        assert len(red_craft.bullets) == 0
        assert yellow.health == 10

    def test_each_bullet_processed_once(self, yellow_craft, red_craft):
        """Removing one bullet must not skip the bullet behind it."""
        yellow_craft.bullets.add_bullet(695.0, 320.0)  # hits
        yellow_craft.bullets.add_bullet(698.0, 320.0)  # also hits
        yellow_craft.bullets.add_bullet(400.0, 320.0)  # keeps flying

        events = advance_bullets(yellow_craft, red_craft, 900.0)

        assert len(events) == 2
        assert red_craft.health == 8
        x, _ = yellow_craft.bullets.get_active_positions()
        assert x.tolist() == [408.0]

    def test_no_bullets(self, yellow_craft, red_craft):
        assert advance_bullets(yellow_craft, red_craft, 900.0) == []

    def test_bullet_misses_vertically(self, yellow_craft, red_craft):
        yellow_craft.bullets.add_bullet(700.0, 360.0)

        events = advance_bullets(yellow_craft, red_craft, 900.0)

        assert events == []
        assert len(yellow_craft.bullets) == 1
        assert yellow_craft.bullets.x[0] == pytest.approx(708.0)
