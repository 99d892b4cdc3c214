import pytest
import sys
import os

# Render and play audio without a real display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the src directory is in sys.path
src_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if src_root not in sys.path:
    sys.path.insert(0, src_root)

from space_duel.core.config import GameConfig
from space_duel.core.constants import Side
from space_duel.env.craft import Craft
from space_duel.env.match import Match


@pytest.fixture
def game_config():
    """Return the default arena configuration (900x500)."""
    return GameConfig()


@pytest.fixture
def match(game_config):
    """Return a fresh match with both crafts at their start positions."""
    return Match(game_config)


@pytest.fixture
def yellow_craft(game_config):
    return Craft(Side.YELLOW, game_config, initial_x=100.0, initial_y=300.0)


@pytest.fixture
def red_craft(game_config):
    return Craft(Side.RED, game_config, initial_x=700.0, initial_y=300.0)
