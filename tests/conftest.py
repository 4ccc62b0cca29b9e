"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.

Board used throughout (25 cells):
    * Side One's keycard: green 0-8, black 9-11, tan elsewhere.
    * Side Two's keycard: green 6-14, black 0, 15, 16, tan elsewhere.
    -> 15 distinct green words (0-14), cells 6-8 green on both keycards.
"""

import pytest

from src.codenames.events import Event
from src.codenames.game import GameSession
from src.codenames.game_model import GameData
from src.core.config import Settings
from src.core.shared_types import Color, EventType, Side

WORDS = (
    "apple", "bank", "cell", "dance", "eagle",
    "fork", "ghost", "horse", "iron", "jam",
    "kite", "lemon", "moon", "nail", "olive",
    "pilot", "queen", "robot", "salt", "tower",
    "unicorn", "violin", "whale", "yard", "zebra",
)  # fmt: skip

ONE_GREEN = range(0, 9)
ONE_BLACK = (9, 10, 11)
TWO_GREEN = range(6, 15)
TWO_BLACK = (0, 15, 16)

LOCAL_PLAYER = "alice"
TEAMMATE = "bob"
SEED = 7


def _layout(green: range, black: tuple[int, ...]) -> tuple[Color, ...]:
    return tuple(
        Color.GREEN if i in green else Color.BLACK if i in black else Color.TAN
        for i in range(len(WORDS))
    )


ONE_LAYOUT = _layout(ONE_GREEN, ONE_BLACK)
TWO_LAYOUT = _layout(TWO_GREEN, TWO_BLACK)


@pytest.fixture
def roster_events() -> tuple[Event, ...]:
    """Alice joins Side One, Bob joins Side Two."""
    return (
        Event(number=1, type=EventType.NEW_PLAYER, player_id=LOCAL_PLAYER, side=Side.ONE),
        Event(number=2, type=EventType.NEW_PLAYER, player_id=TEAMMATE, side=Side.TWO),
    )


@pytest.fixture
def game_data(roster_events: tuple[Event, ...]) -> GameData:
    return GameData(
        seed=SEED,
        words=WORDS,
        events=roster_events,
        one_layout=ONE_LAYOUT,
        two_layout=TWO_LAYOUT,
    )


@pytest.fixture
def empty_game_data() -> GameData:
    """Freshly generated board: nobody joined yet."""
    return GameData(
        seed=SEED, words=WORDS, events=(), one_layout=ONE_LAYOUT, two_layout=TWO_LAYOUT
    )


@pytest.fixture
def session(game_data: GameData) -> GameSession:
    return GameSession.new("game-1", game_data, LOCAL_PLAYER)


@pytest.fixture
def settings() -> Settings:
    """Test settings with defaults (ignores any .env file lying around)."""
    return Settings(_env_file=None)
