"""
Contract for the Service layer.

Domain level data model of the information the server sends us.
"""

from dataclasses import dataclass

from src.codenames.events import Event
from src.core.shared_types import Color


@dataclass(frozen=True)
class GameData:
    """Initial snapshot of a game: the board and every event issued so far (oldest first)."""

    seed: int
    words: tuple[str, ...]
    events: tuple[Event, ...]
    one_layout: tuple[Color, ...]
    two_layout: tuple[Color, ...]


@dataclass(frozen=True)
class Update:
    """A batch of new events. Only applicable to the game instance with the same seed."""

    seed: int
    events: tuple[Event, ...]
