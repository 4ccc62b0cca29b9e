"""
Type definitions used across layers
"""

from enum import Enum, IntEnum, StrEnum, auto
from typing import Self

from src.core.exceptions import DecodeError


class Side(IntEnum):
    """A team identity. Values are the integer tokens the server uses for 'team'."""

    NONE = 0  # spectator / not yet on a team
    ONE = 1
    TWO = 2

    @property
    def opposite(self) -> "Side":
        match self:
            case Side.ONE:
                return Side.TWO
            case Side.TWO:
                return Side.ONE
            case Side.NONE:
                return Side.NONE

    @classmethod
    def from_wire(cls, value: int) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise DecodeError(
                f"Unknown side token: {value!r}. Expected one of {[s.value for s in cls]}"
            ) from None

    def to_wire(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Name shown to players, e.g. in the event log."""
        return "Spectators" if self == Side.NONE else f"Side {self.name.title()}"


class Color(StrEnum):
    """Secret affiliation of a word on one side's keycard. Values are the wire tokens."""

    GREEN = "g"
    BLACK = "b"
    TAN = "t"  # bystander

    @classmethod
    def from_wire(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise DecodeError(
                f"Unknown color token: {value!r}. Expected one of {[c.value for c in cls]}"
            ) from None

    def to_wire(self) -> str:
        return self.value


class DisplayState(Enum):
    """What everyone sees on the shared board. Derived from both keycards' exposure flags."""

    UNEXPOSED = auto()
    EXPOSED_GREEN = auto()
    EXPOSED_BLACK = auto()


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    LOST = "lost"


class EventType(StrEnum):
    NEW_PLAYER = "new_player"
    PLAYER_LEFT = "player_left"
    SET_TEAM = "set_team"
    GUESS = "guess"
