"""Requests and Response models (the JSON shapes exchanged with the game server)"""

from typing import Any, Self

from pydantic import BaseModel, field_serializer, field_validator, model_validator

from src.codenames.events import Event
from src.codenames.game_model import GameData, Update
from src.codenames.guess import Guess
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Side


def _require_non_empty(value: str) -> str:
    if not value.strip():
        raise InvalidRequestError("Identifiers cannot be empty.")
    return value


class TeamModel(BaseModel):
    """Any body with a 'team' field: encoded/decoded with the Side wire tokens."""

    team: Side

    @field_validator("team", mode="before")
    @classmethod
    def decode_team(cls, value: Any) -> Side:
        return Side.from_wire(value)

    @field_serializer("team")
    def encode_team(self, team: Side) -> int:
        return team.to_wire()


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    game_id: str

    @field_validator("game_id")
    @classmethod
    def validate_game_id(cls, value: str) -> str:
        return _require_non_empty(value)


class GuessRequest(TeamModel):
    game_id: str
    index: int
    player_id: str
    last_event: int

    @field_validator(*["game_id", "player_id"])
    @classmethod
    def validate_ids(cls, value: str) -> str:
        return _require_non_empty(value)

    @field_validator("index")
    @classmethod
    def validate_index(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Cell index cannot be negative: {value}")
        return value

    @classmethod
    def from_guess(cls, guess: Guess) -> Self:
        return cls(
            game_id=guess.game_id,
            index=guess.index,
            player_id=guess.player_id,
            team=guess.side,
            last_event=guess.last_event,
        )


class EventsRequest(TeamModel):
    """Poll for events newer than 'last_event'."""

    game_id: str
    player_id: str
    last_event: int

    @field_validator(*["game_id", "player_id"])
    @classmethod
    def validate_ids(cls, value: str) -> str:
        return _require_non_empty(value)


# --- RESPONSE MODELS ---
class EventPayload(TeamModel):
    number: int
    type: str
    player_id: str
    index: int = 0

    def to_event(self) -> Event:
        return Event(
            number=self.number,
            type=self.type,
            player_id=self.player_id,
            side=self.team,
            index=self.index,
        )


class GameStatePayload(BaseModel):
    seed: int
    events: list[EventPayload]


class GameDataResponse(BaseModel):
    """Snapshot of a game. NOTE seed and events are nested under 'state', the board is top-level."""

    state: GameStatePayload
    words: list[str]
    one_layout: list[Color]
    two_layout: list[Color]

    @field_validator(*["one_layout", "two_layout"], mode="before")
    @classmethod
    def decode_layout(cls, value: Any) -> Any:
        # anything but a list is left for pydantic to reject
        if not isinstance(value, list):
            return value
        return [Color.from_wire(token) for token in value]

    @model_validator(mode="after")
    def validate_board(self) -> Self:
        if not len(self.words) == len(self.one_layout) == len(self.two_layout):
            raise InvalidRequestError(
                f"Board mismatch: {len(self.words)} words, but layouts of length {len(self.one_layout)} and {len(self.two_layout)}."
            )
        return self

    def to_game_data(self) -> GameData:
        return GameData(
            seed=self.state.seed,
            words=tuple(self.words),
            events=tuple(event.to_event() for event in self.state.events),
            one_layout=tuple(self.one_layout),
            two_layout=tuple(self.two_layout),
        )


class UpdateResponse(BaseModel):
    seed: int
    events: list[EventPayload]

    def to_update(self) -> Update:
        return Update(
            seed=self.seed, events=tuple(event.to_event() for event in self.events)
        )
