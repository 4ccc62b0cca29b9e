"""Unit tests for src/api/models.py"""

from typing import Any

import pytest
from pydantic import ValidationError

from src.api.models import (
    EventsRequest,
    GameDataResponse,
    GuessRequest,
    NewGameRequest,
    UpdateResponse,
)
from src.codenames.events import Event
from src.codenames.guess import Guess
from src.core.exceptions import DecodeError, InvalidRequestError
from src.core.shared_types import Color, Side


@pytest.fixture
def snapshot_json() -> dict[str, Any]:
    """What the server sends for a new game: seed/events nested under 'state'."""
    return {
        "state": {
            "seed": 42,
            "events": [
                {"number": 1, "type": "new_player", "player_id": "alice", "team": 1},
                {"number": 2, "type": "guess", "player_id": "alice", "team": 1, "index": 2},
            ],
        },
        "words": ["apple", "bank", "cell"],
        "one_layout": ["g", "b", "t"],
        "two_layout": ["t", "g", "b"],
    }


# -- Decoding - GameDataResponse --
def test_decode_snapshot(snapshot_json: dict[str, Any]) -> None:
    data = GameDataResponse.model_validate(snapshot_json).to_game_data()

    assert data.seed == 42
    assert data.words == ("apple", "bank", "cell")
    assert data.one_layout == (Color.GREEN, Color.BLACK, Color.TAN)
    assert data.two_layout == (Color.TAN, Color.GREEN, Color.BLACK)
    assert data.events == (
        Event(number=1, type="new_player", player_id="alice", side=Side.ONE, index=0),
        Event(number=2, type="guess", player_id="alice", side=Side.ONE, index=2),
    )


def test_snapshot_board_mismatch(snapshot_json: dict[str, Any]) -> None:
    snapshot_json["two_layout"] = ["t", "g"]
    with pytest.raises(InvalidRequestError):
        _ = GameDataResponse.model_validate(snapshot_json)


@pytest.mark.parametrize(
    "field, value",
    [
        ("words", "apple bank cell"),  # not a list
        ("one_layout", "gbt"),  # not a list either
    ],
)
def test_snapshot_invalid_field(snapshot_json: dict[str, Any], field: str, value: Any) -> None:
    snapshot_json[field] = value
    with pytest.raises(ValidationError):
        _ = GameDataResponse.model_validate(snapshot_json)


@pytest.mark.parametrize("layout", ["one_layout", "two_layout"])
def test_snapshot_unknown_color_token(snapshot_json: dict[str, Any], layout: str) -> None:
    snapshot_json[layout] = ["g", "x", "t"]
    with pytest.raises(DecodeError):
        _ = GameDataResponse.model_validate(snapshot_json)


def test_snapshot_missing_state(snapshot_json: dict[str, Any]) -> None:
    del snapshot_json["state"]
    with pytest.raises(ValidationError):
        _ = GameDataResponse.model_validate(snapshot_json)


# -- Decoding - UpdateResponse --
def test_decode_update() -> None:
    update = UpdateResponse.model_validate(
        {
            "seed": 42,
            "events": [
                {"number": 7, "type": "set_team", "player_id": "bob", "team": 2},
                {"number": 8, "type": "player_left", "player_id": "bob", "team": 0},
            ],
        }
    ).to_update()
    assert update.seed == 42
    assert [e.number for e in update.events] == [7, 8]
    assert update.events[0].side == Side.TWO
    assert update.events[1].side == Side.NONE


def test_unknown_event_type_survives_decoding() -> None:
    update = UpdateResponse.model_validate(
        {"seed": 1, "events": [{"number": 3, "type": "chat", "player_id": "bob", "team": 2}]}
    ).to_update()
    assert update.events[0].type == "chat"


def test_unknown_team_token_is_rejected() -> None:
    with pytest.raises(DecodeError):
        _ = UpdateResponse.model_validate(
            {"seed": 1, "events": [{"number": 3, "type": "guess", "player_id": "bob", "team": 5}]}
        )


# -- Encoding - requests --
def test_guess_request_wire_shape() -> None:
    guess = Guess(game_id="game-1", index=4, player_id="alice", side=Side.TWO, last_event=9)
    body = GuessRequest.from_guess(guess).model_dump(mode="json")
    assert body == {
        "game_id": "game-1",
        "index": 4,
        "player_id": "alice",
        "team": 2,
        "last_event": 9,
    }


def test_new_game_request_wire_shape() -> None:
    assert NewGameRequest(game_id="game-1").model_dump(mode="json") == {"game_id": "game-1"}


def test_events_request_wire_shape() -> None:
    request = EventsRequest(game_id="game-1", player_id="alice", team=Side.NONE, last_event=0)
    assert request.model_dump(mode="json") == {
        "game_id": "game-1",
        "player_id": "alice",
        "team": 0,
        "last_event": 0,
    }


@pytest.mark.parametrize("game_id", ["", "   "])
def test_empty_game_id(game_id: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(game_id=game_id)


def test_empty_player_id() -> None:
    with pytest.raises(InvalidRequestError):
        _ = GuessRequest(game_id="game-1", index=0, player_id="", team=Side.ONE, last_event=0)


def test_negative_index() -> None:
    with pytest.raises(InvalidRequestError):
        _ = GuessRequest(game_id="game-1", index=-1, player_id="alice", team=Side.ONE, last_event=0)
