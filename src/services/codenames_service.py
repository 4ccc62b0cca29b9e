"""Orchestration of communication from the transport to the game logic (and the reverse direction)."""

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from src.api.models import (
    EventsRequest,
    GameDataResponse,
    GuessRequest,
    NewGameRequest,
    UpdateResponse,
)
from src.codenames.game import GameSession
from src.codenames.game_model import GameData, Update
from src.codenames.guess import pick_word
from src.codenames.reconcile import Reconciliation, failed, reconcile
from src.core.config import Settings
from src.core.exceptions import (
    CodenamesError,
    DecodeError,
    GameStateError,
    InvalidRequestError,
)
from src.core.shared_types import Status
from src.transport.protocol import JSON, GameTransport

logger = logging.getLogger(__name__)


class CodenamesService:
    """Owns the current GameSession. Every successful reconciliation replaces it wholesale."""

    def __init__(self, transport: GameTransport, settings: Settings) -> None:
        self.transport = transport
        self.settings = settings
        self._session: Optional[GameSession] = None

    @property
    def session(self) -> GameSession:
        if self._session is None:
            raise GameStateError("No game in progress. Start a game first.")
        return self._session

    # -- Client actions --
    def start_game(self, game_id: str, player_id: str) -> Optional[GameSession]:
        """
        Fetch a game's snapshot and build a fresh session from it.
        ----

        On failure the previous session (if any) is kept and None is returned.
        """
        try:
            if not player_id.strip():
                raise InvalidRequestError("Player id cannot be empty.")
            data = self._decode_game_data(self.transport.new_game(NewGameRequest(game_id=game_id)))
            session = GameSession.new(game_id, data, player_id)
        except CodenamesError as exc:
            logger.warning("Could not start game %s: %s", game_id, exc)
            return None

        logger.info(
            "Joined game %s (seed %d) as %s, %d event(s) replayed",
            game_id,
            session.seed,
            player_id,
            len(session.events),
        )
        self._session = session
        return session

    def poll(self) -> Reconciliation:
        """Ask the server for anything newer than our watermark."""
        session = self.session

        def send() -> JSON:
            request = EventsRequest(
                game_id=session.id,
                player_id=session.player.id,
                team=session.player.side,
                last_event=session.last_event,
            )
            return self.transport.fetch_events(request)

        return self._reconcile_response(send)

    def pick_word(self, index: int) -> Optional[Reconciliation]:
        """
        The local player tapped a word.
        ----

        Returns None when the tap is not allowed (nothing is sent).
        Otherwise the guess is submitted and the server's batch reconciled.
        """
        guess = pick_word(self.session, index)
        if guess is None:
            logger.debug("Tap on cell %d not sent", index)
            return None
        return self._reconcile_response(
            lambda: self.transport.submit_guess(GuessRequest.from_guess(guess))
        )

    # -- Derived views, using the configured board constants --
    def status(self) -> Status:
        return self.session.status(self.settings.total_green)

    def remaining_green(self) -> int:
        return self.session.remaining_green(self.settings.total_green)

    # -- Internal helpers --
    def _reconcile_response(self, send: Callable[[], JSON]) -> Reconciliation:
        """Build and send a request, and merge the returned batch. Any failure leaves the session unchanged."""
        session = self.session
        try:
            update = self._decode_update(send())
        except CodenamesError as exc:
            logger.warning("Update for game %s failed: %s", session.id, exc)
            return failed(session)

        result = reconcile(session, update)
        self._session = result.session
        return result

    def _decode_game_data(self, payload: JSON) -> GameData:
        try:
            response = GameDataResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"Invalid game snapshot: {exc}") from exc
        data = response.to_game_data()
        if len(data.words) != self.settings.board_size:
            logger.warning(
                "Board has %d words, expected %d", len(data.words), self.settings.board_size
            )
        return data

    def _decode_update(self, payload: JSON) -> Update:
        try:
            return UpdateResponse.model_validate(payload).to_update()
        except ValidationError as exc:
            raise DecodeError(f"Invalid update: {exc}") from exc
