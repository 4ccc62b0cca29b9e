"""Implementation of (Game)Transport using httpx"""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel

from src.api.models import EventsRequest, GuessRequest, NewGameRequest
from src.core.config import Settings
from src.core.exceptions import TransportError
from src.transport.protocol import JSON

logger = logging.getLogger(__name__)

NEW_GAME_PATH = "/new-game"
EVENTS_PATH = "/events"
GUESS_PATH = "/guess"


class HTTPGameTransport:
    """JSON over HTTP POST. No retries: a failed request is reported once and the caller decides what to do."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.client = client or httpx.Client(
            base_url=settings.server_url,
            timeout=httpx.Timeout(settings.request_timeout, connect=5.0),
        )

    def new_game(self, request: NewGameRequest) -> JSON:
        return self._post(NEW_GAME_PATH, request)

    def fetch_events(self, request: EventsRequest) -> JSON:
        return self._post(EVENTS_PATH, request)

    def submit_guess(self, request: GuessRequest) -> JSON:
        return self._post(GUESS_PATH, request)

    def close(self) -> None:
        self.client.close()

    def _post(self, path: str, body: BaseModel) -> JSON:
        try:
            response = self.client.post(path, json=body.model_dump(mode="json"))
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise TransportError(f"POST {path} failed: {exc}") from exc
        except ValueError as exc:
            raise TransportError(f"POST {path} returned a non-JSON body.") from exc

        if not isinstance(payload, dict):
            raise TransportError(f"POST {path} returned {type(payload).__name__}, expected an object.")
        logger.debug("POST %s -> %d", path, response.status_code)
        return payload
