"""Protocol transport (implemented over HTTP with httpx, can be swapped for websockets etc.)"""

from typing import Any, Protocol

from src.api.models import EventsRequest, GuessRequest, NewGameRequest

JSON = dict[str, Any]


class GameTransport(Protocol):
    """Talks to the game server. Returns decoded JSON bodies, raises TransportError on failure."""

    def new_game(self, request: NewGameRequest) -> JSON:
        """Create (or join) the game with this id and return its snapshot."""
        ...

    def fetch_events(self, request: EventsRequest) -> JSON:
        """Return the events issued after request.last_event."""
        ...

    def submit_guess(self, request: GuessRequest) -> JSON:
        """Submit a guess and return the events issued after request.last_event."""
        ...
