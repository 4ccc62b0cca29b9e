"""Custom exceptions shared by all layers"""


class CodenamesError(Exception):
    """Top-level exception. Callers can catch this to handle any error raised by this package."""


class GameStateError(CodenamesError):
    """The requested operation does not make sense for the current game state."""


class InvalidRequestError(CodenamesError):
    """A request/response body failed validation."""


class DecodeError(CodenamesError):
    """A wire token (side, color, ...) could not be decoded."""


class TransportError(CodenamesError):
    """Talking to the game server failed (network error, bad status code, non-JSON body)."""
