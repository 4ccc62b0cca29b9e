"""Deciding whether tapping a word should be sent to the server."""

from dataclasses import dataclass
from typing import Optional

from src.codenames.game import GameSession
from src.core.shared_types import Side


@dataclass(frozen=True)
class Guess:
    """Everything the server needs to arbitrate a tap."""

    game_id: str
    index: int
    player_id: str
    side: Side
    last_event: int  # watermark, so the server only returns events we have not applied yet


def pick_word(session: GameSession, index: int) -> Optional[Guess]:
    """
    Turn a tap on a word into a guess, if it is allowed.
    ----

    * Spectators cannot guess.
    * A word the other side already exposed cannot be guessed.
    NOTE a word your own side already exposed is NOT blocked here. The server has the final say.

    Does not touch the session: the board only changes once the server's response is reconciled.
    """
    player = session.player
    if player.side == Side.NONE:
        return None
    if not 0 <= index < len(session.cells):
        return None
    if session.cells[index].is_exposed(player.side.opposite):
        return None
    return Guess(
        game_id=session.id,
        index=index,
        player_id=player.id,
        side=player.side,
        last_event=session.last_event,
    )
