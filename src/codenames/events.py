"""
Events and the reducer.

The event log is the only source of truth: the roster and the board are caches which can always be
rebuilt by folding every event (oldest first) over an empty session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable

from src.codenames.cell import Cell
from src.core.shared_types import EventType, Side

if TYPE_CHECKING:
    from src.codenames.game import GameSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """
    An immutable, numbered fact issued by the server.
    NOTE 'type' is kept as the raw string so unknown event types survive decoding (and get logged + ignored).
    """

    number: int
    type: str
    player_id: str
    side: Side
    index: int = 0  # only meaningful for guesses


def apply_event(event: Event, session: GameSession) -> GameSession:
    """
    Fold one event into the session.
    ----

    Total function: unknown types and out-of-range indices have no effect on the roster/board,
    but the event is always recorded in the log (most recent first).

    NOTE the local player's side is NOT recomputed here. The caller does that once the whole batch is folded.
    """
    players = session.players
    cells = session.cells

    match event.type:
        case EventType.NEW_PLAYER | EventType.SET_TEAM:
            players = MappingProxyType({**players, event.player_id: event.side})
        case EventType.PLAYER_LEFT:
            players = MappingProxyType(
                {
                    player_id: side
                    for player_id, side in players.items()
                    if player_id != event.player_id
                }
            )
        case EventType.GUESS:
            cells = _tap_cell(cells, event.index, event.side)
        case _:
            logger.debug("Ignoring event #%d of unknown type %r", event.number, event.type)

    return replace(
        session, players=players, cells=cells, events=(event, *session.events)
    )


def apply_events(events: Iterable[Event], session: GameSession) -> GameSession:
    """Fold events in the order given. No deduplication or resequencing by event number."""
    for event in events:
        session = apply_event(event, session)
    return session


def _tap_cell(cells: tuple[Cell, ...], index: int, side: Side) -> tuple[Cell, ...]:
    if not 0 <= index < len(cells):
        logger.warning(
            "Guess for cell %d ignored: board only has %d cells", index, len(cells)
        )
        return cells
    return (*cells[:index], cells[index].tapped(side), *cells[index + 1 :])
