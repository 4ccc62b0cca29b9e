"""
The GameSession is the entrypoint into the domain layer for the service layer.

It is a value: every transition (folding events, re-deriving the local player) returns a new session,
so callers can detect changes by simple equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Self

from src.codenames.cell import Cell, build_cells
from src.codenames.events import Event, apply_events
from src.codenames.game_model import GameData
from src.core.config import TOTAL_GREEN
from src.core.shared_types import Color, DisplayState, EventType, Side, Status


@dataclass(frozen=True)
class Player:
    """The local viewer"""

    id: str
    side: Side = Side.NONE


@dataclass(frozen=True)
class GameSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    id: str
    seed: int
    cells: tuple[Cell, ...]
    player: Player
    # read-only view, only ever replaced by the reducer
    players: Mapping[str, Side] = field(default_factory=lambda: MappingProxyType({}))
    events: tuple[Event, ...] = ()  # most recent first

    @classmethod
    def new(cls, game_id: str, data: GameData, local_player_id: str) -> Self:
        """Build the board, replay the snapshot's events, then look up which side we are on."""
        empty = cls(
            id=game_id,
            seed=data.seed,
            cells=build_cells(data.words, data.one_layout, data.two_layout),
            player=Player(id=local_player_id),
        )
        return apply_events(data.events, empty).with_local_player()

    def with_local_player(self) -> Self:
        """Re-derive the local player's side from the roster (NONE if not on it)."""
        side = self.players.get(self.player.id, Side.NONE)
        if side == self.player.side:
            return self
        return replace(self, player=Player(id=self.player.id, side=side))

    # --- DERIVED VIEWS ---
    @property
    def last_event(self) -> int:
        """Watermark: highest event number already applied, 0 for a fresh game."""
        return max((event.number for event in self.events), default=0)

    @property
    def exposed_black(self) -> bool:
        return any(cell.display() == DisplayState.EXPOSED_BLACK for cell in self.cells)

    def remaining_green(self, total_green: int = TOTAL_GREEN) -> int:
        exposed_green = sum(
            1 for cell in self.cells if cell.display() == DisplayState.EXPOSED_GREEN
        )
        return total_green - exposed_green

    def status(self, total_green: int = TOTAL_GREEN) -> Status:
        """Exposing a black word loses the game, however many greens were found."""
        if self.exposed_black:
            return Status.LOST
        if self.remaining_green(total_green) <= 0:
            return Status.WON
        return Status.IN_PROGRESS

    def keycard(self, side: Side) -> list[Color]:
        """One side's secret colors, in board order."""
        return [cell.side_color(side) for cell in self.cells]

    def players_on(self, side: Side) -> list[str]:
        return sorted(
            player_id for player_id, player_side in self.players.items() if player_side == side
        )

    def event_log(self) -> list[str]:
        """Lines for the log panel, most recent first."""
        return [self._describe(event) for event in self.events]

    def _describe(self, event: Event) -> str:
        match event.type:
            case EventType.NEW_PLAYER:
                return f"{event.player_id} joined {event.side.label}"
            case EventType.PLAYER_LEFT:
                return f"{event.player_id} left {event.side.label}"
            case EventType.SET_TEAM:
                return f"{event.player_id} switched to {event.side.label}"
            case EventType.GUESS:
                if 0 <= event.index < len(self.cells):
                    return f"{event.side.label} tapped {self.cells[event.index].word}"
                return f"{event.side.label} tapped an unknown word (#{event.index})"
            case _:
                return f"Unknown event {event.type!r}"
