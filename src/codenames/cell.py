"""A word on the board, with one secret color and one exposure flag per side."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from src.core.exceptions import GameStateError
from src.core.shared_types import Color, DisplayState, Side


@dataclass(frozen=True)
class Slot:
    """One side's view of a cell: its keycard color, and whether that side tapped it."""

    exposed: bool
    color: Color


@dataclass(frozen=True)
class Cell:
    index: int
    word: str
    a: Slot  # Side One's keycard
    b: Slot  # Side Two's keycard

    def tapped(self, side: Side) -> Cell:
        """Return a copy with the given side's exposure flag set. Nothing else changes."""
        match side:
            case Side.ONE:
                return replace(self, a=replace(self.a, exposed=True))
            case Side.TWO:
                return replace(self, b=replace(self.b, exposed=True))
            case Side.NONE:
                return self

    def is_exposed(self, side: Side) -> bool:
        match side:
            case Side.ONE:
                return self.a.exposed
            case Side.TWO:
                return self.b.exposed
            case Side.NONE:
                return False

    def display(self) -> DisplayState:
        """
        What the shared board shows for this cell.
        ----

        NOTE Green is checked before Black. With standard keycards a cell cannot be exposed as both.
        """
        slots = (self.a, self.b)
        if any(slot.exposed and slot.color == Color.GREEN for slot in slots):
            return DisplayState.EXPOSED_GREEN
        if any(slot.exposed and slot.color == Color.BLACK for slot in slots):
            return DisplayState.EXPOSED_BLACK
        return DisplayState.UNEXPOSED

    def side_color(self, side: Side) -> Color:
        """Keycard color for one side only, so a team never gets to see the other team's keycard."""
        match side:
            case Side.ONE:
                return self.a.color
            case Side.TWO:
                return self.b.color
            case Side.NONE:
                raise GameStateError("Spectators have no keycard.")


def build_cells(
    words: Sequence[str], one_layout: Sequence[Color], two_layout: Sequence[Color]
) -> tuple[Cell, ...]:
    """Zip the words with both keycards. Cell indices follow layout order: 0..N-1"""
    if not len(words) == len(one_layout) == len(two_layout):
        raise GameStateError(
            f"Board mismatch: {len(words)} words, {len(one_layout)} / {len(two_layout)} layout entries."
        )
    return tuple(
        Cell(
            index=index,
            word=word,
            a=Slot(exposed=False, color=one_color),
            b=Slot(exposed=False, color=two_color),
        )
        for index, (word, one_color, two_color) in enumerate(
            zip(words, one_layout, two_layout)
        )
    )
