"""Merging a batch of events pushed by the server into the local session."""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from src.codenames.events import apply_events
from src.codenames.game import GameSession
from src.codenames.game_model import Update

logger = logging.getLogger(__name__)


class ReconcileOutcome(Enum):
    APPLIED = auto()
    STALE_GAME = auto()  # batch belongs to another board (seed mismatch). Session left unchanged.
    FAILED = auto()  # batch never arrived (transport / decode failure). Session left unchanged.


@dataclass(frozen=True)
class Reconciliation:
    session: GameSession
    outcome: ReconcileOutcome

    @property
    def applied(self) -> bool:
        """The batch was folded in. An empty batch is applied too: compare sessions to detect changes."""
        return self.outcome == ReconcileOutcome.APPLIED


def reconcile(session: GameSession, update: Update) -> Reconciliation:
    """
    Apply a batch if (and only if) it describes the same game instance.
    ----

    NOTE the transport is trusted to deliver each batch once, in order, relative to the watermark it sent.
    Events are folded exactly as delivered: no deduplication, no gap detection.
    A late response with a matching seed is folded like any other.
    """
    if update.seed != session.seed:
        logger.warning(
            "Dropping %d event(s) for game %s: seed %d does not match current seed %d",
            len(update.events),
            session.id,
            update.seed,
            session.seed,
        )
        return Reconciliation(session, ReconcileOutcome.STALE_GAME)

    updated = apply_events(update.events, session).with_local_player()
    return Reconciliation(updated, ReconcileOutcome.APPLIED)


def failed(session: GameSession) -> Reconciliation:
    return Reconciliation(session, ReconcileOutcome.FAILED)
