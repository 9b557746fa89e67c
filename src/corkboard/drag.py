"""Drag session tracking: turns drag intents into board moves.

At most one drag session is alive. It records where the drag started by
ID, not index, and resolves live indices only when something is dropped,
so a card deleted or moved by another control mid-drag cannot make the
drop act on the wrong item.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from corkboard.model.board import Board
from corkboard.model.reorder import move_card, move_column

logger = logging.getLogger(__name__)


class DragKind(Enum):
    CARD = "card"
    COLUMN = "column"


@dataclass(frozen=True)
class DragSession:
    """Provenance of the drag in flight."""

    kind: DragKind
    column_id: str
    card_id: str | None = None


@dataclass(frozen=True)
class BeginDrag:
    kind: DragKind
    column_index: int
    card_index: int | None = None


@dataclass(frozen=True)
class EndDrag:
    pass


@dataclass(frozen=True)
class Drop:
    kind: DragKind
    column_index: int
    card_index: int | None = None


Intent = BeginDrag | EndDrag | Drop


class DragTracker:
    """Holds the single in-flight drag and applies drops to the board.

    States: idle (``session is None``), dragging a card, dragging a
    column. Drops while idle, or of the wrong kind, are ignored.
    """

    def __init__(self, board: Board):
        self.board = board
        self.session: DragSession | None = None

    @property
    def active(self) -> bool:
        return self.session is not None

    @property
    def kind(self) -> DragKind | None:
        return self.session.kind if self.session else None

    def begin_drag(self, kind: DragKind, column_index: int, card_index: int | None = None) -> DragSession | None:
        """Start a drag from the given position, replacing any live session.

        Positions that don't resolve to a column (or card) leave the
        tracker idle.
        """
        if self.session is not None:
            logger.debug("replacing live drag session %r", self.session)
            self.session = None

        if not 0 <= column_index < len(self.board.columns):
            return None
        column = self.board.columns[column_index]

        if kind is DragKind.CARD:
            if card_index is None or not 0 <= card_index < len(column.cards):
                return None
            self.session = DragSession(kind, column.id, column.cards[card_index].id)
        else:
            self.session = DragSession(kind, column.id)
        return self.session

    def end_drag(self) -> None:
        """End the gesture, dropped or not."""
        self.session = None

    def source_position(self) -> tuple[int, int | None] | None:
        """Live (column_index, card_index) of the dragged item, or None if it is gone."""
        if self.session is None:
            return None
        if self.session.kind is DragKind.CARD:
            return self.board.card_position(self.session.card_id)
        index = self.board.column_index(self.session.column_id)
        return None if index is None else (index, None)

    def attempt_drop(self, kind: DragKind, column_index: int, card_index: int | None = None) -> bool:
        """Drop the dragged item at the target. Returns True if the board changed.

        For cards, ``card_index=None`` means the column's empty area and
        appends. The session stays alive until ``end_drag``.
        """
        if self.session is None:
            logger.debug("drop ignored: no drag in progress")
            return False
        if kind is not self.session.kind:
            logger.debug("drop ignored: %s dropped on %s target", self.session.kind.value, kind.value)
            return False

        source = self.source_position()
        if source is None:
            logger.debug("drop ignored: dragged %s no longer exists", kind.value)
            return False

        if kind is DragKind.COLUMN:
            return move_column(self.board, source[0], column_index)

        if not 0 <= column_index < len(self.board.columns):
            return False
        if card_index is None:
            card_index = len(self.board.columns[column_index].cards)
        return move_card(self.board, source[0], source[1], column_index, card_index)

    def dispatch(self, intent: Intent) -> bool:
        """Process one intent to completion. Returns True if the board changed."""
        if isinstance(intent, BeginDrag):
            self.begin_drag(intent.kind, intent.column_index, intent.card_index)
        elif isinstance(intent, EndDrag):
            self.end_drag()
        elif isinstance(intent, Drop):
            return self.attempt_drop(intent.kind, intent.column_index, intent.card_index)
        return False
