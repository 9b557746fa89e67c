"""Board state: columns of cards, change notification and snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from corkboard.palette import DEFAULT_THEME, ColorPair, Palette, color_for_index, get_palette


@dataclass
class Card:
    """A single work item. Owned by exactly one column."""

    id: str
    text: str
    description: str = ""
    due_date: date | None = None


@dataclass
class Column:
    """A titled, ordered list of cards."""

    id: str
    title: str
    cards: list[Card] = field(default_factory=list)
    color: ColorPair | None = None


@dataclass(frozen=True)
class CardView:
    """Read-only view of a card."""

    id: str
    text: str
    description: str
    due_date: date | None


@dataclass(frozen=True)
class ColumnView:
    """Read-only view of a column."""

    id: str
    title: str
    cards: tuple[CardView, ...]
    color: ColorPair | None


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable view of the whole board at one point in time."""

    columns: tuple[ColumnView, ...] = ()

    def column_titles(self) -> list[str]:
        return [c.title for c in self.columns]

    def card_texts(self, column_index: int) -> list[str]:
        return [c.text for c in self.columns[column_index].cards]


Watcher = Callable[[BoardSnapshot], None]


class Board:
    """Ordered columns of cards, with watchers notified after each change.

    Mutations live in ``corkboard.model.card``, ``corkboard.model.column``
    and ``corkboard.model.reorder``. Each one finishes its edit before
    calling ``notify()``, so watchers only ever see complete states.
    """

    def __init__(self, columns: list[Column] | None = None, palette: Palette | None = None) -> None:
        self.columns: list[Column] = list(columns or [])
        self.palette: Palette = palette or get_palette(DEFAULT_THEME)
        self._watchers: list[Watcher] = []
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def watch(self, callback: Watcher) -> Callable[[], None]:
        """Watch for board changes. Returns an unwatch callable."""
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def notify(self) -> None:
        """Bump the version and hand every watcher a fresh snapshot."""
        self._version += 1
        snap = self.snapshot()
        for cb in list(self._watchers):
            cb(snap)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            columns=tuple(
                ColumnView(
                    id=col.id,
                    title=col.title,
                    cards=tuple(CardView(c.id, c.text, c.description, c.due_date) for c in col.cards),
                    color=col.color,
                )
                for col in self.columns
            )
        )

    def color_for(self, index: int) -> ColorPair:
        return color_for_index(self.palette, index)

    def find_column(self, column_id: str) -> Column | None:
        for col in self.columns:
            if col.id == column_id:
                return col
        return None

    def column_index(self, column_id: str) -> int | None:
        for i, col in enumerate(self.columns):
            if col.id == column_id:
                return i
        return None

    def find_card(self, card_id: str) -> tuple[Column | None, Card | None]:
        """Find a card and the column holding it."""
        for col in self.columns:
            for card in col.cards:
                if card.id == card_id:
                    return col, card
        return None, None

    def card_position(self, card_id: str) -> tuple[int, int] | None:
        """(column_index, card_index) of a card, or None if absent."""
        for ci, col in enumerate(self.columns):
            for ki, card in enumerate(col.cards):
                if card.id == card_id:
                    return ci, ki
        return None

    def card_count(self) -> int:
        return sum(len(col.cards) for col in self.columns)

    def all_ids(self) -> set[str]:
        """Every column and card ID currently on the board."""
        ids = {col.id for col in self.columns}
        for col in self.columns:
            ids.update(card.id for card in col.cards)
        return ids

    def __repr__(self) -> str:
        titles = ", ".join(col.title for col in self.columns)
        return f"<Board [{titles}]>"
