"""Column widgets for corkboard UI."""

from __future__ import annotations

from datetime import date

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Rule, Static

from corkboard.drag import DragKind
from corkboard.model.board import ColumnView
from corkboard.model.reorder import gap_to_index
from corkboard.ui.card import CardWidget
from corkboard.ui.drag import DraggableMixin, DropTarget


class ColumnTitle(Static, can_focus=True):
    """Column heading: title and card count. Focusable so empty columns can be selected."""

    DEFAULT_CSS = """
    ColumnTitle {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnTitle:focus {
        background: $primary;
    }
    """

    def __init__(self, column: ColumnView, column_index: int):
        count = len(column.cards)
        label = "card" if count == 1 else "cards"
        super().__init__(f"{column.title} ({count} {label})", markup=False)
        self.column = column
        self.column_index = column_index


class ColumnWidget(DraggableMixin, DropTarget, Vertical):
    """A single column on the board."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-left: thick $primary;
    }
    ColumnWidget.dragging {
        opacity: 0.6;
    }
    ColumnWidget.drag-over {
        background: $boost;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    DRAG_KIND = DragKind.COLUMN
    HORIZONTAL_ONLY = True

    def __init__(self, column: ColumnView, column_index: int, today: date | None = None):
        Vertical.__init__(self)
        self._init_draggable()
        self.column = column
        self.column_index = column_index
        self.today = today

    @property
    def column_id(self) -> str:
        return self.column.id

    def compose(self) -> ComposeResult:
        yield ColumnTitle(self.column, self.column_index)
        yield Rule()
        for card_index, card in enumerate(self.column.cards):
            yield CardWidget(card, self.column_index, card_index, today=self.today)

    def on_mount(self) -> None:
        if self.column.color is not None:
            self.styles.border_left = ("thick", self.column.color.main)

    # -- DraggableMixin: column being dragged --

    def drag_source(self) -> tuple[int, int | None]:
        return self.column_index, None

    # -- DropTarget: column accepting card drops --

    def drag_over(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        self.add_class("drag-over")
        return True

    def drag_away(self, draggable) -> None:
        self.remove_class("drag-over")

    def try_drop(self, draggable, x: int, y: int) -> bool:
        """Drop a card where the pointer is; anything else is left to the board."""
        self.remove_class("drag-over")
        tracker = self.screen.session.tracker
        source = tracker.source_position()
        gap = self.card_gap(y)
        if gap is None or source is None or source[1] is None:
            index = None
        else:
            index = gap_to_index(source[1], gap, source[0] == self.column_index)
        return tracker.attempt_drop(DragKind.CARD, self.column_index, index)

    def card_gap(self, screen_y: int) -> int | None:
        """Insert-before position for a pointer at screen_y, or None for the end."""
        cards = [c for c in self.children if isinstance(c, CardWidget)]
        for i, card in enumerate(cards):
            if screen_y < card.region.y + (card.region.height + 1) // 2:
                return i
        return None
