"""Card widget for corkboard UI."""

from __future__ import annotations

from datetime import date

from textual.app import ComposeResult
from textual.widgets import Static

from corkboard.drag import DragKind
from corkboard.model.board import CardView
from corkboard.model.card import format_due_date, is_overdue
from corkboard.ui.drag import DraggableMixin

ICON_CALENDAR = "\U0001f4c5"


class PlainStatic(Static):
    """Static that doesn't allow text selection."""

    ALLOW_SELECT = False


class CardWidget(DraggableMixin, Static, can_focus=True):
    """A single card, drawn from a snapshot view."""

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget.dragging {
        opacity: 0.5;
    }
    CardWidget #card-title {
        text-style: bold;
    }
    CardWidget #card-description {
        color: $text-muted;
        height: 1;
    }
    CardWidget #card-due {
        color: $success;
    }
    CardWidget #card-due.overdue {
        color: $error;
    }
    """

    DRAG_KIND = DragKind.CARD

    def __init__(self, card: CardView, column_index: int, card_index: int, today: date | None = None):
        Static.__init__(self)
        self._init_draggable()
        self.card = card
        self.column_index = column_index
        self.card_index = card_index
        self.today = today

    @property
    def card_id(self) -> str:
        return self.card.id

    def compose(self) -> ComposeResult:
        yield PlainStatic(self.card.text, id="card-title", markup=False)
        if self.card.description:
            yield PlainStatic(self.card.description, id="card-description", markup=False)
        if self.card.due_date:
            due = PlainStatic(f"{ICON_CALENDAR} {format_due_date(self.card.due_date)}", id="card-due")
            if is_overdue(self.card.due_date, self.today):
                due.add_class("overdue")
            yield due

    def drag_source(self) -> tuple[int, int | None]:
        return self.column_index, self.card_index

    def draggable_clicked(self) -> None:
        self.focus()
