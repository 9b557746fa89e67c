"""Board screen showing kanban columns and cards."""

from __future__ import annotations

from datetime import date

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Static

from corkboard.drag import BeginDrag, DragKind, Drop, EndDrag
from corkboard.model.board import BoardSnapshot
from corkboard.model.card import add_card, parse_due_date, remove_card, update_card
from corkboard.model.column import add_column, remove_column, rename_column
from corkboard.model.reorder import gap_to_index
from corkboard.session import BoardSession
from corkboard.ui.card import CardWidget
from corkboard.ui.column import ColumnTitle, ColumnWidget
from corkboard.ui.dialogs import CardEditor, ConfirmDialog, TextPrompt
from corkboard.ui.drag import DropTarget

ICON_USER = "\U0001f464"
ICON_PALETTE = "\U0001f3a8"


class BoardScreen(DropTarget, Screen):
    """Main board screen. Redrawn from a fresh snapshot after every change."""

    DEFAULT_CSS = """
    BoardScreen #board-header {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    BoardScreen #columns {
        height: 1fr;
        overflow-x: auto;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        ("a", "add_card", "Add card"),
        ("n", "add_column", "New list"),
        ("e", "edit", "Edit"),
        ("r", "rename_column", "Rename list"),
        ("d", "delete", "Delete"),
        ("t", "cycle_theme", "Theme"),
        ("u", "rename_user", "Name"),
        Binding("shift+up", "move_card(0, -1)", "Move up", show=False),
        Binding("shift+down", "move_card(0, 1)", "Move down", show=False),
        Binding("shift+left", "move_card(-1, 0)", "Move left", show=False),
        Binding("shift+right", "move_card(1, 0)", "Move right", show=False),
        Binding("ctrl+left", "move_column(-1)", "List left", show=False),
        Binding("ctrl+right", "move_column(1)", "List right", show=False),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, session: BoardSession, today: date | None = None):
        super().__init__()
        self.session = session
        self.today = today
        self.active_draggable = None
        self._focus_key: tuple[str, str] | None = None
        self._rebuild_pending = False
        self._unwatch = None

    @property
    def snapshot(self) -> BoardSnapshot:
        return self.session.board.snapshot()

    def compose(self) -> ComposeResult:
        yield Static(self._header_text(), id="board-header", markup=False)
        with Horizontal(id="columns"):
            yield from self._column_widgets(self.snapshot)
        yield Footer()

    def on_mount(self) -> None:
        self._unwatch = self.session.board.watch(self._on_board_changed)
        self.call_after_refresh(self._restore_focus)

    def on_unmount(self) -> None:
        if self._unwatch is not None:
            self._unwatch()
            self._unwatch = None

    def _header_text(self) -> str:
        prefs = self.session.prefs
        return f"corkboard  {ICON_USER} {prefs.name}  {ICON_PALETTE} {prefs.theme}"

    def _column_widgets(self, snap: BoardSnapshot) -> list[ColumnWidget]:
        return [ColumnWidget(col, i, today=self.today) for i, col in enumerate(snap.columns)]

    # -- Redraw --

    def _on_board_changed(self, snap: BoardSnapshot) -> None:
        if self._focus_key is None:
            self._focus_key = self._key_of(self.focused)
        if not self._rebuild_pending:
            self._rebuild_pending = True
            self.call_later(self.rebuild)

    async def rebuild(self) -> None:
        """Replace every column widget with ones drawn from the current snapshot."""
        self._rebuild_pending = False
        container = self.query_one("#columns", Horizontal)
        await container.remove_children()
        await container.mount_all(self._column_widgets(self.snapshot))
        self.update_header()
        self._restore_focus()

    def update_header(self) -> None:
        self.query_one("#board-header", Static).update(self._header_text())

    @staticmethod
    def _key_of(widget) -> tuple[str, str] | None:
        if isinstance(widget, CardWidget):
            return ("card", widget.card_id)
        if isinstance(widget, ColumnTitle):
            return ("column", widget.column.id)
        return None

    def _restore_focus(self) -> None:
        key, self._focus_key = self._focus_key, None
        if key is not None:
            kind, item_id = key
            for widget in self.query(CardWidget if kind == "card" else ColumnTitle):
                if self._key_of(widget) == key:
                    widget.focus()
                    return
        if not isinstance(self.focused, (CardWidget, ColumnTitle)):
            titles = list(self.query(ColumnTitle))
            if titles:
                titles[0].focus()

    # -- Selection --

    def current_column(self) -> int | None:
        focused = self.focused
        if isinstance(focused, (CardWidget, ColumnTitle)):
            return focused.column_index
        return 0 if self.session.board.columns else None

    def current_card(self) -> CardWidget | None:
        return self.focused if isinstance(self.focused, CardWidget) else None

    # -- Mouse: screen routes pointer events to the active draggable --

    def on_mouse_move(self, event) -> None:
        if self.active_draggable is not None:
            self.active_draggable._drag_move(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self.active_draggable is not None:
            self.active_draggable._drag_finish(event.screen_x, event.screen_y)

    def action_cancel_drag(self) -> None:
        if self.active_draggable is not None:
            self.active_draggable._drag_cancel()

    # -- DropTarget: board accepting column drops --

    def try_drop(self, draggable, x: int, y: int) -> bool:
        tracker = self.session.tracker
        source = tracker.source_position()
        if source is None:
            return False
        columns = list(self.query(ColumnWidget))
        gap = len(columns)
        for i, col in enumerate(columns):
            if x < col.region.x + col.region.width // 2:
                gap = i
                break
        return tracker.attempt_drop(DragKind.COLUMN, gap_to_index(source[0], gap, True))

    # -- Keyboard moves go through the same drag pipeline --

    def action_move_card(self, dx: int, dy: int) -> None:
        card = self.current_card()
        if card is None:
            return
        board = self.session.board
        to_column = card.column_index + dx
        if not 0 <= to_column < len(board.columns):
            return
        if dx:
            to_card = min(card.card_index, len(board.columns[to_column].cards))
        else:
            to_card = card.card_index + dy
            if to_card < 0:
                return
        self._focus_key = ("card", card.card_id)
        tracker = self.session.tracker
        tracker.dispatch(BeginDrag(DragKind.CARD, card.column_index, card.card_index))
        tracker.dispatch(Drop(DragKind.CARD, to_column, to_card))
        tracker.dispatch(EndDrag())

    def action_move_column(self, dx: int) -> None:
        index = self.current_column()
        if index is None or not 0 <= index + dx < len(self.session.board.columns):
            return
        self._focus_key = self._key_of(self.focused)
        tracker = self.session.tracker
        tracker.dispatch(BeginDrag(DragKind.COLUMN, index))
        tracker.dispatch(Drop(DragKind.COLUMN, index + dx))
        tracker.dispatch(EndDrag())

    # -- Editing --

    def action_add_card(self) -> None:
        index = self.current_column()
        if index is None:
            return
        column_id = self.session.board.columns[index].id

        def done(text: str | None) -> None:
            if text is None:
                return
            card = add_card(self.session.board, column_id, text)
            if card is not None:
                self._focus_key = ("card", card.id)

        self.app.push_screen(TextPrompt("New card", placeholder="Enter a title for this card..."), done)

    def action_add_column(self) -> None:
        def done(title: str | None) -> None:
            if title is None:
                return
            col = add_column(self.session.board, title)
            if col is not None:
                self._focus_key = ("column", col.id)

        self.app.push_screen(TextPrompt("New list", placeholder="e.g. In Review", max_length=50), done)

    def action_rename_column(self) -> None:
        index = self.current_column()
        if index is None:
            return
        column = self.session.board.columns[index]
        column_id = column.id

        def done(title: str | None) -> None:
            if title is not None:
                rename_column(self.session.board, column_id, title)

        self.app.push_screen(TextPrompt("Rename list", value=column.title, max_length=50), done)

    def action_edit(self) -> None:
        card = self.current_card()
        if card is None:
            self.action_rename_column()
            return
        column_id = self.session.board.columns[card.column_index].id
        card_id = card.card_id

        def done(values: dict | None) -> None:
            if values is None:
                return
            try:
                due = parse_due_date(values["due"])
            except ValueError:
                self.notify(f"Invalid due date: {values['due']}", severity="error")
                return
            self._focus_key = ("card", card_id)
            update_card(
                self.session.board,
                column_id,
                card_id,
                text=values["text"],
                description=values["description"],
                due_date=due,
            )

        self.app.push_screen(CardEditor(card.card), done)

    def action_delete(self) -> None:
        board = self.session.board
        card = self.current_card()
        if card is not None:
            column_id = board.columns[card.column_index].id
            card_id = card.card_id
            message = f'Are you sure you want to delete this card: "{card.card.text}"?'

            def done(confirmed: bool | None) -> None:
                if confirmed:
                    remove_card(self.session.board, column_id, card_id)

            self.app.push_screen(ConfirmDialog(message, "Delete Card"), done)
            return

        index = self.current_column()
        if index is None:
            return
        column = board.columns[index]
        column_id = column.id

        def done_column(confirmed: bool | None) -> None:
            if confirmed:
                remove_column(self.session.board, column_id)

        message = f'Delete the list "{column.title}" and all of its cards?'
        self.app.push_screen(ConfirmDialog(message, "Delete List"), done_column)

    def action_cycle_theme(self) -> None:
        theme = self.session.cycle_theme()
        self.update_header()
        self.notify(f"Theme: {theme}")

    def action_rename_user(self) -> None:
        def done(name: str | None) -> None:
            if name is not None and self.session.rename_user(name):
                self.update_header()

        self.app.push_screen(TextPrompt("Your name", value=self.session.prefs.name, max_length=20), done)

    def action_save(self) -> None:
        if not self.session.persists_board:
            self.notify("No board file; start with --board to save", severity="warning")
            return
        if self.session.save_board():
            self.notify("Saved")
        else:
            self.notify("Could not save board", severity="error")
