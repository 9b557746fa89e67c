"""Main Textual application for corkboard."""

from __future__ import annotations

from textual.app import App

from corkboard.prefs import PrefsStore
from corkboard.seed import FallbackSeed, SeedSource
from corkboard.session import BoardSession
from corkboard.store import BoardStore
from corkboard.ui.board import BoardScreen


class CorkboardApp(App):
    """Terminal kanban board."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "corkboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(
        self,
        source: SeedSource | None = None,
        prefs_store: PrefsStore | None = None,
        board_store: BoardStore | None = None,
        session: BoardSession | None = None,
    ):
        super().__init__()
        self.source = source or FallbackSeed()
        self.prefs_store = prefs_store
        self.board_store = board_store
        self.session = session

    async def on_mount(self) -> None:
        fallback_used = False
        if self.session is None:
            self.session, fallback_used = await BoardSession.start(self.source, self.prefs_store, self.board_store)
        self.push_screen(BoardScreen(self.session))
        if fallback_used:
            self.notify("Could not load board. Using sample data.", severity="warning")
            if self.board_store is not None and not self.session.persists_board:
                self.notify(f"{self.board_store.path} was not loaded and will not be overwritten.", severity="warning")

    def action_quit(self) -> None:
        """Save the board (when a board file is set) and quit."""
        if self.session is not None:
            self.session.save_board()
        self.exit()
