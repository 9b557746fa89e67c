"""Application context: one board, its drag tracker, and user preferences."""

from __future__ import annotations

import logging

from corkboard.drag import DragTracker
from corkboard.model.board import Board
from corkboard.model.column import apply_palette
from corkboard.model.loader import load_board
from corkboard.palette import THEMES, get_palette, next_theme
from corkboard.prefs import Preferences, PrefsStore
from corkboard.seed import SeedSource, load_seed
from corkboard.store import BoardStore

logger = logging.getLogger(__name__)


class BoardSession:
    """Owns everything one running board needs.

    Created once at startup and handed to the UI; there is no global
    board or drag state.
    """

    def __init__(
        self,
        board: Board,
        prefs: Preferences | None = None,
        prefs_store: PrefsStore | None = None,
        board_store: BoardStore | None = None,
    ):
        self.board = board
        self.tracker = DragTracker(board)
        self.prefs = prefs or Preferences()
        self.prefs_store = prefs_store
        self.board_store = board_store

    @classmethod
    async def start(
        cls,
        source: SeedSource,
        prefs_store: PrefsStore | None = None,
        board_store: BoardStore | None = None,
    ) -> tuple[BoardSession, bool]:
        """Load preferences, seed the board, and build a session.

        Returns (session, fallback_used).
        """
        prefs = (prefs_store.load() if prefs_store else None) or Preferences()
        result = await load_seed(source)
        if result.fallback_used and board_store is not None and board_store.exists():
            # never overwrite a board file that could not be read
            logger.warning("board file %s was not loaded; it will not be saved", board_store.path)
            board_store = None
        board = load_board(result.data, palette=get_palette(prefs.theme))
        return cls(board, prefs, prefs_store, board_store), result.fallback_used

    @property
    def persists_board(self) -> bool:
        return self.board_store is not None

    def save_prefs(self) -> None:
        if self.prefs_store is not None:
            self.prefs_store.save(self.prefs)

    def save_board(self) -> bool:
        """Write the board if a board file is configured."""
        if self.board_store is None:
            return False
        return self.board_store.save(self.board)

    def select_theme(self, theme: str) -> bool:
        """Recolor columns with the theme's palette and remember the choice."""
        if theme not in THEMES:
            logger.debug("unknown theme %r", theme)
            return False
        self.prefs.theme = theme
        apply_palette(self.board, get_palette(theme))
        self.save_prefs()
        return True

    def cycle_theme(self) -> str:
        theme = next_theme(self.prefs.theme)
        self.select_theme(theme)
        return theme

    def rename_user(self, name: str) -> bool:
        name = name.strip()
        if not name or name == self.prefs.name:
            return False
        self.prefs.name = name
        self.save_prefs()
        return True

    def set_avatar(self, avatar: str | None) -> None:
        self.prefs.avatar = avatar or None
        self.save_prefs()
