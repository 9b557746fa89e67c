"""Textual UI for corkboard."""

from corkboard.ui.app import CorkboardApp
from corkboard.ui.board import BoardScreen

__all__ = [
    "BoardScreen",
    "CorkboardApp",
]
