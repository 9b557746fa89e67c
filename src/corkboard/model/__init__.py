"""Board model: columns, cards and reordering."""

from corkboard.model.board import Board, BoardSnapshot, Card, CardView, Column, ColumnView
from corkboard.model.card import add_card, is_overdue, remove_card, update_card
from corkboard.model.column import add_column, apply_palette, remove_column, rename_column
from corkboard.model.loader import load_board
from corkboard.model.reorder import gap_to_index, move_card, move_column
from corkboard.model.writer import dump_board

__all__ = [
    "Board",
    "BoardSnapshot",
    "Card",
    "CardView",
    "Column",
    "ColumnView",
    "add_card",
    "add_column",
    "apply_palette",
    "dump_board",
    "gap_to_index",
    "is_overdue",
    "load_board",
    "move_card",
    "move_column",
    "remove_card",
    "remove_column",
    "rename_column",
    "update_card",
]
