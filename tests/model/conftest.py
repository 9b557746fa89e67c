"""Shared test helpers for model tests."""

from datetime import date

from corkboard.model.board import Board, Card, Column
from corkboard.palette import THEMES


def _make_card(card_id, text, description="", due=None):
    """Helper to build a card."""
    return Card(id=card_id, text=text, description=description, due_date=due)


def _make_column(column_id, title, cards=None, color=None):
    """Helper to build a column. Cards may be given as texts; IDs are derived."""
    built = []
    for i, card in enumerate(cards or []):
        if isinstance(card, str):
            card = _make_card(f"{column_id}-{i}", card)
        built.append(card)
    return Column(id=column_id, title=title, cards=built, color=color)


def _make_board(*columns, palette=None):
    """Helper to build a board with columns colored by index."""
    board = Board(list(columns), palette=palette or THEMES["Default"])
    for i, col in enumerate(board.columns):
        if col.color is None:
            col.color = board.color_for(i)
    return board


def _todo_done_board():
    """To Do: [A, B], Done: []."""
    return _make_board(
        _make_column("todo", "To Do", [_make_card("a", "A"), _make_card("b", "B")]),
        _make_column("done", "Done"),
    )


TODAY = date(2024, 6, 15)
