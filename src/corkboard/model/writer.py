"""Serialize a Board back into seed-shaped data."""

from corkboard.model.board import Board
from corkboard.model.card import format_due_date


def dump_board(board: Board) -> list[dict]:
    """Board as plain data, the same shape ``load_board`` reads."""
    return [
        {
            "id": col.id,
            "title": col.title,
            "cards": [
                {
                    "id": card.id,
                    "text": card.text,
                    "description": card.description,
                    "dueDate": format_due_date(card.due_date),
                }
                for card in col.cards
            ],
        }
        for col in board.columns
    ]
