"""Card mutation operations for corkboard boards."""

from datetime import date, datetime

from corkboard.ids import unique_id
from corkboard.model.board import Board, Card

_UNSET = object()


def add_card(board: Board, column_id: str, text: str) -> Card | None:
    """Create a card at the top of a column.

    Returns None if the column does not exist or the text is blank.
    """
    text = text.strip()
    col = board.find_column(column_id)
    if col is None or not text:
        return None
    card = Card(id=unique_id(board.all_ids()), text=text)
    col.cards = [card, *col.cards]
    board.notify()
    return card


def update_card(
    board: Board,
    column_id: str,
    card_id: str,
    text: str | None = None,
    description: str | None = None,
    due_date=_UNSET,
) -> None:
    """Replace a card's editable fields in place.

    Fields left as None are kept. ``due_date=None`` clears the due date.
    A blank title keeps the old one.
    """
    col = board.find_column(column_id)
    card = next((c for c in col.cards if c.id == card_id), None) if col else None
    if card is None:
        return

    changed = False
    if text is not None and text.strip() and text.strip() != card.text:
        card.text = text.strip()
        changed = True
    if description is not None and description.strip() != card.description:
        card.description = description.strip()
        changed = True
    if due_date is not _UNSET and due_date != card.due_date:
        card.due_date = due_date
        changed = True
    if changed:
        board.notify()


def remove_card(board: Board, column_id: str, card_id: str) -> None:
    """Delete a card from a column."""
    col = board.find_column(column_id)
    if col is None:
        return
    remaining = [c for c in col.cards if c.id != card_id]
    if len(remaining) == len(col.cards):
        return
    col.cards = remaining
    board.notify()


def is_overdue(due_date: date | None, today: date | None = None) -> bool:
    """True if the due date is strictly before today."""
    if due_date is None:
        return False
    return due_date < (today or date.today())


def parse_due_date(value) -> date | None:
    """Parse a "YYYY-MM-DD" string (or date) into a date. Blank is None.

    Raises ValueError for malformed strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    value = str(value).strip()
    if not value:
        return None
    return date.fromisoformat(value)


def format_due_date(value: date | None) -> str:
    return value.isoformat() if value else ""
