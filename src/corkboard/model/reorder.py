"""Index arithmetic for moving cards and columns.

A move is a remove followed by an insert. The destination index is a
position in the list *after* the removal, clamped to its end, so
``[X, Y, Z]`` with 0 -> 2 gives ``[Y, Z, X]`` and a target equal to the
pre-removal length always appends.

Board-level moves build the new lists first and assign them in one go,
then notify once, so watchers never see a card missing or duplicated.
"""

from corkboard.model.board import Board


def moved(items: list, from_index: int, to_index: int) -> list | None:
    """Return a copy of items with one element moved, or None for a no-op.

    Out-of-range indices and moves that leave the order unchanged are
    no-ops.
    """
    if not 0 <= from_index < len(items) or not 0 <= to_index <= len(items):
        return None
    to_index = min(to_index, len(items) - 1)
    if from_index == to_index:
        return None
    result = list(items)
    item = result.pop(from_index)
    result.insert(to_index, item)
    return result


def transferred(source: list, from_index: int, dest: list, to_index: int) -> tuple[list, list] | None:
    """Return (new_source, new_dest) with one element moved across lists."""
    if not 0 <= from_index < len(source) or not 0 <= to_index <= len(dest):
        return None
    new_source = list(source)
    item = new_source.pop(from_index)
    new_dest = list(dest)
    new_dest.insert(to_index, item)
    return new_source, new_dest


def gap_to_index(from_index: int, gap: int, same_list: bool) -> int:
    """Convert an insert-before gap into a destination index.

    ``gap`` counts positions in the list as drawn, dragged item included.
    Moving down within the same list lands one earlier, since the item
    leaves its old slot first.
    """
    if same_list and gap > from_index:
        return gap - 1
    return gap


def move_card(board: Board, from_column: int, from_card: int, to_column: int, to_card: int) -> bool:
    """Move a card between (or within) columns by index.

    Returns True if the board changed.
    """
    if (from_column, from_card) == (to_column, to_card):
        return False
    n = len(board.columns)
    if not 0 <= from_column < n or not 0 <= to_column < n:
        return False

    source = board.columns[from_column]
    if from_column == to_column:
        cards = moved(source.cards, from_card, to_card)
        if cards is None:
            return False
        source.cards = cards
    else:
        dest = board.columns[to_column]
        result = transferred(source.cards, from_card, dest.cards, to_card)
        if result is None:
            return False
        source.cards, dest.cards = result

    board.notify()
    return True


def move_column(board: Board, from_index: int, to_index: int) -> bool:
    """Move a column to a new index. Returns True if the board changed."""
    columns = moved(board.columns, from_index, to_index)
    if columns is None:
        return False
    board.columns = columns
    board.notify()
    return True
