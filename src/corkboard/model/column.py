"""Column mutation operations for corkboard boards."""

from corkboard.ids import unique_id
from corkboard.model.board import Board, Column
from corkboard.palette import Palette, get_palette


def add_column(board: Board, title: str) -> Column | None:
    """Append a new empty column.

    The color is picked from the board palette by the new column's index
    and is not re-derived later except by ``apply_palette``. Returns None
    without changing anything if the title is blank.
    """
    title = title.strip()
    if not title:
        return None
    col = Column(
        id=unique_id(board.all_ids()),
        title=title,
        color=board.color_for(len(board.columns)),
    )
    board.columns = [*board.columns, col]
    board.notify()
    return col


def remove_column(board: Board, column_id: str) -> None:
    """Remove a column and every card in it."""
    col = board.find_column(column_id)
    if col is None:
        return
    board.columns = [c for c in board.columns if c is not col]
    board.notify()


def rename_column(board: Board, column_id: str, new_title: str) -> None:
    """Rename a column. Blank titles are ignored."""
    new_title = new_title.strip()
    col = board.find_column(column_id)
    if col is None or not new_title or col.title == new_title:
        return
    col.title = new_title
    board.notify()


def apply_palette(board: Board, palette: Palette) -> None:
    """Recolor every column by index and use palette for future columns."""
    board.palette = palette or get_palette(None)
    changed = False
    for i, col in enumerate(board.columns):
        color = board.color_for(i)
        if col.color != color:
            col.color = color
            changed = True
    if changed:
        board.notify()
