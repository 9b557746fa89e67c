"""Build a Board from seed data."""

import logging
from typing import Any

from corkboard.ids import unique_id
from corkboard.model.board import Board, Card, Column
from corkboard.model.card import parse_due_date
from corkboard.palette import Palette

logger = logging.getLogger(__name__)


def _claim_id(wanted: Any, used: set[str]) -> str:
    """Use the supplied ID if it is a fresh non-empty string, otherwise mint one."""
    if isinstance(wanted, str) and wanted and wanted not in used:
        new = wanted
    else:
        new = unique_id(used)
    used.add(new)
    return new


def _load_card(raw: dict, used: set[str]) -> Card | None:
    text = str(raw.get("text") or "").strip()
    if not text:
        return None
    try:
        due = parse_due_date(raw.get("dueDate"))
    except ValueError:
        logger.warning("ignoring bad due date %r on card %r", raw.get("dueDate"), text)
        due = None
    return Card(
        id=_claim_id(raw.get("id"), used),
        text=text,
        description=str(raw.get("description") or "").strip(),
        due_date=due,
    )


def load_board(data: list[dict], palette: Palette | None = None) -> Board:
    """Build a board from a list of ``{title, cards: [{text, description, dueDate}]}``.

    Columns without a title and cards without text are skipped. IDs in
    the data are kept when unique, otherwise replaced. Columns are
    colored from the palette by index.
    """
    board = Board(palette=palette)
    used: set[str] = set()
    columns: list[Column] = []
    for raw in data:
        if not isinstance(raw, dict):
            continue
        title = str(raw.get("title") or "").strip()
        if not title:
            continue
        col = Column(id=_claim_id(raw.get("id"), used), title=title)
        raw_cards = raw.get("cards") or []
        if not isinstance(raw_cards, list):
            logger.warning("ignoring cards of column %r: not a list", title)
            raw_cards = []
        for raw_card in raw_cards:
            if isinstance(raw_card, dict):
                card = _load_card(raw_card, used)
                if card is not None:
                    col.cards.append(card)
        col.color = board.color_for(len(columns))
        columns.append(col)
    board.columns = columns
    return board
