"""Tests for card mutation operations."""

from datetime import date, datetime, timedelta

import pytest

from corkboard.model.card import (
    add_card,
    format_due_date,
    is_overdue,
    parse_due_date,
    remove_card,
    update_card,
)

from .conftest import TODAY, _make_board, _make_card, _make_column, _todo_done_board


def test_add_card_prepends():
    board = _todo_done_board()
    card = add_card(board, "todo", "New")
    assert [c.text for c in board.columns[0].cards] == ["New", "A", "B"]
    assert board.columns[0].cards[0] is card


def test_add_card_defaults():
    board = _todo_done_board()
    card = add_card(board, "done", "  Ship it  ")
    assert card.text == "Ship it"
    assert card.description == ""
    assert card.due_date is None


def test_add_card_whitespace_is_noop():
    board = _todo_done_board()
    before = board.snapshot()
    assert add_card(board, "todo", "   ") is None
    assert board.snapshot() == before
    assert board.version == 0


def test_add_card_missing_column_is_noop():
    board = _todo_done_board()
    assert add_card(board, "missing", "Text") is None
    assert board.version == 0


def test_add_card_ids_unique_across_board():
    board = _make_board(_make_column("x", "X"), _make_column("y", "Y"))
    for i in range(30):
        add_card(board, "x" if i % 2 else "y", f"Card {i}")
    ids = [c.id for col in board.columns for c in col.cards] + [col.id for col in board.columns]
    assert len(ids) == len(set(ids))


def test_update_card_fields():
    board = _todo_done_board()
    due = date(2030, 1, 2)
    update_card(board, "todo", "a", text=" A2 ", description=" details ", due_date=due)
    card = board.columns[0].cards[0]
    assert card.id == "a"
    assert card.text == "A2"
    assert card.description == "details"
    assert card.due_date == due


def test_update_card_keeps_unspecified_fields():
    board = _make_board(_make_column("x", "X", [_make_card("c", "Card", "desc", date(2030, 1, 1))]))
    update_card(board, "x", "c", text="Renamed")
    card = board.columns[0].cards[0]
    assert card.description == "desc"
    assert card.due_date == date(2030, 1, 1)


def test_update_card_clears_due_date():
    board = _make_board(_make_column("x", "X", [_make_card("c", "Card", due=date(2030, 1, 1))]))
    update_card(board, "x", "c", due_date=None)
    assert board.columns[0].cards[0].due_date is None


def test_update_card_blank_text_keeps_old():
    board = _todo_done_board()
    update_card(board, "todo", "a", text="   ")
    assert board.columns[0].cards[0].text == "A"
    assert board.version == 0


def test_update_card_unchanged_does_not_notify():
    board = _todo_done_board()
    update_card(board, "todo", "a", text="A", description="")
    assert board.version == 0


def test_update_card_wrong_column_is_noop():
    board = _todo_done_board()
    update_card(board, "done", "a", text="Moved?")
    assert board.columns[0].cards[0].text == "A"


def test_remove_card():
    board = _todo_done_board()
    remove_card(board, "todo", "a")
    assert [c.id for c in board.columns[0].cards] == ["b"]


def test_remove_card_missing_is_noop():
    board = _todo_done_board()
    before = board.snapshot()
    remove_card(board, "todo", "not-a-card")
    remove_card(board, "missing", "a")
    assert board.snapshot() == before
    assert board.version == 0


def test_is_overdue():
    assert is_overdue(TODAY - timedelta(days=1), TODAY) is True
    assert is_overdue(TODAY, TODAY) is False
    assert is_overdue(TODAY + timedelta(days=1), TODAY) is False
    assert is_overdue(None, TODAY) is False


def test_parse_due_date():
    assert parse_due_date("2024-06-15") == date(2024, 6, 15)
    assert parse_due_date(" 2024-06-15 ") == date(2024, 6, 15)
    assert parse_due_date("") is None
    assert parse_due_date(None) is None
    assert parse_due_date(date(2024, 1, 1)) == date(2024, 1, 1)


def test_parse_due_date_invalid():
    with pytest.raises(ValueError):
        parse_due_date("next tuesday")


def test_format_due_date():
    assert format_due_date(date(2024, 6, 5)) == "2024-06-05"
    assert format_due_date(None) == ""


def test_parse_due_date_datetime_becomes_date():
    due = parse_due_date(datetime(2024, 6, 15, 10, 0))
    assert due == date(2024, 6, 15)
    assert type(due) is date
    assert is_overdue(due, TODAY) is False
