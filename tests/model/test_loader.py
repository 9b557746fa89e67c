"""Tests for loading and dumping board data."""

import logging
from datetime import date, datetime

from corkboard.model.loader import load_board
from corkboard.model.writer import dump_board
from corkboard.palette import THEMES


SAMPLE = [
    {
        "title": "To Do",
        "cards": [
            {"text": "Setup project", "description": "repo and CI"},
            {"text": "Create components", "dueDate": "2024-06-15"},
        ],
    },
    {"title": "Done", "cards": []},
]


def test_load_board_columns_and_cards():
    board = load_board(SAMPLE)
    snap = board.snapshot()
    assert snap.column_titles() == ["To Do", "Done"]
    assert snap.card_texts(0) == ["Setup project", "Create components"]
    assert board.columns[0].cards[0].description == "repo and CI"
    assert board.columns[0].cards[1].due_date == date(2024, 6, 15)


def test_load_board_colors_by_index():
    palette = THEMES["France"]
    board = load_board(SAMPLE, palette=palette)
    assert board.palette == palette
    assert [c.color for c in board.columns] == [palette[0], palette[1]]


def test_load_board_generates_missing_ids():
    board = load_board(SAMPLE)
    ids = board.all_ids()
    assert len(ids) == 4
    assert all(i.startswith("id_") for i in ids)


def test_load_board_keeps_supplied_ids():
    board = load_board([{"id": "c1", "title": "Col", "cards": [{"id": "t1", "text": "Card"}]}])
    assert board.columns[0].id == "c1"
    assert board.columns[0].cards[0].id == "t1"


def test_load_board_replaces_duplicate_ids():
    data = [
        {"id": "same", "title": "One", "cards": [{"id": "same", "text": "Card"}]},
        {"id": "same", "title": "Two"},
    ]
    board = load_board(data)
    ids = [board.columns[0].id, board.columns[0].cards[0].id, board.columns[1].id]
    assert ids[0] == "same"
    assert len(set(ids)) == 3


def test_load_board_skips_invalid_entries():
    data = [
        {"title": "  ", "cards": [{"text": "Orphan"}]},
        "not a column",
        {"title": "Keep", "cards": [{"text": ""}, {"text": "  Real  "}, None]},
    ]
    board = load_board(data)
    assert board.snapshot().column_titles() == ["Keep"]
    assert board.snapshot().card_texts(0) == ["Real"]


def test_load_board_bad_due_date_is_dropped(caplog):
    with caplog.at_level(logging.WARNING):
        board = load_board([{"title": "Col", "cards": [{"text": "Card", "dueDate": "soon"}]}])
    assert board.columns[0].cards[0].due_date is None
    assert "bad due date" in caplog.text


def test_load_board_does_not_notify():
    board = load_board(SAMPLE)
    assert board.version == 0


def test_dump_board_shape():
    board = load_board([{"id": "c1", "title": "Col", "cards": [{"id": "t1", "text": "Card", "dueDate": "2030-01-02"}]}])
    assert dump_board(board) == [
        {
            "id": "c1",
            "title": "Col",
            "cards": [{"id": "t1", "text": "Card", "description": "", "dueDate": "2030-01-02"}],
        }
    ]


def test_dump_then_load_preserves_board():
    board = load_board(SAMPLE)
    again = load_board(dump_board(board))
    assert again.snapshot() == board.snapshot()


def test_load_board_cards_not_a_list(caplog):
    with caplog.at_level(logging.WARNING):
        board = load_board([{"title": "X", "cards": 5}, {"title": "Y", "cards": {"text": "odd"}}])
    assert board.snapshot().column_titles() == ["X", "Y"]
    assert board.card_count() == 0
    assert "not a list" in caplog.text


def test_load_board_datetime_due_date():
    board = load_board([{"title": "Col", "cards": [{"text": "Card", "dueDate": datetime(2024, 6, 14, 10, 0)}]}])
    assert board.columns[0].cards[0].due_date == date(2024, 6, 14)
