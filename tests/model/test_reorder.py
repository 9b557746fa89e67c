"""Tests for card and column reordering."""

import itertools

from corkboard.model.reorder import gap_to_index, move_card, move_column, moved, transferred

from .conftest import _make_board, _make_column, _todo_done_board


def _xyz_board():
    return _make_board(_make_column("col", "Col", ["X", "Y", "Z"]), _make_column("other", "Other", ["P"]))


# --- list helpers ---


def test_moved_forward():
    assert moved(["X", "Y", "Z"], 0, 2) == ["Y", "Z", "X"]


def test_moved_backward():
    assert moved(["X", "Y", "Z"], 2, 0) == ["Z", "X", "Y"]


def test_moved_to_len_appends():
    assert moved(["X", "Y", "Z"], 0, 3) == ["Y", "Z", "X"]


def test_moved_same_index_is_noop():
    assert moved(["X", "Y"], 1, 1) is None


def test_moved_last_to_len_is_noop():
    assert moved(["X", "Y"], 1, 2) is None


def test_moved_out_of_range():
    assert moved(["X"], 1, 0) is None
    assert moved(["X", "Y"], 0, 3) is None
    assert moved(["X", "Y"], -1, 0) is None


def test_moved_does_not_touch_input():
    items = ["X", "Y", "Z"]
    moved(items, 0, 2)
    assert items == ["X", "Y", "Z"]


def test_transferred():
    assert transferred(["A", "B"], 0, ["C"], 1) == (["B"], ["C", "A"])
    assert transferred(["A"], 0, [], 0) == ([], ["A"])
    assert transferred(["A"], 0, [], 1) is None


def test_gap_to_index():
    # moving down in the same list lands one earlier
    assert gap_to_index(0, 2, same_list=True) == 1
    # moving up is unaffected
    assert gap_to_index(2, 0, same_list=True) == 0
    # the dragged item's own gap
    assert gap_to_index(1, 1, same_list=True) == 1
    # other lists are unaffected
    assert gap_to_index(0, 2, same_list=False) == 2


# --- card moves ---


def test_move_card_across_columns():
    board = _todo_done_board()
    assert move_card(board, 0, 0, 1, 0) is True
    snap = board.snapshot()
    assert snap.card_texts(0) == ["B"]
    assert snap.card_texts(1) == ["A"]


def test_move_card_within_column():
    board = _xyz_board()
    assert move_card(board, 0, 0, 0, 2) is True
    assert board.snapshot().card_texts(0) == ["Y", "Z", "X"]


def test_move_card_up_within_column():
    board = _xyz_board()
    move_card(board, 0, 2, 0, 0)
    assert board.snapshot().card_texts(0) == ["Z", "X", "Y"]


def test_move_card_gap_drop_downward():
    board = _xyz_board()
    # drop X into the gap before Z
    move_card(board, 0, 0, 0, gap_to_index(0, 2, same_list=True))
    assert board.snapshot().card_texts(0) == ["Y", "X", "Z"]


def test_move_card_append_to_other_column():
    board = _xyz_board()
    move_card(board, 0, 1, 1, len(board.columns[1].cards))
    snap = board.snapshot()
    assert snap.card_texts(0) == ["X", "Z"]
    assert snap.card_texts(1) == ["P", "Y"]


def test_move_card_append_within_own_column():
    board = _xyz_board()
    move_card(board, 0, 0, 0, len(board.columns[0].cards))
    assert board.snapshot().card_texts(0) == ["Y", "Z", "X"]


def test_move_card_into_empty_column():
    board = _todo_done_board()
    move_card(board, 0, 1, 1, 0)
    assert board.snapshot().card_texts(1) == ["B"]


def test_move_card_same_position_is_noop():
    board = _xyz_board()
    before = board.snapshot()
    assert move_card(board, 0, 1, 0, 1) is False
    assert board.snapshot() == before
    assert board.version == 0


def test_move_card_invalid_indices_are_noops():
    board = _xyz_board()
    before = board.snapshot()
    assert move_card(board, 5, 0, 0, 0) is False
    assert move_card(board, 0, 0, 5, 0) is False
    assert move_card(board, 0, 9, 1, 0) is False
    assert move_card(board, 0, 0, 1, 9) is False
    assert board.snapshot() == before


def test_move_card_keeps_card_count():
    for from_card, to_col, to_card in itertools.product(range(3), range(2), range(4)):
        board = _xyz_board()
        before = board.card_count()
        move_card(board, 0, from_card, to_col, to_card)
        assert board.card_count() == before


def test_move_card_notifies_once_with_complete_state():
    board = _todo_done_board()
    seen = []

    def check(snap):
        ids = [c.id for col in snap.columns for c in col.cards]
        seen.append(sorted(ids))

    board.watch(check)
    move_card(board, 0, 0, 1, 0)
    assert seen == [["a", "b"]]


def test_move_card_keeps_identity():
    board = _todo_done_board()
    card = board.columns[0].cards[0]
    move_card(board, 0, 0, 1, 0)
    assert board.columns[1].cards[0] is card


# --- column moves ---


def test_move_column():
    board = _make_board(*[_make_column(t.lower(), t) for t in ("Backlog", "Doing", "Done")])
    assert move_column(board, 1, 0) is True
    assert board.snapshot().column_titles() == ["Doing", "Backlog", "Done"]


def test_move_column_to_end():
    board = _make_board(*[_make_column(t.lower(), t) for t in ("Backlog", "Doing", "Done")])
    move_column(board, 0, 2)
    assert board.snapshot().column_titles() == ["Doing", "Done", "Backlog"]


def test_move_column_keeps_colors():
    board = _make_board(*[_make_column(t.lower(), t) for t in ("Backlog", "Doing")])
    color = board.columns[0].color
    move_column(board, 0, 1)
    assert board.columns[1].color == color


def test_move_column_same_index_is_noop():
    board = _todo_done_board()
    before = board.snapshot()
    assert move_column(board, 1, 1) is False
    assert board.snapshot() == before


def test_move_column_out_of_range_is_noop():
    board = _todo_done_board()
    assert move_column(board, 3, 0) is False
    assert move_column(board, 0, -1) is False
    assert board.version == 0
