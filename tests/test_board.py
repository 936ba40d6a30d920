"""Tests for the immutable board grid."""

from __future__ import annotations

import pytest

from blockdrop.game.board import Board


def test_empty_board_dimensions():
    board = Board.empty(10, 20)
    assert board.width == 10
    assert board.height == 20
    assert board.filled_count() == 0
    assert board.grid.shape == (20, 10)


def test_grid_is_read_only():
    board = Board.empty(4, 4)
    with pytest.raises(ValueError):
        board.grid[0, 0] = 1


def test_board_does_not_alias_caller_array():
    source = Board.empty(3, 3).grid.copy()
    board = Board(source)
    source[0, 0] = 1
    assert not board.is_occupied(0, 0)


def test_non_2d_grid_rejected():
    with pytest.raises(ValueError):
        Board([1, 2, 3])


def test_with_cells_rejects_unknown_color():
    with pytest.raises(ValueError):
        Board.empty(4, 4).with_cells([(0, 0)], "magenta")


def test_with_cells_returns_new_board():
    board = Board.empty(4, 4)
    filled = board.with_cells([(0, 3), (1, 3)], "yellow")
    assert board.filled_count() == 0
    assert filled.color_at(0, 3) == "yellow"
    assert filled.color_at(1, 3) == "yellow"
    assert filled.color_at(2, 3) is None


def test_with_cells_skips_cells_outside_grid():
    board = Board.empty(4, 4).with_cells([(0, -1), (1, -2), (2, 0)], "red")
    assert board.filled_count() == 1
    assert board.color_at(2, 0) == "red"


def test_full_rows_ascending():
    board = Board.from_rows([
        [None, None, None],
        ["red", "red", "red"],
        ["red", None, "red"],
        ["blue", "blue", "blue"],
    ])
    assert board.full_rows() == [1, 3]


def test_remove_rows_keeps_order():
    board = Board.from_rows([
        ["red", None],
        ["blue", "blue"],
        [None, "green"],
    ])
    remaining = board.remove_rows([1])
    assert remaining.height == 2
    assert remaining.to_rows() == (("red", None), (None, "green"))


def test_with_empty_rows_on_top():
    board = Board.from_rows([["red", None]])
    grown = board.with_empty_rows_on_top(2)
    assert grown.to_rows() == ((None, None), (None, None), ("red", None))
    assert board.with_empty_rows_on_top(0) is board


def test_equality_by_value():
    a = Board.empty(3, 3).with_cells([(1, 1)], "aqua")
    b = Board.empty(3, 3).with_cells([(1, 1)], "aqua")
    c = Board.empty(3, 3).with_cells([(1, 1)], "red")
    assert a == b
    assert a != c


def test_to_rows_round_trip():
    rows = (("red", None, "aqua"), (None, None, None))
    assert Board.from_rows(rows).to_rows() == rows
