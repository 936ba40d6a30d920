"""Tests for piece geometry and the collision predicates."""

from __future__ import annotations

from dataclasses import replace

import numpy as np

from blockdrop.game.board import Board
from blockdrop.game.collision import (
    collides_with_floor,
    collides_with_side,
    collides_with_stack,
    occupied_cells,
    piece_cells,
    reaches_ceiling,
)
from blockdrop.game.pieces import shape_of
from blockdrop.game.state import spawn_piece

BOARD = Board.empty(10, 20)


def test_occupied_cells_offsets_matrix_by_anchor():
    cells = occupied_cells(3, -2, shape_of("O", 0))
    assert cells == {(4, -2), (5, -2), (4, -1), (5, -1)}


def test_occupied_cells_of_single_cell():
    shape = np.array([[0, 0], [0, 1]], dtype=np.int8)
    assert occupied_cells(5, 5, shape) == {(6, 6)}


def test_piece_cells_follow_rotation():
    piece = replace(spawn_piece("I"), x=0, y=0, rotation=1)
    assert piece_cells(piece) == {(2, 0), (2, 1), (2, 2), (2, 3)}


def test_floor():
    piece = replace(spawn_piece("O"), y=18)
    assert not collides_with_floor(piece, BOARD)
    assert collides_with_floor(replace(piece, y=19), BOARD)


def test_left_wall():
    piece = replace(spawn_piece("O"), x=-1)
    assert not collides_with_side(piece, BOARD)
    assert collides_with_side(replace(piece, x=-2), BOARD)


def test_right_edge_is_last_column():
    # O occupies matrix columns 1 and 2: x=7 puts it in columns 8 and 9
    piece = replace(spawn_piece("O"), x=7)
    assert not collides_with_side(piece, BOARD)
    assert collides_with_side(replace(piece, x=8), BOARD)


def test_stack_overlap():
    board = BOARD.with_cells([(4, 5)], "red")
    piece = replace(spawn_piece("O"), y=4)
    assert collides_with_stack(piece, board)
    assert not collides_with_stack(replace(piece, y=6), board)


def test_cells_above_row_zero_never_hit_stack():
    board = BOARD.with_cells([(4, 0), (5, 0)], "red")
    piece = replace(spawn_piece("O"), y=-2)
    assert not collides_with_stack(piece, board)
    assert collides_with_stack(replace(piece, y=-1), board)


def test_out_of_bounds_cells_are_not_stack_collisions():
    piece = replace(spawn_piece("O"), x=8, y=19)
    assert not collides_with_stack(piece, BOARD)


def test_reaches_ceiling():
    piece = spawn_piece("O")
    assert reaches_ceiling(piece)
    assert reaches_ceiling(replace(piece, y=-1))
    assert not reaches_ceiling(replace(piece, y=0))


def test_predicates_do_not_touch_board():
    board = BOARD.with_cells([(4, 5)], "red")
    before = board.grid.copy()
    piece = replace(spawn_piece("O"), y=4)
    collides_with_stack(piece, board)
    collides_with_floor(piece, board)
    collides_with_side(piece, board)
    assert np.array_equal(board.grid, before)
