"""Tests for the state records and initial state construction."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from blockdrop.game.state import (
    GRID_HEIGHT,
    GRID_WIDTH,
    SPAWN_X,
    SPAWN_Y,
    initial_state,
    random_piece,
    spawn_piece,
)

from conftest import make_state


def test_spawn_piece_at_anchor():
    piece = spawn_piece("L")
    assert (piece.x, piece.y, piece.rotation) == (SPAWN_X, SPAWN_Y, 0)
    assert piece.color == "orange"


def test_shape_is_derived_from_catalog():
    piece = spawn_piece("T").rotated()
    assert piece.rotation == 1
    assert piece.shape.tolist() == [[0, 1, 0], [0, 1, 1], [0, 1, 0]]


def test_rotation_cycles():
    piece = spawn_piece("S")
    for _ in range(4):
        piece = piece.rotated()
    assert piece == spawn_piece("S")
    assert spawn_piece("O").rotated().rotation == 0


def test_random_piece_is_seeded():
    assert random_piece(0).kind == "O"
    assert random_piece(1).kind == "L"
    assert random_piece(12) == random_piece(12)


def test_initial_state():
    state = initial_state(0)
    assert state.current_piece.kind == "O"
    assert state.next_piece.kind == "L"
    assert not state.ended
    assert (state.score, state.highscore, state.level) == (0, 0, 0)
    assert state.board.height == GRID_HEIGHT
    assert state.board.width == GRID_WIDTH
    assert state.board.filled_count() == 0


def test_initial_state_carries_highscore_and_size():
    state = initial_state(5, highscore=9, width=7, height=8)
    assert state.highscore == 9
    assert (state.board.width, state.board.height) == (7, 8)


def test_initial_state_rejects_board_narrower_than_spawn():
    with pytest.raises(ValueError):
        initial_state(0, width=6)


def test_state_is_frozen():
    state = initial_state(0)
    with pytest.raises(FrozenInstanceError):
        state.score = 3


def test_states_compare_by_value():
    assert initial_state(3) == initial_state(3)
    assert make_state(score=1) != make_state(score=2)


def test_snapshot():
    snap = make_state(score=2, highscore=5).snapshot()
    assert set(snap) == {
        "ended", "score", "highscore", "level", "current_piece", "next_piece", "board",
    }
    assert snap["score"] == 2
    assert snap["highscore"] == 5
    assert snap["current_piece"]["kind"] == "O"
    assert snap["current_piece"]["color"] == "yellow"
    assert snap["current_piece"]["shape"].shape == (4, 4)
    assert snap["next_piece"]["kind"] == "T"
    assert len(snap["board"]) == GRID_HEIGHT
    assert all(len(row) == GRID_WIDTH for row in snap["board"])
