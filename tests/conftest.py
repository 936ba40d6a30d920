"""Shared fixtures and helpers for the game tests."""

from __future__ import annotations

import pytest

from blockdrop.game.board import Board
from blockdrop.game.state import GRID_HEIGHT, GRID_WIDTH, GameState, spawn_piece
from blockdrop.game.tetris import Tick, reduce


def make_state(
    current: str = "O",
    next_kind: str = "T",
    board: Board | None = None,
    **overrides,
) -> GameState:
    """Build a playing state with chosen pieces at the spawn anchor.

    Keyword overrides replace any GameState field, including current_piece.
    """
    fields = {
        "current_piece": spawn_piece(current),
        "next_piece": spawn_piece(next_kind),
        "board": board if board is not None else Board.empty(GRID_WIDTH, GRID_HEIGHT),
    }
    fields.update(overrides)
    return GameState(**fields)


def board_with_cells(cells, color: str = "red") -> Board:
    return Board.empty(GRID_WIDTH, GRID_HEIGHT).with_cells(cells, color)


def tick_until_locked(state: GameState, seed: int = 0, limit: int = 100) -> GameState:
    """Tick until the current piece merges (or the game ends)."""
    waiting = state.next_piece
    for _ in range(limit):
        state = reduce(state, Tick(), seed)
        if state.ended or state.current_piece is waiting:
            return state
    raise AssertionError("piece never locked")


@pytest.fixture
def empty_state() -> GameState:
    return make_state()
