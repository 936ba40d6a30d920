"""Game logic: pieces, board, collision rules, state, and the reducer."""

from blockdrop.game.pieces import PIECE_TYPES, PieceType, get_piece
from blockdrop.game.board import Board
from blockdrop.game.state import (
    GRID_HEIGHT,
    GRID_WIDTH,
    TICK_RATE_MS,
    ActivePiece,
    GameState,
    initial_state,
)
from blockdrop.game.tetris import (
    Action,
    Move,
    Restart,
    Rotate,
    Tick,
    clear_rows,
    reduce,
    run,
    scan_states,
)

__all__ = [
    "PIECE_TYPES",
    "PieceType",
    "get_piece",
    "Board",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "TICK_RATE_MS",
    "ActivePiece",
    "GameState",
    "initial_state",
    "Action",
    "Move",
    "Restart",
    "Rotate",
    "Tick",
    "clear_rows",
    "reduce",
    "run",
    "scan_states",
]
