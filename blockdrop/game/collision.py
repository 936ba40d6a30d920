"""
Piece geometry and collision predicates.

All functions here are pure: they evaluate a hypothetical placement of a
piece against a board and never modify either. The reducer builds a
candidate piece, asks these predicates about it and then either accepts the
candidate or keeps the original.
"""

from __future__ import annotations

import numpy as np

from blockdrop.game.board import Board, Cell
from blockdrop.game.state import ActivePiece


def occupied_cells(x: int, y: int, shape: np.ndarray) -> frozenset[Cell]:
    """Map a rotation matrix anchored at (x, y) to absolute board cells.

    Args:
        x: Anchor column (board column of matrix column 0).
        y: Anchor row (board row of matrix row 0). May be negative.
        shape: Square 0/1 rotation matrix.

    Returns:
        Frozenset of (col, row) pairs, one per occupied matrix cell.
    """
    rows, cols = np.nonzero(shape)
    return frozenset((x + int(c), y + int(r)) for r, c in zip(rows, cols))


def piece_cells(piece: ActivePiece) -> frozenset[Cell]:
    return occupied_cells(piece.x, piece.y, piece.shape)


def collides_with_floor(piece: ActivePiece, board: Board) -> bool:
    """True if any cell of ``piece`` is at or below the bottom edge."""
    return any(row >= board.height for _, row in piece_cells(piece))


def collides_with_side(piece: ActivePiece, board: Board) -> bool:
    """True if any cell of ``piece`` is left of column 0 or right of the last column."""
    return any(col < 0 or col >= board.width for col, _ in piece_cells(piece))


def collides_with_stack(piece: ActivePiece, board: Board) -> bool:
    """True if any cell of ``piece`` overlaps a filled board cell.

    Cells above row 0 have not entered the playfield yet and never collide.
    Cells beyond the side or floor edges are left to the other predicates.
    """
    return any(
        board.is_inside(col, row) and board.is_occupied(col, row)
        for col, row in piece_cells(piece)
        if row >= 0
    )


def reaches_ceiling(piece: ActivePiece) -> bool:
    """True if any cell of ``piece`` is still above row 0.

    A piece that comes to rest in this position ends the game.
    """
    return any(row < 0 for _, row in piece_cells(piece))
