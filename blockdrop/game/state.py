"""
Game state records: the active piece and the whole-game snapshot.

Both records are frozen dataclasses. The reducer in tetris.py never mutates
them; each transition builds its successor with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from blockdrop.game.board import Board
from blockdrop.game.pieces import (
    PIECE_TYPES,
    get_piece,
    piece_at_index,
    rotation_count,
    shape_of,
)
from blockdrop.game.rng import next_index

# Board dimensions and gravity period
GRID_WIDTH = 10
GRID_HEIGHT = 20
TICK_RATE_MS = 500

# Pieces spawn centered and fully above the visible board
SPAWN_X = 3
SPAWN_Y = -2


@dataclass(frozen=True)
class ActivePiece:
    """A piece in play (or waiting in the preview).

    The shape matrix is not stored; it is looked up from the catalog by
    ``kind`` and ``rotation`` every time it is needed.

    Attributes:
        kind: Catalog identifier ("O", "I", ...).
        x: Anchor column.
        y: Anchor row (negative while the piece is entering from above).
        rotation: Index into the kind's rotation states.
        color: Color tag written to the board on merge.
    """

    kind: str
    x: int
    y: int
    rotation: int
    color: str

    @property
    def shape(self) -> np.ndarray:
        return shape_of(self.kind, self.rotation)

    def moved(self, dx: int, dy: int) -> ActivePiece:
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> ActivePiece:
        """Return this piece at the next rotation state in its cycle."""
        return replace(self, rotation=(self.rotation + 1) % rotation_count(self.kind))

    def snapshot(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "color": self.color,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "shape": self.shape,
        }


@dataclass(frozen=True)
class GameState:
    """Single immutable snapshot threaded through the reducer.

    Attributes:
        ended: True once a piece came to rest above row 0.
        score: Rows cleared this game.
        highscore: Best score seen this session.
        level: Carried for display; no rule changes it.
        current_piece: The falling piece.
        next_piece: The piece shown in the preview.
        board: Merged cells.
    """

    current_piece: ActivePiece
    next_piece: ActivePiece
    board: Board
    ended: bool = False
    score: int = 0
    highscore: int = 0
    level: int = 0

    def snapshot(self) -> dict[str, Any]:
        """Return a plain read-only view of the state for renderers.

        Returns:
            Dict with keys ended, score, highscore, level, current_piece,
            next_piece (dicts from ActivePiece.snapshot) and board (rows of
            color tags).
        """
        return {
            "ended": self.ended,
            "score": self.score,
            "highscore": self.highscore,
            "level": self.level,
            "current_piece": self.current_piece.snapshot(),
            "next_piece": self.next_piece.snapshot(),
            "board": self.board.to_rows(),
        }


def spawn_piece(kind: str) -> ActivePiece:
    """Return a piece of ``kind`` at the spawn anchor in rotation 0."""
    piece_type = get_piece(kind)
    return ActivePiece(
        kind=piece_type.name,
        x=SPAWN_X,
        y=SPAWN_Y,
        rotation=0,
        color=piece_type.color,
    )


def random_piece(seed: int) -> ActivePiece:
    """Return a freshly spawned piece chosen by ``seed``."""
    return spawn_piece(piece_at_index(next_index(seed, len(PIECE_TYPES))).name)


def initial_state(
    seed: int,
    highscore: int = 0,
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
) -> GameState:
    """Build the state a new game starts from.

    Args:
        seed: Selects the current piece; ``seed + 1`` selects the next one.
        highscore: High score carried over from a previous game.
        width: Board columns.
        height: Board rows.

    Returns:
        A playing GameState with an empty board and score 0.

    Raises:
        ValueError: If ``width`` is too narrow for the widest piece at the
            spawn column.
    """
    if width < SPAWN_X + 4:
        raise ValueError(
            f"board width {width} cannot hold a piece spawned at column {SPAWN_X}"
        )
    return GameState(
        current_piece=random_piece(seed),
        next_piece=random_piece(seed + 1),
        board=Board.empty(width, height),
        highscore=highscore,
    )
