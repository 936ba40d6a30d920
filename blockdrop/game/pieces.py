"""
Tetromino catalog: rotation states and color tags for the seven pieces.

Each piece kind owns an ordered tuple of rotation states. Rotate cycles
through them in order and wraps around, so the O piece (one state) never
changes shape and every other piece returns to its spawn shape after four
rotations.

Coordinate convention:
  - Every rotation state is a square 0/1 matrix; 1 marks an occupied cell.
  - Matrix row 0 is the top of the piece and row increases downward, the
    same direction as board rows.
  - A piece's anchor is the board coordinate of matrix cell (0, 0).

The order of PIECE_TYPES is the selection order used by the randomizer and
must not change, otherwise recorded seed sequences replay different games.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# =============================================================================
# Color tags. The board stores small integer codes; code 0 is an empty cell.
# =============================================================================

COLOR_YELLOW = "yellow"   # O
COLOR_AQUA   = "aqua"     # I
COLOR_BLUE   = "blue"     # J
COLOR_ORANGE = "orange"   # L
COLOR_GREEN  = "green"    # S
COLOR_RED    = "red"      # Z
COLOR_PURPLE = "purple"   # T

COLOR_TAGS: tuple[str | None, ...] = (
    None,
    COLOR_YELLOW,
    COLOR_AQUA,
    COLOR_BLUE,
    COLOR_ORANGE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_PURPLE,
)


def color_code(tag: str) -> int:
    """Return the board code for a color tag.

    Raises:
        ValueError: If ``tag`` is not a known color tag.
    """
    if tag is None or tag not in COLOR_TAGS:
        raise ValueError(f"Unknown color tag: {tag!r}")
    return COLOR_TAGS.index(tag)


def color_tag(code: int) -> str | None:
    """Return the color tag stored under a board code (None for empty)."""
    return COLOR_TAGS[int(code)]


# =============================================================================
# Piece type record
# =============================================================================


def _frozen(rows: list[list[int]]) -> np.ndarray:
    array = np.array(rows, dtype=np.int8)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class PieceType:
    """Static description of one tetromino kind.

    Attributes:
        name: Kind identifier ("O", "I", "J", "L", "S", "Z", "T").
        color: Color tag written into the board when the piece is merged.
        rotations: Read-only square matrices, one per rotation state.
    """

    name: str
    color: str
    rotations: tuple[np.ndarray, ...]

    def __post_init__(self) -> None:
        size = self.rotations[0].shape
        if size[0] != size[1]:
            raise ValueError(f"{self.name}: rotation states must be square, got {size}")
        for rotation in self.rotations:
            if rotation.shape != size:
                raise ValueError(f"{self.name}: rotation states differ in size")

    @property
    def rotation_count(self) -> int:
        return len(self.rotations)

    def shape(self, rotation: int) -> np.ndarray:
        """Return the matrix for ``rotation`` (taken modulo the cycle length)."""
        return self.rotations[rotation % len(self.rotations)]


# =============================================================================
# Tetromino definitions
# =============================================================================

O_PIECE = PieceType(
    name="O",
    color=COLOR_YELLOW,
    rotations=(
        # Single state: rotating an O never changes it
        _frozen([
            [0, 1, 1, 0],
            [0, 1, 1, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ]),
    ),
)

I_PIECE = PieceType(
    name="I",
    color=COLOR_AQUA,
    rotations=(
        _frozen([
            [1, 1, 1, 1],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ]),
        _frozen([
            [0, 0, 1, 0],
            [0, 0, 1, 0],
            [0, 0, 1, 0],
            [0, 0, 1, 0],
        ]),
        _frozen([
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [1, 1, 1, 1],
            [0, 0, 0, 0],
        ]),
        _frozen([
            [0, 1, 0, 0],
            [0, 1, 0, 0],
            [0, 1, 0, 0],
            [0, 1, 0, 0],
        ]),
    ),
)

J_PIECE = PieceType(
    name="J",
    color=COLOR_BLUE,
    rotations=(
        _frozen([
            [1, 0, 0],
            [1, 1, 1],
            [0, 0, 0],
        ]),
        _frozen([
            [0, 1, 1],
            [0, 1, 0],
            [0, 1, 0],
        ]),
        _frozen([
            [0, 0, 0],
            [1, 1, 1],
            [0, 0, 1],
        ]),
        _frozen([
            [0, 1, 0],
            [0, 1, 0],
            [1, 1, 0],
        ]),
    ),
)

L_PIECE = PieceType(
    name="L",
    color=COLOR_ORANGE,
    rotations=(
        _frozen([
            [0, 0, 1],
            [1, 1, 1],
            [0, 0, 0],
        ]),
        _frozen([
            [0, 1, 0],
            [0, 1, 0],
            [0, 1, 1],
        ]),
        _frozen([
            [0, 0, 0],
            [1, 1, 1],
            [1, 0, 0],
        ]),
        _frozen([
            [1, 1, 0],
            [0, 1, 0],
            [0, 1, 0],
        ]),
    ),
)

S_PIECE = PieceType(
    name="S",
    color=COLOR_GREEN,
    rotations=(
        _frozen([
            [0, 1, 1],
            [1, 1, 0],
            [0, 0, 0],
        ]),
        _frozen([
            [0, 1, 0],
            [0, 1, 1],
            [0, 0, 1],
        ]),
        _frozen([
            [0, 0, 0],
            [0, 1, 1],
            [1, 1, 0],
        ]),
        _frozen([
            [1, 0, 0],
            [1, 1, 0],
            [0, 1, 0],
        ]),
    ),
)

Z_PIECE = PieceType(
    name="Z",
    color=COLOR_RED,
    rotations=(
        _frozen([
            [1, 1, 0],
            [0, 1, 1],
            [0, 0, 0],
        ]),
        _frozen([
            [0, 0, 1],
            [0, 1, 1],
            [0, 1, 0],
        ]),
        _frozen([
            [0, 0, 0],
            [1, 1, 0],
            [0, 1, 1],
        ]),
        _frozen([
            [0, 1, 0],
            [1, 1, 0],
            [1, 0, 0],
        ]),
    ),
)

T_PIECE = PieceType(
    name="T",
    color=COLOR_PURPLE,
    rotations=(
        _frozen([
            [0, 1, 0],
            [1, 1, 1],
            [0, 0, 0],
        ]),
        _frozen([
            [0, 1, 0],
            [0, 1, 1],
            [0, 1, 0],
        ]),
        _frozen([
            [0, 0, 0],
            [1, 1, 1],
            [0, 1, 0],
        ]),
        _frozen([
            [0, 1, 0],
            [1, 1, 0],
            [0, 1, 0],
        ]),
    ),
)

# =============================================================================
# Ordered catalog (selection order for the randomizer)
# =============================================================================

PIECE_TYPES: tuple[PieceType, ...] = (
    O_PIECE,
    I_PIECE,
    J_PIECE,
    L_PIECE,
    S_PIECE,
    Z_PIECE,
    T_PIECE,
)

_PIECES_BY_NAME: dict[str, PieceType] = {piece.name: piece for piece in PIECE_TYPES}


def get_piece(kind: str) -> PieceType:
    """Look up a piece type by kind identifier.

    Raises:
        KeyError: If ``kind`` is not one of the seven tetrominoes.
    """
    return _PIECES_BY_NAME[kind]


def piece_at_index(index: int) -> PieceType:
    """Return the piece type at a randomizer index in ``[0, 7)``."""
    return PIECE_TYPES[index]


def rotation_count(kind: str) -> int:
    return get_piece(kind).rotation_count


def shape_of(kind: str, rotation: int) -> np.ndarray:
    return get_piece(kind).shape(rotation)
