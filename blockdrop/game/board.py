"""
Immutable board grid.

The board is a 2D numpy array (height x width) of int8 color codes:
  - 0 = empty cell
  - 1-7 = color code of the piece merged there (see pieces.COLOR_TAGS)

Row 0 is the topmost playable row. A Board never changes after it is built:
every operation that "writes" returns a new Board whose array is marked
read-only, so a GameState can hand its board to a renderer without copying.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from blockdrop.game.pieces import color_code, color_tag

Cell = tuple[int, int]  # (col, row)


class Board:
    """Fixed-size grid of empty / colored cells.

    Attributes:
        grid: Read-only numpy array of shape (height, width), dtype int8.
    """

    __slots__ = ("grid",)

    def __init__(self, grid: np.ndarray) -> None:
        """Wrap ``grid`` in a Board.

        The array is copied, so later changes to the caller's array cannot
        leak into the board.

        Raises:
            ValueError: If ``grid`` is not two-dimensional.
        """
        array = np.array(grid, dtype=np.int8, copy=True)
        if array.ndim != 2:
            raise ValueError(f"Board grid must be 2D, got shape {array.shape}")
        array.setflags(write=False)
        self.grid = array

    @classmethod
    def empty(cls, width: int, height: int) -> Board:
        """Return a board of ``height`` rows by ``width`` columns, all empty."""
        return cls(np.zeros((height, width), dtype=np.int8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str | None]]) -> Board:
        """Build a board from rows of color tags (None for empty cells)."""
        return cls(np.array(
            [[0 if tag is None else color_code(tag) for tag in row] for row in rows],
            dtype=np.int8,
        ).reshape(len(rows), len(rows[0]) if rows else 0))

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    def is_inside(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def is_occupied(self, col: int, row: int) -> bool:
        """Return True if the in-board cell at (col, row) holds a color."""
        return bool(self.grid[row, col] != 0)

    def color_at(self, col: int, row: int) -> str | None:
        return color_tag(self.grid[row, col])

    def with_cells(self, cells: Iterable[Cell], color: str) -> Board:
        """Return a new board with every in-board cell in ``cells`` colored.

        Cells outside the grid (for instance above row 0 while a piece is
        still entering the playfield) are skipped.
        """
        code = color_code(color)
        grid = self.grid.copy()
        for col, row in cells:
            if self.is_inside(col, row):
                grid[row, col] = code
        return Board(grid)

    def full_rows(self) -> list[int]:
        """Return the indices of rows with no empty cell, in ascending order."""
        return [int(r) for r in np.flatnonzero(np.all(self.grid != 0, axis=1))]

    def remove_rows(self, rows: Iterable[int]) -> Board:
        """Return a board without ``rows``; remaining rows keep their order.

        The result is shorter than this board by the number of rows removed.
        """
        mask = np.ones(self.height, dtype=bool)
        for r in rows:
            mask[r] = False
        return Board(self.grid[mask])

    def with_empty_rows_on_top(self, count: int) -> Board:
        """Return a board with ``count`` empty rows prepended above row 0."""
        if count <= 0:
            return self
        empty_rows = np.zeros((count, self.width), dtype=np.int8)
        return Board(np.vstack([empty_rows, self.grid]))

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def to_rows(self) -> tuple[tuple[str | None, ...], ...]:
        """Return the grid as rows of color tags, for renderers."""
        return tuple(
            tuple(self.color_at(col, row) for col in range(self.width))
            for row in range(self.height)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, filled={self.filled_count()})"
