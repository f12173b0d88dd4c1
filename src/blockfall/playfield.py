"""Playfield representation: the grid pieces fall into."""

from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np
from numpy.typing import NDArray

from .errors import PlacementViolatesInvariant
from .shape import BORDER, EMPTY, ShapeGeometry, check_rotation


LOGGER = logging.getLogger(__name__)

# Default dimensions, borders included: 10 playable columns between two wall
# columns and 20 visible rows plus two hidden spawn rows above a floor row.
DEFAULT_ROWS = 23
DEFAULT_COLS = 12

# Number of rows at the top of the grid that are only used for spawning.
HIDDEN_ROWS = 2

Grid = NDArray[np.uint8]


class PlayfieldGrid:
    """Fixed-size board surrounded by permanent border cells.

    Column ``0``, column ``cols - 1`` and row ``rows - 1`` hold :data:`BORDER`
    for the lifetime of the grid.  Everything else starts :data:`EMPTY`.
    Pieces are described by a :class:`ShapeGeometry`, the position of the top
    left corner of its bounding box and a rotation index.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> None:
        if rows < 2 or cols < 3:
            raise ValueError("Playfield needs at least 2 rows and 3 columns")
        self.grid: Grid = np.zeros((rows, cols), dtype=np.uint8)
        self.grid[:, 0] = BORDER
        self.grid[:, -1] = BORDER
        self.grid[-1, :] = BORDER

    @property
    def rows(self) -> int:
        return int(self.grid.shape[0])

    @property
    def cols(self) -> int:
        return int(self.grid.shape[1])

    def n_rows(self) -> int:
        return self.rows

    def n_cols(self) -> int:
        return self.cols

    def get_cell(self, row: int, col: int) -> int:
        """Return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def snapshot(self) -> Grid:
        """Return a copy of the cells, safe to hand to a renderer."""

        return self.grid.copy()

    def is_empty(self, row: int) -> bool:
        """Return ``True`` if every cell between the side borders of ``row`` is empty.

        Raises:
            IndexError: If ``row`` is outside the board.
        """
        if 0 <= row < self.rows:
            return not bool(np.any(self.grid[row, 1:-1]))
        raise IndexError("Row out of bounds")

    def _check_play_row(self, row: int) -> None:
        # The floor row is border, never a candidate for filling or clearing.
        if not 0 <= row < self.rows - 1:
            raise IndexError(f"Row {row} is not a playable row")

    def collides(self, shape: ShapeGeometry, row: int, col: int, rot: int) -> bool:
        """Return ``True`` if ``shape`` cannot be placed at ``(row, col)``.

        Only the occupied cells of the rotated shape are checked.  Empty
        cells of the bounding box may legitimately hang outside the board
        (for example a shape with blank leading columns pushed against the
        left wall) and are never bounds-checked.  An occupied cell collides
        when it lands outside the grid or on any non-empty cell, borders
        included.

        Raises:
            InvalidRotation: If ``rot`` is not one of ``0``, ``1``, ``2`` or ``3``.
        """

        for shape_row, shape_col, _ in shape.cells(rot):
            pf_row = row + shape_row
            pf_col = col + shape_col
            if not (0 <= pf_row < self.rows and 0 <= pf_col < self.cols):
                return True
            if self.grid[pf_row, pf_col] != EMPTY:
                return True
        return False

    def add(self, shape: ShapeGeometry, row: int, col: int, rot: int) -> List[int]:
        """Lock ``shape`` into the grid and return the rows it touched.

        The returned rows are distinct and sorted in ascending order so they
        can be passed straight to :meth:`check_rows`.

        Raises:
            InvalidRotation: If ``rot`` is not one of ``0``, ``1``, ``2`` or ``3``.
            PlacementViolatesInvariant: If the shape collides at that
                position.  The grid is not modified.
        """

        rot = check_rotation(rot)
        if self.collides(shape, row, col, rot):
            raise PlacementViolatesInvariant(
                f"Shape {shape.name!r} collides at row={row}, col={col}, rot={rot}"
            )

        touched = set()
        for shape_row, shape_col, value in shape.cells(rot):
            self.grid[row + shape_row, col + shape_col] = value
            touched.add(row + shape_row)

        rows = sorted(touched)
        LOGGER.debug("Locked %s at (%d, %d) rot %d, rows %s", shape.name, row, col, rot, rows)
        return rows

    def check_rows(self, rows: Iterable[int]) -> List[int]:
        """Return the rows of ``rows`` whose interior is completely filled.

        Border columns are never inspected.  Input order is preserved.

        Raises:
            IndexError: If a row is outside ``0..rows - 2`` (the floor row
                included).
        """

        rows = list(rows)
        for row in rows:
            self._check_play_row(row)
        return [row for row in rows if bool(np.all(self.grid[row, 1:-1] != EMPTY))]

    def clear_rows(self, rows: Iterable[int]) -> None:
        """Remove ``rows`` and let everything above fall into place.

        Rows are cleared one at a time from the top of the board downwards.
        For each, the rows above move down by one, starting with the row right
        above and walking up until a row that was just moved down is empty:
        nothing can sit above an empty row once the clears above it have been
        applied.  Border columns never move.

        Raises:
            IndexError: If a row is not a clearable row of this grid.
        """

        targets = sorted(set(rows))
        for cleared in targets:
            self._check_play_row(cleared)

        for cleared in targets:
            for r in range(cleared - 1, -1, -1):
                self.grid[r + 1, 1:-1] = self.grid[r, 1:-1]
                if self.is_empty(r):
                    break
            else:
                # Walked off the top: the top row has nothing to inherit.
                self.grid[0, 1:-1] = EMPTY
            LOGGER.debug("Cleared row %d", cleared)


__all__ = [
    "PlayfieldGrid",
    "BORDER",
    "EMPTY",
    "DEFAULT_ROWS",
    "DEFAULT_COLS",
    "HIDDEN_ROWS",
]
