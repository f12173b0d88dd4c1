"""Utility helpers for front-ends built on the engine."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .game_state import ActivePiece
from .playfield import BORDER, EMPTY, HIDDEN_ROWS, PlayfieldGrid


def render_grid(board: PlayfieldGrid, active: Optional[ActivePiece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece).  Cells covered by the active piece receive the piece's own cell
    values.
    """

    grid = board.snapshot().tolist()
    if active is not None:
        for r, c, value in active.blocks():
            if 0 <= r < board.rows and 0 <= c < board.cols:
                grid[r][c] = value
    return grid


def visible_rows(grid: Sequence[Sequence[int]], hidden: int = HIDDEN_ROWS) -> List[List[int]]:
    """Drop the spawn buffer rows from the top of ``grid``."""

    return [list(row) for row in grid[hidden:]]


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Return ``grid`` as text, one line per row."""

    def char(cell: int) -> str:
        if cell == EMPTY:
            return "."
        if cell == BORDER:
            return "#"
        return "o"

    return "\n".join("".join(char(cell) for cell in row) for row in grid)


__all__ = ["render_grid", "visible_rows", "format_grid"]
