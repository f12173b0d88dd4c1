"""Shape geometry and rotation behaviour.

A shape is stored once, unrotated, as a square bounding-box matrix.  Rotated
views are computed on demand from the matrix by mapping the queried cell back
to the cell it was rotated from.  Three rotation behaviours are supported:

``FREE``
    True four state rotation (quarter turns of the bounding box).
``RESTRICTED``
    Two state rotation: states ``0`` and ``2`` show the unrotated matrix and
    states ``1`` and ``3`` both show the ``FREE`` state ``3`` view.
``FIXED``
    Rotation has no visible effect.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidRotation, MalformedGeometry


ROTATIONS = (0, 1, 2, 3)

# Cell values shared with the playfield.  Shape cells hold values in
# ``EMPTY..BORDER - 1``; ``BORDER`` marks the permanent walls and floor.
EMPTY = 0
BORDER = 99

Color = Tuple[int, int, int]
Cell = Tuple[int, int, int]  # (row, col, value)


class RotationVariant(str, Enum):
    """How a shape responds to rotation requests."""

    FREE = "free"
    RESTRICTED = "restricted"
    FIXED = "fixed"


def check_rotation(rot: object) -> int:
    """Return ``rot`` as an ``int`` or raise :class:`InvalidRotation`."""

    if isinstance(rot, bool) or not isinstance(rot, (int, np.integer)):
        raise InvalidRotation(rot)
    if not 0 <= rot <= 3:
        raise InvalidRotation(rot)
    return int(rot)


def source_cell(
    variant: RotationVariant, width: int, row: int, col: int, rot: int
) -> Tuple[int, int]:
    """Return the unrotated ``(row, col)`` shown at ``(row, col)`` after ``rot``.

    ``rot`` must already be validated.
    """

    if variant is RotationVariant.FIXED:
        return row, col
    if variant is RotationVariant.RESTRICTED:
        rot = 0 if rot in (0, 2) else 3

    last = width - 1
    if rot == 0:
        return row, col
    if rot == 1:
        return last - col, row
    if rot == 2:
        return last - row, last - col
    return col, last - row


@dataclass(frozen=True)
class ShapeGeometry:
    """Immutable definition of a piece.

    Attributes
    ----------
    name:
        Letter naming the piece, informational only.
    matrix:
        Row-major cell values of the ``width * width`` bounding box.  ``0``
        marks an unused cell.
    width:
        Side length of the bounding box.
    color:
        Opaque display attribute handed through to renderers.
    variant:
        The :class:`RotationVariant` applied by :meth:`rotate`.
    spawn_row_offset:
        Rows to shift the piece down from row ``0`` when it spawns.
    """

    name: str
    matrix: Tuple[int, ...]
    width: int
    color: Color = (255, 255, 255)
    variant: RotationVariant = RotationVariant.FREE
    spawn_row_offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "matrix", tuple(int(v) for v in self.matrix))
        if isinstance(self.color, list):
            object.__setattr__(self, "color", tuple(self.color))
        if self.width <= 0:
            raise MalformedGeometry(f"Shape {self.name!r} has non-positive width {self.width}")
        if len(self.matrix) != self.width * self.width:
            raise MalformedGeometry(
                f"Shape {self.name!r} has {len(self.matrix)} cells, "
                f"expected {self.width * self.width} for width {self.width}"
            )
        if any(not EMPTY <= v < BORDER for v in self.matrix):
            raise MalformedGeometry(
                f"Shape {self.name!r} cell values must be in {EMPTY}..{BORDER - 1}"
            )

    def __len__(self) -> int:
        return len(self.matrix)

    def row(self, index: int) -> int:
        return index // self.width

    def col(self, index: int) -> int:
        return index % self.width

    def rotate(self, row: int, col: int, rot: int) -> int:
        """Return the value displayed at ``(row, col)`` after ``rot`` quarter turns.

        The stored matrix is never modified.

        Raises:
            InvalidRotation: If ``rot`` is not one of ``0``, ``1``, ``2`` or ``3``.
            IndexError: If ``(row, col)`` is outside the bounding box.
        """

        rot = check_rotation(rot)
        if not (0 <= row < self.width and 0 <= col < self.width):
            raise IndexError("Cell out of bounds")
        row_r, col_r = source_cell(self.variant, self.width, row, col, rot)
        return self.matrix[row_r * self.width + col_r]

    def cells(self, rot: int) -> Tuple[Cell, ...]:
        """Return the occupied ``(row, col, value)`` cells at rotation ``rot``."""

        return _occupied_cells(self, check_rotation(rot))

    def rotated_matrix(self, rot: int) -> NDArray[np.uint8]:
        """Return the ``width x width`` view of the shape at rotation ``rot``."""

        out = np.zeros((self.width, self.width), dtype=np.uint8)
        for row, col, value in self.cells(rot):
            out[row, col] = value
        return out


@lru_cache(maxsize=None)
def _occupied_cells(shape: ShapeGeometry, rot: int) -> Tuple[Cell, ...]:
    cells: List[Cell] = []
    for i in range(len(shape)):
        row, col = shape.row(i), shape.col(i)
        row_r, col_r = source_cell(shape.variant, shape.width, row, col, rot)
        value = shape.matrix[row_r * shape.width + col_r]
        if value:
            cells.append((row, col, value))
    return tuple(cells)


__all__ = [
    "BORDER",
    "EMPTY",
    "ROTATIONS",
    "RotationVariant",
    "ShapeGeometry",
    "check_rotation",
    "source_cell",
]
