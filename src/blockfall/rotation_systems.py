"""Piece catalogs for the supported rotation systems.

Each rotation system defines the seven tetrominoes as literal bounding-box
matrices.  The position of a shape in its catalog is the piece identity; the
value written into every filled cell is that index plus one so locked cells
remember which piece they came from.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence, Tuple

from .errors import MalformedGeometry
from .shape import RotationVariant, ShapeGeometry


FREE = RotationVariant.FREE
RESTRICTED = RotationVariant.RESTRICTED
FIXED = RotationVariant.FIXED


class RotationSystem(str, Enum):
    """Selectable rulesets."""

    NES = "nes"
    SRS = "srs"

    @property
    def display_name(self) -> str:
        """Human readable name shown by front-ends."""

        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    RotationSystem.NES: "Nintendo Rotation System",
    RotationSystem.SRS: "Super Rotation System",
}

COLORS = {
    "I": (0, 255, 255),
    "J": (0, 0, 255),
    "L": (255, 165, 0),
    "O": (255, 255, 0),
    "S": (0, 255, 0),
    "T": (128, 0, 128),
    "Z": (255, 0, 0),
}

# (name, rows, variant, spawn row offset).  Rows use 1 for a filled cell; the
# catalog builder replaces it with the piece value.
ShapeDef = Tuple[str, Sequence[str], RotationVariant, int]

# Guideline spawn orientations, rotating about the centre of the box.
_SRS_SHAPES: List[ShapeDef] = [
    ("I", ["0000",
           "1111",
           "0000",
           "0000"], FREE, 0),
    ("J", ["100",
           "111",
           "000"], FREE, 0),
    ("L", ["001",
           "111",
           "000"], FREE, 0),
    ("O", ["0110",
           "0110",
           "0000",
           "0000"], FIXED, 0),
    ("S", ["011",
           "110",
           "000"], FREE, 0),
    ("T", ["010",
           "111",
           "000"], FREE, 0),
    ("Z", ["110",
           "011",
           "000"], FREE, 0),
]

# Classic orientations: flat side up, pointing down.  Every piece but I is
# pushed down one row at spawn; the I matrix already carries its lead-in rows.
_NES_SHAPES: List[ShapeDef] = [
    ("I", ["0000",
           "0000",
           "1111",
           "0000"], RESTRICTED, 0),
    ("J", ["000",
           "111",
           "001"], FREE, 1),
    ("L", ["000",
           "111",
           "100"], FREE, 1),
    ("O", ["0000",
           "0110",
           "0110",
           "0000"], FIXED, 1),
    ("S", ["000",
           "011",
           "110"], RESTRICTED, 1),
    ("T", ["000",
           "111",
           "010"], FREE, 1),
    ("Z", ["000",
           "110",
           "011"], RESTRICTED, 1),
]

_DEFINITIONS: Dict[RotationSystem, List[ShapeDef]] = {
    RotationSystem.NES: _NES_SHAPES,
    RotationSystem.SRS: _SRS_SHAPES,
}


def _build_shape(index: int, definition: ShapeDef) -> ShapeGeometry:
    name, rows, variant, offset = definition
    width = len(rows)
    if any(len(row) != width for row in rows):
        raise MalformedGeometry(f"Shape {name!r} rows do not form a square")
    value = index + 1
    matrix = tuple(value if ch == "1" else 0 for row in rows for ch in row)
    return ShapeGeometry(
        name=name,
        matrix=matrix,
        width=width,
        color=COLORS[name],
        variant=variant,
        spawn_row_offset=offset,
    )


def build_catalog(system: RotationSystem) -> Tuple[ShapeGeometry, ...]:
    """Return the ordered shape catalog for ``system``."""

    system = RotationSystem(system)
    return tuple(_build_shape(i, d) for i, d in enumerate(_DEFINITIONS[system]))


__all__ = ["RotationSystem", "build_catalog", "COLORS"]
