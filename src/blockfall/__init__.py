"""Rule engine for a falling-block puzzle game."""

from .errors import EngineError, InvalidRotation, MalformedGeometry, PlacementViolatesInvariant
from .shape import RotationVariant, ShapeGeometry
from .rotation_systems import RotationSystem, build_catalog
from .rsg import RandomShapeGenerator
from .factory import ShapeFactory
from .playfield import BORDER, EMPTY, HIDDEN_ROWS, PlayfieldGrid
from .game_state import Action, ActivePiece, GameConfig, GameState
from .utils import format_grid, render_grid, visible_rows

__all__ = [
    "EngineError",
    "InvalidRotation",
    "MalformedGeometry",
    "PlacementViolatesInvariant",
    "RotationVariant",
    "ShapeGeometry",
    "RotationSystem",
    "build_catalog",
    "RandomShapeGenerator",
    "ShapeFactory",
    "PlayfieldGrid",
    "BORDER",
    "EMPTY",
    "HIDDEN_ROWS",
    "Action",
    "ActivePiece",
    "GameConfig",
    "GameState",
    "render_grid",
    "visible_rows",
    "format_grid",
]
