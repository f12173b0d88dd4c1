"""High level game state container.

:class:`GameState` plays the role of the game loop's rule keeper: it owns the
playfield and the shape factory, tracks the falling piece and turns discrete
input events into collision-checked moves.  It has no notion of time; callers
decide when gravity applies by calling :meth:`GameState.gravity_step`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List, Optional, Tuple

from .factory import ShapeFactory
from .playfield import DEFAULT_COLS, DEFAULT_ROWS, PlayfieldGrid
from .rotation_systems import RotationSystem
from .shape import ShapeGeometry


LOGGER = logging.getLogger(__name__)


class Action(IntEnum):
    """Discrete input events a front-end can feed to :meth:`GameState.step`."""

    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    SOFT_DROP = 4
    TOGGLE_DEBUG = 5
    NONE = 6


@dataclass
class GameConfig:
    """Board size, ruleset and seed for a game session."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    rotation_system: RotationSystem = RotationSystem.NES
    random_seed: Optional[int] = None


@dataclass
class ActivePiece:
    """Falling piece: a shape plus where and how it is oriented."""

    shape: ShapeGeometry
    row: int = 0
    col: int = 0
    rotation: int = 0

    def blocks(self) -> List[Tuple[int, int, int]]:
        """Return the global ``(row, col, value)`` of every occupied cell."""

        return [
            (self.row + r, self.col + c, value)
            for r, c, value in self.shape.cells(self.rotation)
        ]


def spawn_column(cols: int, shape: ShapeGeometry) -> int:
    """Column that centres ``shape`` on a board ``cols`` wide."""

    return cols // 2 - shape.width // 2


@dataclass
class GameState:
    """Mutable state for a game session."""

    config: GameConfig = field(default_factory=GameConfig)
    board: PlayfieldGrid = field(init=False)
    factory: ShapeFactory = field(init=False)
    active: Optional[ActivePiece] = field(default=None, init=False)
    game_over: bool = field(default=False, init=False)
    debug_view: bool = field(default=False, init=False)
    pieces: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        # Ruleset switches update the session copy, never the caller's config.
        self.config = replace(self.config)
        self.board = PlayfieldGrid(self.config.rows, self.config.cols)
        self.factory = ShapeFactory(self.config.rotation_system, self.config.random_seed)

    def spawn_piece(self) -> Optional[ActivePiece]:
        """Spawn and return the next active piece.

        The piece spawns horizontally centred, shifted down by its shape's
        spawn row offset.  If that position is already blocked the game is
        over and ``None`` is returned.
        """

        shape = self.factory.current_piece()
        piece = ActivePiece(
            shape,
            row=shape.spawn_row_offset,
            col=spawn_column(self.board.cols, shape),
        )
        if self.board.collides(shape, piece.row, piece.col, piece.rotation):
            self.active = None
            self.game_over = True
            LOGGER.info("Game over after %d pieces", self.pieces)
            return None
        self.active = piece
        return piece

    def preview(self) -> ShapeGeometry:
        """Return the shape that will spawn next."""

        return self.factory.preview_piece()

    def _try_place(self, row: int, col: int, rotation: int) -> bool:
        piece = self.active
        if piece is None or self.board.collides(piece.shape, row, col, rotation):
            return False
        piece.row, piece.col, piece.rotation = row, col, rotation
        return True

    def move_left(self) -> bool:
        if self.active is None:
            return False
        return self._try_place(self.active.row, self.active.col - 1, self.active.rotation)

    def move_right(self) -> bool:
        if self.active is None:
            return False
        return self._try_place(self.active.row, self.active.col + 1, self.active.rotation)

    def rotate_clockwise(self) -> bool:
        """Rotate the active piece a quarter turn clockwise if it fits."""

        if self.active is None:
            return False
        return self._try_place(self.active.row, self.active.col, (self.active.rotation + 1) % 4)

    def rotate_counterclockwise(self) -> bool:
        """Rotate the active piece a quarter turn counter-clockwise if it fits."""

        if self.active is None:
            return False
        return self._try_place(self.active.row, self.active.col, (self.active.rotation + 3) % 4)

    def soft_drop(self) -> bool:
        """Move the active piece down one row, locking it when it cannot move.

        Returns ``True`` if the piece moved and ``False`` if it was locked.
        """

        if self.active is None:
            return False
        if self._try_place(self.active.row + 1, self.active.col, self.active.rotation):
            return True
        self.lock_piece()
        return False

    def gravity_step(self) -> bool:
        """Apply one step of gravity.  Same rules as :meth:`soft_drop`."""

        return self.soft_drop()

    def lock_piece(self) -> List[int]:
        """Commit the active piece, clear full rows and spawn the next piece.

        Returns the rows that were cleared.
        """

        piece = self.active
        if piece is None:
            return []
        touched = self.board.add(piece.shape, piece.row, piece.col, piece.rotation)
        full = self.board.check_rows(touched)
        self.board.clear_rows(full)
        self.pieces += 1
        self.active = None
        if full:
            LOGGER.debug("Cleared %d row(s): %s", len(full), full)
        self.spawn_piece()
        return full

    def toggle_debug_view(self) -> bool:
        self.debug_view = not self.debug_view
        return self.debug_view

    def switch_ruleset(self, rotation_system: RotationSystem) -> None:
        """Switch rotation systems.  The falling piece keeps its geometry."""

        self.factory.switch_ruleset(rotation_system)
        self.config.rotation_system = self.factory.rotation_system

    def step(self, action: Action) -> bool:
        """Apply ``action`` and return whether it changed anything."""

        if self.game_over:
            return False

        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.ROTATE_CW:
            return self.rotate_clockwise()
        if action == Action.ROTATE_CCW:
            return self.rotate_counterclockwise()
        if action == Action.SOFT_DROP:
            self.soft_drop()
            return True
        if action == Action.TOGGLE_DEBUG:
            self.toggle_debug_view()
            return True
        return False

    def reset_game(self) -> None:
        """Reset the entire game state for a new game."""

        self.board = PlayfieldGrid(self.config.rows, self.config.cols)
        self.factory = ShapeFactory(self.config.rotation_system, self.config.random_seed)
        self.active = None
        self.game_over = False
        self.debug_view = False
        self.pieces = 0
        self.spawn_piece()


__all__ = ["Action", "ActivePiece", "GameConfig", "GameState", "spawn_column"]
