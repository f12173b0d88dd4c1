"""Hand out pieces from the active rotation system."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Tuple

from .rotation_systems import RotationSystem, build_catalog
from .rsg import RandomShapeGenerator
from .shape import ShapeGeometry


LOGGER = logging.getLogger(__name__)


class ShapeFactory:
    """Couple a shape catalog with a :class:`RandomShapeGenerator`.

    The catalog and the generator are always swapped together so the
    generator never produces an index the catalog does not have.
    """

    def __init__(
        self,
        rotation_system: RotationSystem = RotationSystem.NES,
        seed: Optional[int] = None,
    ) -> None:
        self._system = RotationSystem(rotation_system)
        self._shapes = build_catalog(self._system)
        self._generator = RandomShapeGenerator(len(self._shapes), seed)

    @property
    def rotation_system(self) -> RotationSystem:
        return self._system

    @property
    def generator(self) -> RandomShapeGenerator:
        return self._generator

    def current_piece(self) -> ShapeGeometry:
        """Draw the next piece and return a copy of its geometry."""

        return replace(self._shapes[self._generator.draw()])

    def preview_piece(self) -> ShapeGeometry:
        """Return a copy of the upcoming piece without consuming it."""

        return replace(self._shapes[self._generator.peek()])

    def switch_ruleset(self, rotation_system: RotationSystem) -> None:
        """Replace the catalog and generator with ones for ``rotation_system``."""

        system = RotationSystem(rotation_system)
        shapes = build_catalog(system)
        generator = RandomShapeGenerator(len(shapes), rng=self._generator.rng)
        self._system, self._shapes, self._generator = system, shapes, generator
        LOGGER.debug("Switched to %s (%d shapes)", system.display_name, len(shapes))

    def all_shapes(self) -> Tuple[ShapeGeometry, ...]:
        """Return the full catalog of the active rotation system."""

        return self._shapes


__all__ = ["ShapeFactory"]
