"""Exceptions raised by the block engine."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for all engine errors."""


class InvalidRotation(EngineError, ValueError):
    """Raised when a rotation index outside ``0..3`` reaches the engine."""

    def __init__(self, rotation: object) -> None:
        super().__init__(f"Rotation values must go from 0 to 3, got {rotation!r}")
        self.rotation = rotation


class MalformedGeometry(EngineError, ValueError):
    """Raised when a shape matrix does not fill its square bounding box."""


class PlacementViolatesInvariant(EngineError, RuntimeError):
    """Raised when a piece is added at a position where it collides.

    ``collides`` must be consulted (and return ``False``) before a piece is
    committed to the playfield.  The playfield is left untouched when this is
    raised.
    """


__all__ = [
    "EngineError",
    "InvalidRotation",
    "MalformedGeometry",
    "PlacementViolatesInvariant",
]
