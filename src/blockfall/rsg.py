"""Random shape generator with one piece of lookahead."""

from __future__ import annotations

import random
import time
from typing import Optional


class RandomShapeGenerator:
    """Produce a uniform stream of piece indices.

    The value returned by :meth:`peek` is always the value the next call to
    :meth:`draw` returns.  Every draw is an independent uniform sample over
    ``[0, piece_count)``; there is no bag or repeat protection.

    Parameters
    ----------
    piece_count:
        Number of distinct pieces in the active catalog.
    seed:
        Seed for the underlying :class:`random.Random`.  Defaults to a value
        derived from the wall clock.
    rng:
        Existing random source to draw from instead of creating one.  Used
        when the piece count changes but the entropy stream should continue.
    """

    def __init__(
        self,
        piece_count: int,
        seed: Optional[int] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        if piece_count < 1:
            raise ValueError("piece_count must be at least 1")
        if rng is None:
            rng = random.Random(time.time_ns() if seed is None else seed)
        self.rng = rng
        self.piece_count = piece_count
        self._next = self._sample()

    def _sample(self) -> int:
        return self.rng.randrange(self.piece_count)

    def peek(self) -> int:
        """Return the index the next :meth:`draw` will produce."""

        return self._next

    def draw(self) -> int:
        """Return the previewed index and generate a new one."""

        current = self._next
        self._next = self._sample()
        return current


__all__ = ["RandomShapeGenerator"]
