"""Command line demo for the block engine.

Run with: `python -m blockfall`

Without ``--demo`` a seeded random self-play drops pieces until ``--pieces``
have locked or the game is over, then prints the visible board.  With
``--demo`` every shape of the ruleset is printed at the chosen rotation,
which is handy to eyeball a rotation system.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional, Sequence

from .game_state import GameConfig, GameState
from .rotation_systems import RotationSystem, build_catalog
from .shape import ROTATIONS
from .utils import format_grid, render_grid, visible_rows


LOGGER = logging.getLogger(__name__)


def rotation_demo(system: RotationSystem, rotation: int) -> str:
    """Return every shape of ``system`` drawn at ``rotation``."""

    lines: List[str] = [f"{system.display_name} (rotation {rotation})"]
    for shape in build_catalog(system):
        lines.append(f"{shape.name} [{shape.variant.value}]")
        lines.append(format_grid(shape.rotated_matrix(rotation).tolist()))
    return "\n".join(lines)


def self_play(state: GameState, pieces: int, rng: random.Random) -> None:
    """Drop up to ``pieces`` pieces with random rotations and shifts."""

    state.reset_game()
    while state.pieces < pieces and not state.game_over:
        for _ in range(rng.randrange(4)):
            state.rotate_clockwise()
        shift = rng.randint(-state.board.cols // 2, state.board.cols // 2)
        move = state.move_right if shift > 0 else state.move_left
        for _ in range(abs(shift)):
            if not move():
                break
        while state.soft_drop():
            pass
    LOGGER.info("Locked %d piece(s), game over: %s", state.pieces, state.game_over)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__)
    parser.add_argument(
        "--ruleset",
        choices=[system.value for system in RotationSystem],
        default=RotationSystem.NES.value,
        help="Rotation system to play with.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (defaults to the clock).")
    parser.add_argument("--pieces", type=int, default=30, help="Number of pieces to lock in self-play.")
    parser.add_argument("--demo", action="store_true", help="Print the rotation demo and exit.")
    parser.add_argument(
        "--rotation",
        type=int,
        choices=ROTATIONS,
        default=0,
        help="Rotation index shown by --demo.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    system = RotationSystem(args.ruleset)

    if args.demo:
        print(rotation_demo(system, args.rotation))
        return 0

    state = GameState(GameConfig(rotation_system=system, random_seed=args.seed))
    self_play(state, args.pieces, random.Random(args.seed))
    print(format_grid(visible_rows(render_grid(state.board, state.active))))
    print(f"pieces: {state.pieces}{'  (game over)' if state.game_over else ''}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
