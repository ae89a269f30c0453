"""
Standalone solver: reports whether the deduction engine can finish each
puzzle id given on the command line.

    python solve_puzzles.py 7x7:6002002030603030000010230420200000305010404003003
"""

import argparse
import logging
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fillomino import execution_trace
from fillomino.errors import FillominoError
from fillomino.game_state import parse_puzzle_id
from fillomino.rendering import board_to_string
from fillomino.solvers.constraint_solver import ConstraintSolver

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check Fillomino puzzles with the deduction solver")
    parser.add_argument("puzzles", nargs="+", help="Puzzle ids of the form WxH:description")
    parser.add_argument("--show", action="store_true", help="Print the board reached by the solver")
    parser.add_argument("--verbose", action="store_true", help="Log every deduction")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    execution_trace.DEBUG_MODE = args.verbose

    failures = 0
    for puzzle_id in args.puzzles:
        try:
            w, h, desc = parse_puzzle_id(puzzle_id)
        except FillominoError as e:
            logger.error("bad puzzle id %s: %s", puzzle_id, e)
            failures += 1
            continue

        result = ConstraintSolver([int(ch) for ch in desc], w, h).solve()
        verdict = "solvable" if result["success"] else "not solvable"
        print(f"{puzzle_id}: {verdict}")
        if args.show:
            print(board_to_string(result["board"], w, h), end="")
        if not result["success"]:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
