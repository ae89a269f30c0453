"""
Demo Puzzle
===========
A handcrafted 7x7 instance from the Nikoli website, useful for checking the
renderer and the validators against a known-good solution::

    +---+---+---+---+---+---+---+
    | 6 |   |   | 2 |   |   | 2 |
    +---+---+---+---+---+---+---+
    |   | 3 |   | 6 |   | 3 |   |
    +---+---+---+---+---+---+---+
    | 3 |   |   |   |   |   | 1 |
    +---+---+---+---+---+---+---+
    |   | 2 | 3 |   | 4 | 2 |   |
    +---+---+---+---+---+---+---+
    | 2 |   |   |   |   |   | 3 |
    +---+---+---+---+---+---+---+
    |   | 5 |   | 1 |   | 4 |   |
    +---+---+---+---+---+---+---+
    | 4 |   |   | 3 |   |   | 3 |
    +---+---+---+---+---+---+---+
"""

from typing import List, Tuple

NIKOLI_7X7_ID = "7x7:6002002030603030000010230420200000305010404003003"
NIKOLI_7X7_SOLUTION = "6662232336663232331311235422255544325413434443313"


def _digits(desc: str) -> List[int]:
    return [int(ch) for ch in desc]


def get_demo_puzzle_7x7() -> Tuple[int, int, str, List[int]]:
    """Return ``(width, height, description, solution_board)``."""
    params, _, desc = NIKOLI_7X7_ID.partition(":")
    w, h = (int(v) for v in params.split("x"))
    return w, h, desc, _digits(NIKOLI_7X7_SOLUTION)
