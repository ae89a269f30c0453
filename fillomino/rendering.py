"""
Plaintext rendering of a board, e.g. for a 3x2 board::

    +---+---+---+
    | 3 |   | 2 |
    +---+---+---+
    | 3 | 3 | 2 |
    +---+---+---+
"""

from typing import Sequence

from fillomino.board import EMPTY


def board_to_string(board: Sequence[int], w: int, h: int) -> str:
    fence = "+---" * w + "+\n"
    lines = [fence]
    for y in range(h):
        row = board[y * w:(y + 1) * w]
        cells = "".join("|   " if v == EMPTY else f"| {v} " for v in row)
        lines.append(cells + "|\n")
        lines.append(fence)
    return "".join(lines)
