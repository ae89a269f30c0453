"""
Board Geometry
==============
Row-major grid helpers shared by the generator, solver and validators.

A board is a flat list of ``w * h`` small integers where ``0`` marks an
empty cell. Cell ``(x, y)`` lives at index ``y * w + x``.
"""

from __future__ import annotations

from typing import Iterator

EMPTY = 0

# Neighbour order matters to the solver: left, right, up, down.
DX = (-1, 1, 0, 0)
DY = (0, 0, -1, 1)


def neighbors(i: int, w: int, h: int) -> Iterator[int]:
    """Yield the orthogonal neighbours of cell *i* in left/right/up/down order."""
    x, y = i % w, i // w
    for k in range(4):
        nx = x + DX[k]
        ny = y + DY[k]
        if 0 <= nx < w and 0 <= ny < h:
            yield ny * w + nx


def max_region_size(w: int, h: int) -> int:
    """
    Largest region the generator may build.

    A 2x2 grid cannot be filled with values <= 2 without two equal-sized
    regions touching, hence the floor of 3.
    """
    return min(max(w, h, 3), 9)


def max_digit(w: int, h: int) -> int:
    """Largest digit a description or an edit may carry."""
    return min(max(w, h, 3), 9)
