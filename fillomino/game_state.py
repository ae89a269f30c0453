"""
Game State
==========
Play state for one Fillomino session.

The clues of a puzzle live in a ``SharedClues`` object that every state
derived from the puzzle points at; it is never mutated. Each ``GameState``
owns its own board list, so moves applied to one state are invisible to the
others. ``execute_move`` always returns a fresh state and leaves the
receiver untouched, which keeps older states usable as undo history.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from fillomino.board import EMPTY, max_digit
from fillomino.errors import InvalidDescriptionError, InvalidParamsError, SolveFailedError
from fillomino.generators.clue_minimizer import generate_puzzle
from fillomino.rendering import board_to_string
from fillomino.solvers.constraint_solver import SOLUTION_TAG, ConstraintSolver, solution_string
from fillomino.validators import check_win_condition, validate_desc, validate_params

logger = logging.getLogger(__name__)

PRESETS: Tuple[Tuple[int, int], ...] = ((5, 5), (7, 7), (9, 9))
DEFAULT_PRESET = 1

_EDIT_MOVE = re.compile(r"([0-9]+)_([0-9]+)")
_PARAMS = re.compile(r"([0-9]+)(?:x([0-9]+))?")


def encode_params(w: int, h: int) -> str:
    return f"{w}x{h}"


def decode_params(string: str) -> Tuple[int, int]:
    """Parse ``"WxH"``; a bare ``"N"`` means a square N x N grid."""
    m = _PARAMS.fullmatch(string.strip())
    if m is None:
        raise InvalidParamsError(f"bad parameter string: {string!r}")
    w = int(m.group(1))
    h = int(m.group(2)) if m.group(2) is not None else w
    return w, h


def encode_move(index: int, value: int) -> str:
    return f"{index}_{value}"


def parse_puzzle_id(puzzle_id: str) -> Tuple[int, int, str]:
    """Split ``"WxH:description"`` and validate both halves."""
    params, sep, desc = puzzle_id.partition(":")
    if not sep:
        raise InvalidDescriptionError(f"bad puzzle id: {puzzle_id}")
    w, h = decode_params(params)
    err = validate_params(w, h)
    if err:
        raise InvalidParamsError(err)
    err = validate_desc(w, h, desc)
    if err:
        raise InvalidDescriptionError(err)
    return w, h, desc


@dataclass(frozen=True)
class SharedClues:
    """Read-only puzzle data shared by every state of one puzzle."""
    width: int
    height: int
    clues: Tuple[int, ...]
    cached_solution: Optional[str] = None

    @property
    def size(self) -> int:
        return self.width * self.height

    def is_clue(self, index: int) -> bool:
        return self.clues[index] != EMPTY


class GameState:
    def __init__(self, shared: SharedClues, board: List[int],
                 completed: bool = False, cheated: bool = False):
        self.shared = shared
        self.board = board
        self.completed = completed
        self.cheated = cheated

    # ── Construction ───────────────────────────────────────────

    @classmethod
    def new_game(cls, width: int, height: int, desc: str,
                 solution: Optional[str] = None) -> "GameState":
        err = validate_params(width, height)
        if err:
            raise InvalidParamsError(err)
        err = validate_desc(width, height, desc)
        if err:
            raise InvalidDescriptionError(err)

        clues = tuple(int(ch) for ch in desc)
        shared = SharedClues(width, height, clues, cached_solution=solution)
        return cls(shared, list(clues))

    @classmethod
    def generate(cls, width: int, height: int,
                 rng: Optional[random.Random] = None) -> "GameState":
        desc, solution = generate_puzzle(width, height, rng)
        logger.info("New %s puzzle: %s", encode_params(width, height), desc)
        return cls.new_game(width, height, desc, solution=solution_string(solution))

    def dup(self) -> "GameState":
        return GameState(self.shared, list(self.board), self.completed, self.cheated)

    # ── Accessors ──────────────────────────────────────────────

    @property
    def width(self) -> int:
        return self.shared.width

    @property
    def height(self) -> int:
        return self.shared.height

    @property
    def clues(self) -> Tuple[int, ...]:
        return self.shared.clues

    def description(self) -> str:
        return "".join(str(v) for v in self.shared.clues)

    def text_format(self) -> str:
        return board_to_string(self.board, self.width, self.height)

    # ── Moves ──────────────────────────────────────────────────

    def edit_move(self, index: int, value: int) -> Optional[str]:
        """
        Encode setting one cell. Returns "" when nothing would change, and
        None for clue cells or out-of-range input.
        """
        if not 0 <= index < self.shared.size or self.shared.is_clue(index):
            return None
        if not 0 <= value <= max_digit(self.width, self.height):
            return None
        if self.board[index] == value:
            return ""
        return encode_move(index, value)

    def execute_move(self, move: str) -> Optional["GameState"]:
        """
        Apply a move string and return the resulting state, or None if the
        move is malformed or would overwrite a clue.
        """
        if move.startswith(SOLUTION_TAG):
            board = self._parse_solution(move[len(SOLUTION_TAG):])
            if board is None:
                return None
            new_state = self.dup()
            new_state.board = board
            new_state.cheated = True
        else:
            m = _EDIT_MOVE.fullmatch(move)
            if m is None:
                return None
            index = int(m.group(1))
            value = int(m.group(2))
            if index >= self.shared.size or value > max_digit(self.width, self.height):
                return None
            if self.shared.is_clue(index) and value != self.shared.clues[index]:
                return None
            new_state = self.dup()
            new_state.board[index] = value

        if not new_state.completed:
            new_state.completed, _ = check_win_condition(
                new_state.board, self.width, self.height
            )
        return new_state

    def _parse_solution(self, digits: str) -> Optional[List[int]]:
        if len(digits) != self.shared.size:
            return None
        if not all(ch.isascii() and ch.isdigit() for ch in digits):
            return None
        board = [int(ch) for ch in digits]
        for clue, value in zip(self.shared.clues, board):
            if clue != EMPTY and clue != value:
                return None
        return board

    # ── Solving ────────────────────────────────────────────────

    def solve_game(self, from_current: bool = False) -> str:
        """
        Return a solve move for this puzzle.

        By default the solver starts from the clues alone and a solution
        cached at generation time is used when present. With
        ``from_current`` it starts from the clues plus the player's entries.
        Raises SolveFailedError when the solver cannot resolve every cell.
        """
        if not from_current and self.shared.cached_solution is not None:
            return self.shared.cached_solution

        start = self.board if from_current else list(self.shared.clues)
        result = ConstraintSolver(start, self.width, self.height).solve(want_solution=True)
        if not result["success"]:
            raise SolveFailedError()
        return result["solution"]


def flash_on_completion(old: GameState, new: GameState) -> bool:
    """True when *new* completed the puzzle by the player's own moves."""
    return (not old.completed and new.completed
            and not old.cheated and not new.cheated)
