"""
Constraint Solver
=================
Fixed-point deduction engine for partially filled Fillomino boards.

Rules applied on every pass, cell by cell:

- Forced expansion (too small): an empty cell next to a region whose
  reachable room, without that cell, cannot hold the region's number must
  join that region.
- Dropping in a one: an empty cell with no empty neighbours, where every
  neighbouring region would overflow by absorbing it and none of them is a
  1, can only be a 1.
- Forced expansion (too big): a region that can grow into exactly one
  empty cell without overflowing must grow there.

Guarantees:
- Never guesses; no case splitting or backtracking
- Every deduction fills one empty cell, so passes are bounded by the grid size
- The caller's board is never mutated
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

from fillomino import execution_trace
from fillomino.board import EMPTY, neighbors
from fillomino.connectivity import ConnectivityTracker

SOLUTION_TAG = "s"

Deduction = Tuple[int, int, str]  # (cell, value, rule)


class ConstraintSolver:
    def __init__(self, board: Sequence[int], width: int, height: int):
        if len(board) != width * height:
            raise ValueError(
                f"board has {len(board)} cells, expected {width * height}"
            )
        self.width = width
        self.height = height
        self.board: List[int] = list(board)
        self.tracker = ConnectivityTracker.from_board(self.board, width, height)
        self.empty_count = sum(1 for v in self.board if v == EMPTY)

        self.passes = 0
        self.deductions: List[Deduction] = []

        # visited stamps for the flood fill; a cell is visited when its
        # stamp equals the current epoch
        self._stamp = [0] * (width * height)
        self._epoch = 0

    # ── Public API ─────────────────────────────────────────────

    def solve(self, want_solution: bool = False) -> Dict[str, Any]:
        start = time.perf_counter()
        sz = self.width * self.height

        while self.empty_count:
            self.passes += 1
            before = len(self.deductions)

            for i in range(sz):
                if self.board[i] == EMPTY:
                    self._empty_cell_rule(i)
                    continue

                root = self.tracker.find(i)
                if root != i:
                    continue
                if self.tracker.class_size[root] == self.board[root]:
                    continue
                self._region_completion_rule(root)

            made = len(self.deductions) - before
            execution_trace.log_solver_pass(self.passes, made, self.empty_count)
            if not made:
                break

        success = self.empty_count == 0
        return {
            "success": success,
            "status": "Solved" if success else "Stuck",
            "board": list(self.board),
            "empty_remaining": self.empty_count,
            "deductions": list(self.deductions),
            "passes": self.passes,
            "time_taken": time.perf_counter() - start,
            "solution": solution_string(self.board) if (want_solution and success) else None,
        }

    # ── Rules ──────────────────────────────────────────────────

    def _empty_cell_rule(self, i: int) -> bool:
        board = self.board
        only_one_fits = True

        for n in neighbors(i, self.width, self.height):
            value = board[n]
            if value == EMPTY:
                only_one_fits = False
                continue

            if only_one_fits and (value == 1 or value >= self._expand_size(i, value)):
                only_one_fits = False

            if self._reachable(n, blocked=i) >= value:
                continue
            self._expand(i, n, "forced expansion (too small)")
            return True

        if only_one_fits:
            board[i] = 1
            self.empty_count -= 1
            self.deductions.append((i, 1, "dropping in a one"))
            execution_trace.log_deduction("dropping in a one", i, 1)
            return True
        return False

    def _region_completion_rule(self, root: int) -> bool:
        board = self.board
        target = board[root]
        candidate: Optional[int] = None

        for j in self.tracker.members(root):
            for idx in neighbors(j, self.width, self.height):
                if board[idx] != EMPTY or idx == candidate:
                    continue
                if self._expand_size(idx, target) > target:
                    continue
                if candidate is not None:
                    return False  # more than one way to grow
                candidate = idx

        if candidate is None:
            return False
        self._expand(candidate, root, "forced expansion (too big)")
        return True

    # ── Helpers ────────────────────────────────────────────────

    def _expand(self, dst: int, src: int, rule: str) -> None:
        board = self.board
        board[dst] = board[src]
        for j in neighbors(dst, self.width, self.height):
            if board[j] == board[dst]:
                self.tracker.merge(dst, j)
        self.empty_count -= 1
        self.deductions.append((dst, board[dst], rule))
        execution_trace.log_deduction(rule, dst, board[dst], src)

    def _expand_size(self, i: int, value: int) -> int:
        """Size of the region *value* would form if empty cell *i* took it."""
        size = 1
        hits: List[int] = []
        for j in neighbors(i, self.width, self.height):
            if self.board[j] != value:
                continue
            root = self.tracker.find(j)
            if root in hits:
                continue
            size += self.tracker.class_size[root]
            hits.append(root)
        return size

    def _reachable(self, start: int, blocked: int) -> int:
        """
        Count the cells reachable from *start* through empty cells and cells
        holding the same value as *start*, never entering *blocked*.
        """
        self._epoch += 1
        epoch = self._epoch
        stamp = self._stamp
        board = self.board
        value = board[start]

        stamp[blocked] = epoch
        stamp[start] = epoch
        stack = [start]
        count = 0
        while stack:
            cell = stack.pop()
            count += 1
            for j in neighbors(cell, self.width, self.height):
                if stamp[j] == epoch:
                    continue
                if board[j] == EMPTY or board[j] == value:
                    stamp[j] = epoch
                    stack.append(j)
        return count


def solution_string(board: Sequence[int]) -> str:
    """Encode a fully solved board as a solve move: 's' followed by one digit per cell."""
    return SOLUTION_TAG + "".join(str(v) for v in board)


def solve_board(board: Sequence[int], width: int, height: int,
                want_solution: bool = False) -> Tuple[bool, List[int], Optional[str]]:
    """Convenience wrapper returning ``(success, board, solution_string_or_None)``."""
    result = ConstraintSolver(board, width, height).solve(want_solution=want_solution)
    return result["success"], result["board"], result["solution"]
