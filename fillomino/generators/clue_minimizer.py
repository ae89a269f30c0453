import random
from typing import List, Optional, Sequence, Tuple

from fillomino import execution_trace
from fillomino.board import EMPTY
from fillomino.generators.region_growth_generator import RegionGrowthGenerator
from fillomino.solvers.constraint_solver import ConstraintSolver
from fillomino.solvers.merge_sort import merge_sort


def removal_order(board: Sequence[int]) -> List[int]:
    """Cell indices, largest value first; equal values keep index order."""
    return merge_sort(range(len(board)), key=lambda i: board[i], reverse=True)


class ClueMinimizer:
    """
    Strips clues from a solved board while the solver can still rebuild it.

    A single pass is enough: extra clues never make the solver weaker, so a
    clue that had to stay while later clues were still present would also
    have to stay after they are gone.
    """

    def __init__(self, solution: Sequence[int], width: int, height: int):
        if len(solution) != width * height:
            raise ValueError(
                f"board has {len(solution)} cells, expected {width * height}"
            )
        self.solution = list(solution)
        self.width = width
        self.height = height
        self.solver_calls = 0

    def minimize(self) -> List[int]:
        clues = list(self.solution)
        for i in removal_order(self.solution):
            clues[i] = EMPTY
            self.solver_calls += 1
            solved = ConstraintSolver(clues, self.width, self.height).solve()["success"]
            if not solved:
                clues[i] = self.solution[i]
            execution_trace.log_clue_decision(i, self.solution[i], removed=solved)
        return clues

    def describe(self) -> str:
        return board_to_desc(self.minimize())


def board_to_desc(board: Sequence[int]) -> str:
    return "".join(str(v) for v in board)


def generate_puzzle(width: int, height: int, rng: Optional[random.Random] = None,
                    max_attempts: Optional[int] = None) -> Tuple[str, List[int]]:
    """
    Generate a new puzzle.

    Returns the description string (one digit per cell, '0' for blanks) and
    the complete board it was minimized from.
    """
    generator = RegionGrowthGenerator(width, height, rng, max_attempts=max_attempts)
    solution = generator.generate()
    desc = ClueMinimizer(solution, width, height).describe()
    return desc, solution
