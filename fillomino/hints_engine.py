from fillomino.board import EMPTY
from fillomino.solvers.constraint_solver import ConstraintSolver
from fillomino.validators import find_overfull


class HintsEngine:
    """
    Hint engine for a game in progress.
    1. Error check: regions that already hold more cells than their number.
    2. Deduction: run the constraint solver on the current board and suggest
       the first cell it fills.
    """
    def __init__(self, game_state):
        self.game_state = game_state
        self.width = game_state.width
        self.height = game_state.height

    def generate_hint(self):
        board = self.game_state.board

        overfull = find_overfull(board, self.width, self.height)
        if overfull:
            return {
                "move": None,
                "cell": overfull[0],
                "strategy": "Error Check",
                "explanation": "Some regions are larger than their number. Undo recent moves!",
                "is_error": True,
                "highlight_cells": overfull,
            }

        result = ConstraintSolver(board, self.width, self.height).solve()
        if result["deductions"]:
            if result["success"]:
                solved = result["board"]
                cell = next(i for i, v in enumerate(board) if v == EMPTY)
                value = solved[cell]
                strategy = "Solver Deduction"
                explanation = f"The board can be completed from here; cell {cell} must be {value}."
            else:
                cell, value, rule = result["deductions"][0]
                strategy = "Partial Deduction"
                explanation = f"Cell {cell} must be {value} ({rule})."
            return {
                "move": self.game_state.edit_move(cell, value),
                "cell": cell,
                "strategy": strategy,
                "explanation": explanation,
                "is_error": False,
            }

        return {
            "move": None,
            "cell": None,
            "strategy": "None",
            "explanation": "No cell can be deduced from the current board.",
            "is_error": False,
        }
