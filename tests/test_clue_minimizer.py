import random
import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fillomino.board import EMPTY
from fillomino.generators.clue_minimizer import (
    ClueMinimizer,
    board_to_desc,
    generate_puzzle,
    removal_order,
)
from fillomino.generators.region_growth_generator import RegionGrowthGenerator
from fillomino.solvers.constraint_solver import ConstraintSolver
from fillomino.validators import validate_desc


class TestRemovalOrder(unittest.TestCase):

    def test_largest_first_then_by_index(self):
        self.assertEqual(removal_order([1, 3, 2, 3]), [1, 3, 2, 0])

    def test_uniform_board_keeps_index_order(self):
        self.assertEqual(removal_order([2, 2, 2, 2]), [0, 1, 2, 3])


class TestClueMinimizer(unittest.TestCase):

    def test_clues_rebuild_the_board(self):
        for w, h in [(3, 3), (4, 5), (5, 5), (7, 7)]:
            for seed in range(4):
                with self.subTest(w=w, h=h, seed=seed):
                    solution = RegionGrowthGenerator(w, h, random.Random(seed)).generate()
                    clues = ClueMinimizer(solution, w, h).minimize()

                    for clue, value in zip(clues, solution):
                        self.assertIn(clue, (EMPTY, value))

                    result = ConstraintSolver(clues, w, h).solve()
                    self.assertTrue(result["success"])
                    self.assertEqual(result["board"], solution)

    def test_removes_at_least_one_clue(self):
        solution = RegionGrowthGenerator(5, 5, random.Random(1)).generate()
        clues = ClueMinimizer(solution, 5, 5).minimize()
        self.assertIn(EMPTY, clues)

    def test_single_cell_board_needs_no_clue(self):
        self.assertEqual(ClueMinimizer([1], 1, 1).minimize(), [0])

    def test_counts_one_solver_call_per_cell(self):
        solution = [1, 2, 2]
        minimizer = ClueMinimizer(solution, 3, 1)
        minimizer.minimize()
        self.assertEqual(minimizer.solver_calls, 3)

    def test_does_not_mutate_solution(self):
        solution = [1, 2, 2]
        ClueMinimizer(solution, 3, 1).minimize()
        self.assertEqual(solution, [1, 2, 2])

    def test_describe(self):
        minimizer = ClueMinimizer([1, 2, 2], 3, 1)
        desc = minimizer.describe()
        self.assertEqual(len(desc), 3)
        self.assertTrue(set(desc) <= set("012"))

    def test_wrong_board_length(self):
        with self.assertRaises(ValueError):
            ClueMinimizer([1, 2], 3, 1)


class TestGeneratePuzzle(unittest.TestCase):

    def test_description_is_valid(self):
        desc, solution = generate_puzzle(6, 4, random.Random(2))
        self.assertEqual(len(desc), 24)
        self.assertIsNone(validate_desc(6, 4, desc))
        self.assertEqual(len(solution), 24)

    def test_same_seed_same_puzzle(self):
        self.assertEqual(
            generate_puzzle(5, 5, random.Random(12)),
            generate_puzzle(5, 5, random.Random(12)),
        )

    def test_board_to_desc(self):
        self.assertEqual(board_to_desc([0, 3, 0, 1]), "0301")


if __name__ == '__main__':
    unittest.main()
