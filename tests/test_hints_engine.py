import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fillomino.game_state import GameState
from fillomino.hints_engine import HintsEngine


class TestHintsEngine(unittest.TestCase):

    def test_overfull_region_is_an_error(self):
        state = GameState.new_game(3, 1, "000")
        for move in ["0_2", "1_2", "2_2"]:
            state = state.execute_move(move)
        hint = HintsEngine(state).generate_hint()
        self.assertTrue(hint["is_error"])
        self.assertEqual(hint["strategy"], "Error Check")
        self.assertIsNone(hint["move"])
        self.assertEqual(hint["highlight_cells"], [0, 1, 2])

    def test_suggests_a_cell_when_solvable(self):
        state = GameState.new_game(3, 1, "120")
        hint = HintsEngine(state).generate_hint()
        self.assertFalse(hint["is_error"])
        self.assertEqual(hint["strategy"], "Solver Deduction")
        self.assertEqual(hint["move"], "2_2")
        self.assertEqual(hint["cell"], 2)

    def test_partial_deduction(self):
        state = GameState.new_game(5, 1, "20000")
        hint = HintsEngine(state).generate_hint()
        self.assertEqual(hint["strategy"], "Partial Deduction")
        self.assertEqual(hint["move"], "1_2")

    def test_hint_move_applies(self):
        state = GameState.new_game(1, 1, "0")
        hint = HintsEngine(state).generate_hint()
        self.assertEqual(hint["move"], "0_1")
        self.assertTrue(state.execute_move(hint["move"]).completed)

    def test_nothing_to_deduce(self):
        state = GameState.new_game(3, 1, "000")
        hint = HintsEngine(state).generate_hint()
        self.assertEqual(hint["strategy"], "None")
        self.assertIsNone(hint["move"])
        self.assertFalse(hint["is_error"])


if __name__ == '__main__':
    unittest.main()
