import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fillomino.generators.demo_puzzle import get_demo_puzzle_7x7
from fillomino.validators import (
    check_win_condition,
    find_conflicts,
    find_overfull,
    is_valid_solution,
    region_sizes,
    validate_desc,
    validate_params,
)


class TestValidateParams(unittest.TestCase):

    def test_valid(self):
        self.assertIsNone(validate_params(1, 1))
        self.assertIsNone(validate_params(7, 5))

    def test_messages(self):
        self.assertEqual(validate_params(0, 3), "Width must be at least one")
        self.assertEqual(validate_params(3, 0), "Height must be at least one")


class TestValidateDesc(unittest.TestCase):

    def test_valid(self):
        self.assertIsNone(validate_desc(3, 1, "122"))
        self.assertIsNone(validate_desc(3, 1, "000"))

    def test_non_digit(self):
        self.assertEqual(validate_desc(3, 1, "12a"), "non-digit in string")
        self.assertEqual(validate_desc(3, 1, "1 2"), "non-digit in string")

    def test_non_ascii_digit(self):
        self.assertEqual(validate_desc(3, 1, "1٣2"), "non-digit in string")

    def test_too_large_digit(self):
        self.assertEqual(validate_desc(3, 1, "124"), "too large digit in string")
        self.assertEqual(validate_desc(2, 2, "4000"), "too large digit in string")

    def test_small_grids_allow_three(self):
        self.assertIsNone(validate_desc(2, 2, "3331"))

    def test_digit_cap_is_nine(self):
        self.assertIsNone(validate_desc(10, 10, "9" * 100))

    def test_length(self):
        self.assertEqual(validate_desc(3, 1, "1223"), "string too long")
        self.assertEqual(validate_desc(3, 1, "12"), "string too short")
        self.assertEqual(validate_desc(3, 1, ""), "string too short")

    def test_only_checks_characters_inside_the_grid(self):
        self.assertEqual(validate_desc(3, 1, "122x"), "string too long")


class TestBoardChecks(unittest.TestCase):

    def test_region_sizes(self):
        self.assertEqual(region_sizes([1, 2, 2], 3, 1), [1, 2, 2])
        self.assertEqual(region_sizes([0, 0, 3], 3, 1), [2, 2, 1])

    def test_win(self):
        self.assertEqual(check_win_condition([1, 2, 2], 3, 1), (True, "Winner"))

    def test_empty_cells(self):
        self.assertEqual(check_win_condition([0, 0, 0], 3, 1), (False, "Board has empty cells"))

    def test_touching_equal_regions_do_not_win(self):
        won, reason = check_win_condition([1, 1, 2], 3, 1)
        self.assertFalse(won)
        self.assertEqual(reason, "Region larger than its number")

    def test_region_too_small(self):
        won, reason = check_win_condition([3, 3, 1], 3, 1)
        self.assertFalse(won)
        self.assertEqual(reason, "Region smaller than its number")

    def test_find_overfull(self):
        self.assertEqual(find_overfull([2, 2, 2], 3, 1), [0, 1, 2])
        self.assertEqual(find_overfull([1, 2, 2], 3, 1), [])
        self.assertEqual(find_overfull([1, 1, 0], 3, 1), [0, 1])

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution([1, 2, 2], 3, 1))
        self.assertFalse(is_valid_solution([1, 1, 2], 3, 1))
        self.assertFalse(is_valid_solution([1, 2, 0], 3, 1))


class TestFindConflicts(unittest.TestCase):

    def test_equal_sized_neighbours(self):
        self.assertEqual(find_conflicts([0, 1, 2, 2], 4, 1), [(0, 1)])

    def test_every_singleton_pair(self):
        self.assertEqual(find_conflicts([0, 1, 2], 3, 1), [(0, 1), (1, 2)])

    def test_no_conflicts(self):
        self.assertEqual(find_conflicts([0, 1, 1], 3, 1), [])

    def test_labels_are_split_by_connectivity(self):
        # label 5 appears twice but not connected: two regions of size 1
        self.assertEqual(find_conflicts([5, 6, 5], 3, 1), [(0, 1), (1, 2)])


class TestDemoPuzzle(unittest.TestCase):

    def test_solution_is_valid(self):
        w, h, desc, solution = get_demo_puzzle_7x7()
        self.assertEqual((w, h), (7, 7))
        self.assertIsNone(validate_desc(w, h, desc))
        self.assertTrue(is_valid_solution(solution, w, h))

    def test_clues_match_solution(self):
        _, _, desc, solution = get_demo_puzzle_7x7()
        for ch, value in zip(desc, solution):
            if ch != "0":
                self.assertEqual(int(ch), value)


if __name__ == '__main__':
    unittest.main()
