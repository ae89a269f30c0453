import random
import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fillomino.connectivity import ConnectivityTracker
from fillomino.errors import InvariantViolationError


def class_members(tracker, x):
    root = tracker.find(x)
    return {i for i in range(len(tracker)) if tracker.find(i) == root}


class TestConnectivityTracker(unittest.TestCase):

    def test_starts_as_singletons(self):
        t = ConnectivityTracker(5)
        for i in range(5):
            self.assertEqual(t.find(i), i)
            self.assertEqual(t.size(i), 1)
            self.assertEqual(list(t.members(i)), [i])

    def test_merge_joins_classes_and_rings(self):
        t = ConnectivityTracker(4)
        root = t.merge(0, 1)
        self.assertEqual(t.find(0), root)
        self.assertEqual(t.find(1), root)
        self.assertEqual(t.size(0), 2)
        self.assertEqual(sorted(t.members(0)), [0, 1])
        self.assertEqual(sorted(t.members(1)), [0, 1])
        self.assertEqual(list(t.members(2)), [2])

    def test_merge_same_class_is_noop(self):
        t = ConnectivityTracker(3)
        root = t.merge(0, 1)
        self.assertEqual(t.merge(1, 0), root)
        self.assertEqual(t.size(0), 2)
        self.assertEqual(sorted(t.members(0)), [0, 1])

    def test_members_starts_at_given_cell(self):
        t = ConnectivityTracker(4)
        t.merge(0, 1)
        t.merge(2, 3)
        t.merge(1, 3)
        walk = list(t.members(2))
        self.assertEqual(walk[0], 2)
        self.assertEqual(sorted(walk), [0, 1, 2, 3])

    def test_chain_of_merges(self):
        t = ConnectivityTracker(6)
        for i in range(4):
            t.merge(i, i + 1)
        self.assertEqual(t.size(3), 5)
        for i in range(5):
            self.assertEqual(sorted(t.members(i)), [0, 1, 2, 3, 4])
        self.assertEqual(list(t.members(5)), [5])
        t.check_rings()

    def test_random_merges_keep_rings_and_classes_identical(self):
        rng = random.Random(7)
        n = 60
        t = ConnectivityTracker(n, check_invariants=True)
        for _ in range(45):
            t.merge(rng.randrange(n), rng.randrange(n))
            t.check_rings()
        for root in t.representatives():
            self.assertEqual(set(t.members(root)), class_members(t, root))
            self.assertEqual(len(set(t.members(root))), t.size(root))
        self.assertEqual(sum(t.size(r) for r in t.representatives()), n)

    def test_reset(self):
        t = ConnectivityTracker(4)
        t.merge(0, 1)
        t.merge(1, 2)
        t.reset()
        for i in range(4):
            self.assertEqual(t.find(i), i)
            self.assertEqual(t.size(i), 1)
            self.assertEqual(list(t.members(i)), [i])

    def test_cross_linked_ring_is_detected(self):
        t = ConnectivityTracker(4)
        t.merge(0, 1)
        t.merge(2, 3)
        t.next[0] = 2
        with self.assertRaises(InvariantViolationError):
            t.check_rings()

    def test_short_ring_is_detected(self):
        t = ConnectivityTracker(3)
        t.merge(0, 1)
        t.merge(1, 2)
        # a ring that skips one member of the class
        t.next[:] = [0, 1, 2]
        with self.assertRaises(InvariantViolationError):
            t.check_rings()

    def test_from_board_merges_equal_neighbours(self):
        t = ConnectivityTracker.from_board([1, 2, 2], 3, 1)
        self.assertEqual(t.size(0), 1)
        self.assertEqual(t.size(1), 2)
        self.assertTrue(t.same(1, 2))
        self.assertFalse(t.same(0, 1))

    def test_from_board_skips_empty_cells_by_default(self):
        board = [0, 0, 3,
                 0, 3, 3]
        t = ConnectivityTracker.from_board(board, 3, 2)
        self.assertFalse(t.same(0, 1))
        self.assertEqual(t.size(2), 3)

        t = ConnectivityTracker.from_board(board, 3, 2, skip_empty=False)
        self.assertEqual(t.size(0), 3)
        self.assertTrue(t.same(0, 3))


if __name__ == '__main__':
    unittest.main()
