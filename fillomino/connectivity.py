"""
Connectivity Tracker
====================
Union-find over cell indices with a per-class ring.

Alongside the usual parent/size arrays, ``next`` threads every class into a
single cycle, so all members of a region can be visited from any one of
them without keeping a separate member list. Merging two classes splices
their rings by swapping the two representatives' ``next`` pointers.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from fillomino.board import EMPTY, neighbors
from fillomino.errors import InvariantViolationError, invariant_checks_enabled


class ConnectivityTracker:
    """
    Disjoint-set forest with union by size and path halving.

    Invariant: the ring partition and the union-find partition are the
    same. ``check_rings`` verifies it; it also runs after every merge when
    FILLOMINO_CHECK_INVARIANTS is set.
    """

    def __init__(self, size: int, check_invariants: Optional[bool] = None):
        self.parent: List[int] = list(range(size))
        self.class_size: List[int] = [1] * size
        self.next: List[int] = list(range(size))
        self.check_invariants = (
            invariant_checks_enabled() if check_invariants is None else check_invariants
        )

    @classmethod
    def from_board(cls, board: Sequence[int], w: int, h: int,
                   skip_empty: bool = True) -> "ConnectivityTracker":
        """Build a tracker joining orthogonal neighbours that hold the same value."""
        tracker = cls(w * h)
        for i, value in enumerate(board):
            if skip_empty and value == EMPTY:
                continue
            for j in neighbors(i, w, h):
                if board[j] == value:
                    tracker.merge(i, j)
        return tracker

    def __len__(self) -> int:
        return len(self.parent)

    def reset(self) -> None:
        """Return every cell to its own singleton class."""
        n = len(self.parent)
        self.parent[:] = range(n)
        self.class_size[:] = [1] * n
        self.next[:] = range(n)

    def find(self, x: int) -> int:
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def size(self, x: int) -> int:
        """Size of the class containing *x* (any member works, not just the root)."""
        return self.class_size[self.find(x)]

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def merge(self, a: int, b: int) -> int:
        """
        Join the classes of *a* and *b* and return the new representative.
        A no-op when they already share one.
        """
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return ra

        if self.class_size[ra] < self.class_size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.class_size[ra] += self.class_size[rb]

        # splice the two cycles
        self.next[ra], self.next[rb] = self.next[rb], self.next[ra]

        if self.check_invariants:
            self.check_ring(ra)
        return ra

    def members(self, x: int) -> Iterator[int]:
        """Lazily walk the ring of *x*'s class, starting at *x*."""
        yield x
        j = self.next[x]
        while j != x:
            yield j
            j = self.next[j]

    def representatives(self) -> List[int]:
        return [i for i in range(len(self.parent)) if self.parent[i] == i]

    def check_ring(self, x: int) -> None:
        """
        Verify that the ring through *x* is one simple cycle visiting exactly
        the members of *x*'s class.
        """
        root = self.find(x)
        expected = self.class_size[root]
        seen = set()
        j = x
        while True:
            if j in seen:
                raise InvariantViolationError(
                    f"ring through {x} revisits {j} before returning to start"
                )
            if self.find(j) != root:
                raise InvariantViolationError(
                    f"ring through {x} crosses into the class of {j}"
                )
            seen.add(j)
            if len(seen) > expected:
                raise InvariantViolationError(
                    f"ring through {x} is longer than its class ({expected})"
                )
            j = self.next[j]
            if j == x:
                break
        if len(seen) != expected:
            raise InvariantViolationError(
                f"ring through {x} visits {len(seen)} cells, class has {expected}"
            )

    def check_rings(self) -> None:
        for root in self.representatives():
            self.check_ring(root)
