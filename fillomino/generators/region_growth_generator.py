import random
from typing import List, Optional, Tuple

from fillomino import execution_trace
from fillomino.board import max_region_size, neighbors
from fillomino.connectivity import ConnectivityTracker
from fillomino.errors import GenerationLimitExceededError, resolve_attempt_limit


class RegionGrowthGenerator:
    """
    Builds a complete, valid Fillomino board by conflict repair.

    Every cell starts as its own region. While two touching regions have the
    same size, one of them is merged with a neighbour, preferring a neighbour
    of a different size over doubling the clash. If a region outgrows
    ``max_region_size`` the attempt is thrown away and the scan restarts in a
    fresh random order, drawing from the same random stream.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None,
                 max_attempts: Optional[int] = None):
        if width < 1 or height < 1:
            raise ValueError("width and height must be at least one")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.maxsize = max_region_size(width, height)
        self.attempts = 0

    def generate(self) -> List[int]:
        w, h = self.width, self.height
        sz = w * h
        limit = resolve_attempt_limit(self, "max_attempts")
        tracker = ConnectivityTracker(sz)
        order = list(range(sz))
        self.attempts = 0

        while True:
            self.attempts += 1
            if self.attempts > limit:
                raise GenerationLimitExceededError(
                    attempts=self.attempts - 1,
                    limit=limit,
                    context=f"{w}x{h}",
                )
            self.rng.shuffle(order)

            largest = self._repair(tracker, order)
            if largest is None:
                board = [tracker.size(i) for i in range(sz)]
                execution_trace.log_generation_attempt(
                    self.attempts, w, h, max(board), accepted=True
                )
                return board

            execution_trace.log_generation_attempt(
                self.attempts, w, h, largest, accepted=False
            )
            tracker.reset()

    def _repair(self, tracker: ConnectivityTracker, order: List[int]) -> Optional[int]:
        """
        Merge regions until no conflict remains (returns None) or a region
        exceeds the size cap (returns the offending size).
        """
        while True:
            conflict = find_conflict(tracker, order, self.width, self.height)
            if conflict is None:
                return None
            a, b, c = conflict
            root = tracker.merge(a, b if c is None else c)
            if tracker.size(root) > self.maxsize:
                return tracker.size(root)


def find_conflict(tracker: ConnectivityTracker, order: List[int],
                  w: int, h: int) -> Optional[Tuple[int, int, Optional[int]]]:
    """
    Scan cells in *order* for the first one whose region touches a different
    region of the same size.

    Returns ``(a, b, c)``: the two clashing representatives and, if the first
    cell has one, a neighbouring region of a different size to merge with
    instead; ``c`` is None when there is no such region.
    """
    for cell in order:
        a = tracker.find(cell)
        a_size = tracker.class_size[a]
        b = None
        c = None
        for j in neighbors(cell, w, h):
            other = tracker.find(j)
            if other == a:
                continue
            if tracker.class_size[other] == a_size:
                b = other
            elif c is None:
                c = other
        if b is not None:
            return a, b, c
    return None
