"""
Game Validators
===============
Functions to validate puzzle input and check board conditions.
Region sizes come from the connectivity tracker.
"""

from fillomino.board import EMPTY, max_digit, neighbors
from fillomino.connectivity import ConnectivityTracker


def validate_params(w, h):
    """
    Check grid dimensions.
    Returns: error message or None
    """
    if w < 1:
        return "Width must be at least one"
    if h < 1:
        return "Height must be at least one"
    return None


def validate_desc(w, h, desc):
    """
    Check a puzzle description: exactly w*h digits, none above the size cap.
    Returns: error message or None
    """
    sz = w * h
    top = str(max_digit(w, h))

    i = 0
    for ch in desc:
        if i >= sz:
            break
        if not ch.isdigit() or not ch.isascii():
            return "non-digit in string"
        if ch > top:
            return "too large digit in string"
        i += 1

    if len(desc) > sz:
        return "string too long"
    if i < sz:
        return "string too short"
    return None


def region_sizes(board, w, h):
    """
    Size of each cell's connected group of equal values.
    Empty cells group with each other like any other value.
    """
    tracker = ConnectivityTracker.from_board(board, w, h, skip_empty=False)
    return [tracker.size(i) for i in range(w * h)]


def check_win_condition(board, w, h):
    """
    Check if the board is complete.
    Every cell must hold the size of its region; an empty cell never does.
    Returns: (bool, reason)
    """
    sizes = region_sizes(board, w, h)
    for i, value in enumerate(board):
        if value == EMPTY:
            return False, "Board has empty cells"
        if value != sizes[i]:
            if sizes[i] > value:
                return False, "Region larger than its number"
            return False, "Region smaller than its number"
    return True, "Winner"


def find_overfull(board, w, h):
    """Cells whose region already holds more cells than its number."""
    sizes = region_sizes(board, w, h)
    return [i for i, v in enumerate(board) if v != EMPTY and sizes[i] > v]


def find_conflicts(partition, w, h):
    """
    Adjacent cell pairs (i, j), i < j, lying in different regions of equal
    size. The partition gives one region label per cell; a region is a
    connected group of cells sharing a label.
    """
    tracker = ConnectivityTracker.from_board(partition, w, h, skip_empty=False)
    conflicts = []
    for i in range(w * h):
        for j in neighbors(i, w, h):
            if j < i or tracker.same(i, j):
                continue
            if tracker.size(i) == tracker.size(j):
                conflicts.append((i, j))
    return conflicts


def is_valid_solution(board, w, h):
    """
    A complete board is valid when every value is its region size. Two
    touching regions of equal size would hold equal values and so form one
    larger region, which that check already rejects.
    """
    won, _ = check_win_condition(board, w, h)
    return won
