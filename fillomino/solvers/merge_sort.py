"""
Merge Sort
==========
Stable merge sort used to order clue cells for minimization.

The removal order is "largest number first, lowest index among equals",
so descending order must keep equal keys in their original order. Built-in
``sorted(..., reverse=True)`` also does that, but the key here closes over
the board being minimized instead of reading it from shared module state.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def merge_sort(
    seq: Sequence[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
    reverse: bool = False,
) -> List[T]:
    """
    Return a new list with the items of *seq* in order.

    Parameters
    ----------
    seq : sequence
        Items to sort; never mutated.
    key : callable, optional
        Maps an item to its comparison key, as for ``sorted``.
    reverse : bool
        Sort descending. Items with equal keys still keep their input order.
    """
    items: List[T] = list(seq)
    if len(items) <= 1:
        return items
    keyed = [(key(item) if key is not None else item, item) for item in items]
    return [item for _, item in _sort(keyed, reverse)]


def _sort(keyed: List[tuple], reverse: bool) -> List[tuple]:
    n = len(keyed)
    if n <= 1:
        return keyed
    mid = n // 2
    return _merge(_sort(keyed[:mid], reverse), _sort(keyed[mid:], reverse), reverse)


def _merge(left: List[tuple], right: List[tuple], reverse: bool) -> List[tuple]:
    result: List[tuple] = []
    i = j = 0
    while i < len(left) and j < len(right):
        lk = left[i][0]
        rk = right[j][0]
        # ties go to the left run
        take_left = lk >= rk if reverse else lk <= rk
        if take_left:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result
