"""Sequential and binary search returning 1-based positions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def order_search(data: Sequence[Any], item: Any) -> int:
    """Scan the whole sequence for ``item``.

    Returns the 1-based position of the last match, or 0 if there is none.
    """
    pos = 0
    for index, value in enumerate(data, start=1):
        if value == item:
            pos = index
    return pos


def binary_search(data: Sequence[Any], item: Any) -> int:
    """Search a sorted sequence for ``item``.

    Returns the 1-based position of a match, or 0 if there is none.
    """
    start, end = 0, len(data) - 1
    while start <= end:
        mid = start + (end - start) // 2
        value = data[mid]
        if value < item:
            start = mid + 1
        elif value > item:
            end = mid - 1
        else:
            return mid + 1
    return 0