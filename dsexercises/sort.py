"""In-place sorting routines for mutable sequences such as ``SeqList``."""

from __future__ import annotations

from typing import Any, MutableSequence


def _swap(data: MutableSequence[Any], a: int, b: int) -> None:
    swap = getattr(data, "swap", None)
    if swap is not None:
        swap(a, b)
    else:
        data[a], data[b] = data[b], data[a]


def bubble_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place by repeatedly swapping neighbours out of order."""
    for last in range(len(data) - 1, 0, -1):
        for k in range(last):
            if data[k] > data[k + 1]:
                _swap(data, k, k + 1)


def select_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place by moving each minimum to the front."""
    size = len(data)
    for i in range(size - 1):
        smallest = min(range(i, size), key=lambda k: data[k])
        if data[smallest] == data[i]:
            continue
        _swap(data, smallest, i)


def shell_sort(data: MutableSequence[Any]) -> None:
    """Sort ``data`` in place with gapped insertion sort, halving the gap."""
    size = len(data)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            temp = data[i]
            k = i - gap
            while k >= 0 and data[k] > temp:
                data[k + gap] = data[k]
                k -= gap
            if data[k + gap] != temp:
                data[k + gap] = temp
        gap //= 2