"""A growable sequential list that keeps track of its reserved capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

DEFAULT_CAPACITY = 64


class SeqList:
    """A sequence stored in a block whose capacity grows in fixed steps.

    Reading an out-of-range position with :meth:`at` gives ``None``. Erasing or
    swapping out-of-range positions is silently ignored.
    """

    def __init__(self, items: Iterable[Any] = (), capacity: int = 0) -> None:
        self._capacity = capacity if capacity > 0 else DEFAULT_CAPACITY
        self._items: list[Any] = []
        for item in items:
            self.push_back(item)

    @classmethod
    def filled(cls, value: Any, count: int) -> "SeqList":
        """Build a list holding ``count`` copies of ``value``."""
        return cls([value] * max(count, 0), capacity=count)

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SeqList({self._items!r}, capacity={self._capacity})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"SeqList index {index} out of range")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def __lshift__(self, item: Any) -> "SeqList":
        self.push_back(item)
        return self

    def at(self, index: int) -> Any:
        """Return the element at ``index``, or ``None`` when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def copy(self) -> "SeqList":
        """Return an independent list with the same elements and capacity."""
        return SeqList(self._items, capacity=self._capacity)

    def clear(self) -> None:
        """Drop every element and return to the default capacity."""
        self._items.clear()
        self._capacity = DEFAULT_CAPACITY

    def resize(self, capacity: int) -> None:
        """Reserve exactly ``capacity`` slots; it may not drop below the length."""
        if capacity < len(self._items):
            raise ValueError(
                f"capacity {capacity} is smaller than the length {len(self._items)}"
            )
        self._capacity = capacity

    def _ensure_room(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity += DEFAULT_CAPACITY

    def push_front(self, item: Any) -> None:
        """Add ``item`` before the first element."""
        self._ensure_room()
        self._items.insert(0, item)

    def push_back(self, item: Any) -> None:
        """Add ``item`` after the last element."""
        self._ensure_room()
        self._items.append(item)

    def insert(self, pos: int, item: Any) -> None:
        """Insert ``item`` so that it ends up at ``pos``.

        Positions at or below zero insert at the front, positions at or past the
        end append.
        """
        if pos <= 0:
            self.push_front(item)
        elif pos >= len(self._items):
            self.push_back(item)
        else:
            self._ensure_room()
            self._items.insert(pos, item)

    def erase(self, pos: int) -> None:
        """Remove the element at ``pos``; out-of-range positions are ignored."""
        if 0 <= pos < len(self._items):
            del self._items[pos]

    def swap(self, apos: int, bpos: int) -> None:
        """Exchange two elements; nothing happens if either is out of range."""
        size = len(self._items)
        if not (0 <= apos < size and 0 <= bpos < size):
            return
        self._items[apos], self._items[bpos] = self._items[bpos], self._items[apos]