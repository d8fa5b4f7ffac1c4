"""Worker records, a numbering roster and a list container for workers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace


@dataclass
class Worker:
    """A worker with a name, an age, a salary and a serial number."""

    name: str = "None"
    age: int = 0
    salary: float = 0.0
    number: int = 0

    def copy(self) -> "Worker":
        """Return a copy whose number is one higher than this worker's."""
        return replace(self, number=self.number + 1)

    def describe(self) -> str:
        """Return a multi-line description of the worker."""
        return (
            f"[{self.number}]\n"
            f"Name: {self.name}\n"
            f"Age: {self.age}\n"
            f"Salary: {self.salary:g}"
        )

    def same_as(self, other: "Worker") -> bool:
        """Compare name, age and salary, ignoring the number."""
        return (self.name, self.age, self.salary) == (other.name, other.age, other.salary)


class Roster:
    """Hands out consecutive numbers to newly hired workers."""

    def __init__(self) -> None:
        self.count = 0

    def hire(self, name: str = "None", age: int = 0, salary: float = 0.0) -> Worker:
        """Create a worker; only non-default workers receive a number."""
        if name != "None" or age != 0 or salary != 0:
            self.count += 1
            number = self.count
        else:
            number = 0
        return Worker(name, age, salary, number)


class WorkerList:
    """An ordered container of workers with positional editing."""

    def __init__(self, workers: Iterable[Worker] = ()) -> None:
        self._workers = list(workers)

    def __len__(self) -> int:
        return len(self._workers)

    def __iter__(self) -> Iterator[Worker]:
        return iter(self._workers)

    def is_empty(self) -> bool:
        return not self._workers

    def push_front(self, worker: Worker) -> None:
        self._workers.insert(0, worker)

    def push_back(self, worker: Worker) -> None:
        self._workers.append(worker)

    def insert(self, pos: int, worker: Worker) -> None:
        """Insert at ``pos``; positions past the end are ignored, negatives go first."""
        if pos > len(self._workers):
            return
        self._workers.insert(max(pos, 0), worker)

    def delete(self, pos: int) -> Worker:
        """Remove and return the worker at ``pos``; negative positions mean the first."""
        if pos >= len(self._workers):
            raise IndexError(f"WorkerList position {pos} out of range")
        if not self._workers:
            raise IndexError("delete from an empty WorkerList")
        return self._workers.pop(max(pos, 0))

    def delete_range(self, begin: int, end: int) -> list[Worker]:
        """Remove ``end - begin`` workers starting at ``begin`` and return them."""
        size = len(self._workers)
        if begin > size:
            raise IndexError(f"WorkerList position {begin} out of range")
        start = max(begin, 0)
        stop = start + max(end - begin, 0)
        if stop > size:
            raise IndexError(f"WorkerList range {begin}..{end} out of range")
        removed = self._workers[start:stop]
        del self._workers[start:stop]
        return removed

    def find(self, worker: Worker) -> int:
        """Return the position of the first matching worker, or -1."""
        return next(
            (pos for pos, item in enumerate(self._workers) if worker.same_as(item)),
            -1,
        )

    def swap(self, other: "WorkerList") -> None:
        """Exchange all contents with ``other``."""
        self._workers, other._workers = other._workers, self._workers

    def front(self) -> Worker:
        if not self._workers:
            raise IndexError("front of an empty WorkerList")
        return self._workers[0]

    def back(self) -> Worker:
        if not self._workers:
            raise IndexError("back of an empty WorkerList")
        return self._workers[-1]

    def pop_front(self) -> Worker:
        if not self._workers:
            raise IndexError("pop from an empty WorkerList")
        return self._workers.pop(0)

    def pop_back(self) -> Worker:
        if not self._workers:
            raise IndexError("pop from an empty WorkerList")
        return self._workers.pop()

    def clear(self) -> None:
        self._workers.clear()


def _show(worker: Worker) -> None:
    print(worker.describe())
    print()


def _announce(worker: Worker) -> None:
    print("Created:")
    _show(worker)


def main(argv: list[str] | None = None) -> int:
    """Run the worker container demonstration."""
    parser = argparse.ArgumentParser(description="Demonstrate the worker containers.")
    parser.parse_args(argv)
    roster = Roster()
    staff = []
    for name, age, salary in (("Alice", 20, 5000), ("Jack", 25, 8200), ("Steve", 18, 2000)):
        worker = roster.hire(name, age, salary)
        _announce(worker)
        staff.append(worker)
    staff.append(replace(staff[0]))
    staff.append(Worker())

    print("Storing data in a list:")
    merged: list[Worker] = []
    for worker in staff:
        merged.append(worker.copy())
        _show(merged[-1])

    print("Adding two workers:")
    nick = roster.hire("Nick", 10)
    _announce(nick)
    angel = roster.hire("Angel", 16, 2333)
    _announce(angel)
    merged.append(nick.copy())
    merged.insert(1, angel.copy())

    print("Storing data in a WorkerList:")
    custom = WorkerList(worker.copy() for worker in staff)
    print(f"WorkerList element count: {len(custom)}")
    while not custom.is_empty():
        last = custom.back()
        _show(last)
        merged.append(last.copy())
        custom.pop_back()

    print("After merging the WorkerList into the list:")
    for worker in merged:
        _show(worker)
    return 0


if __name__ == "__main__":
    sys.exit(main())