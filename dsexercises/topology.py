"""Directed graphs stored as adjacency lists, with topological sorting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

DEFAULT_PATH = "topologysort.txt"


class CycleError(ValueError):
    """Raised when a graph cannot be ordered because it has a cycle."""


class Graph:
    """A directed graph of named vertices.

    Each vertex keeps its outgoing edges newest first, as in a linked adjacency list.
    """

    def __init__(self, vertices: Iterable[str], edges: Iterable[tuple[str, str]] = ()) -> None:
        self._vertices = list(vertices)
        self._adjacency: list[list[int]] = [[] for _ in self._vertices]
        self._indegree = [0] * len(self._vertices)
        self._edges: list[tuple[str, str]] = []
        for source, target in edges:
            try:
                i = self.locate(source)
                j = self.locate(target)
            except KeyError as exc:
                raise ValueError(f"edge {source}->{target} names an unknown vertex") from exc
            self._adjacency[i].insert(0, j)
            self._indegree[j] += 1
            self._edges.append((source, target))

    @classmethod
    def parse(cls, text: str) -> "Graph":
        """Read vertex count, edge count, vertex names and edge pairs from text."""
        tokens = text.split()
        try:
            vexnum, edgenum = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            raise ValueError("graph text must start with the vertex and edge counts") from None
        if vexnum < 0 or edgenum < 0:
            raise ValueError("vertex and edge counts must not be negative")
        needed = 2 + vexnum + 2 * edgenum
        if len(tokens) < needed:
            raise ValueError("graph text ended before all vertices and edges were read")
        names = tokens[2:2 + vexnum]
        ends = tokens[2 + vexnum:needed]
        return cls(names, zip(ends[::2], ends[1::2]))

    def locate(self, name: str) -> int:
        """Return the position of the first vertex called ``name``."""
        try:
            return self._vertices.index(name)
        except ValueError:
            raise KeyError(name) from None

    def indegree(self, name: str) -> int:
        """Return the number of edges that point at ``name``."""
        return self._indegree[self.locate(name)]

    def topological_order(self) -> list[str]:
        """Return the vertex names in topological order.

        Each pass scans the vertices in order and takes every vertex whose
        in-degree has dropped to zero, updating its successors at once.
        """
        indegree = list(self._indegree)
        taken: list[int] = []
        count = len(self._vertices)
        for _ in range(count):
            for i in range(count):
                if indegree[i] == 0:
                    indegree[i] = -1
                    taken.append(i)
                    for j in self._adjacency[i]:
                        indegree[j] -= 1
        if len(taken) != count:
            raise CycleError("the graph has a cycle")
        return [self._vertices[i] for i in taken]

    def format_adjacency(self) -> str:
        """Render each vertex, right-aligned, followed by its successors."""
        lines = (
            f"{name:>16}" + "".join(f"=={self._vertices[j]}" for j in targets)
            for name, targets in zip(self._vertices, self._adjacency)
        )
        return "".join(line + "\n" for line in lines)


def load_graph(path: str | Path) -> Graph:
    """Read a graph from a text file."""
    return Graph.parse(Path(path).read_text())


def _report(graph: Graph) -> None:
    print("---Reading vertices---\n")
    for number, name in enumerate(graph._vertices, start=1):
        print(f"Vertex {number}: {name}")
    print(f"\n---Read {len(graph._vertices)} vertices---\n")
    print("---Reading edges---\n")
    for number, (source, target) in enumerate(graph._edges, start=1):
        print(f"Edge {number}: {source}->{target}")
    print(f"\n---Read {len(graph._edges)} edges---\n")
    print("---Adjacency list built---\n")
    print(graph.format_adjacency())


def main(argv: list[str] | None = None) -> int:
    """Load a graph file and print its topological order."""
    parser = argparse.ArgumentParser(description="Topologically sort a graph file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        graph = load_graph(args.path)
    except OSError:
        print("---Failed to read the file!")
        return 1
    except ValueError as exc:
        print(f"---Invalid graph file: {exc}")
        return 1
    _report(graph)
    try:
        order = graph.topological_order()
    except CycleError:
        print("Topological sort failed! The graph has a cycle\n")
        return 0
    print("Topological order:")
    print("->".join(order) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())