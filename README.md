# dsexercises

A small collection of classic data-structure exercises. You can import them as
a library or run a few console commands.

## Installation

    pip install .
    pip install ".[test]"   # with the test tools

## Library

### Sequential list, search and sort

`dsexercises.seqlist.SeqList` is a growable list that you can extend at both
ends. It also keeps track of a reserved `capacity`. That capacity starts at 64
unless you give another value, and it grows in steps of 64. Positions are
zero-based.

- Indexing (`data[i]`) raises `IndexError` when the position is out of range.
- `at(i)` returns `None` when the position is out of range.
- `erase` and `swap` do nothing when given out-of-range positions.
- `resize` raises `ValueError` if the new capacity would be smaller than the length.

```python
from dsexercises.seqlist import SeqList
from dsexercises.search import order_search, binary_search
from dsexercises.sort import bubble_sort, select_sort, shell_sort

data = SeqList([5, 3, 9, 1])
data.push_front(7)
data << 4
shell_sort(data)
print(list(data))              # [1, 3, 4, 5, 7, 9]
print(binary_search(data, 5))  # 4  (positions count from 1; 0 means "not found")
print(order_search(data, 42))  # 0
```

The search functions work on any sequence:

- `order_search` returns the position of the last match.
- `binary_search` expects sorted data.

`bubble_sort`, `select_sort` and `shell_sort` sort a `SeqList`, or any mutable
sequence, in place. `SeqList.filled(value, count)` builds a list that holds
`count` copies of `value`.

### Polynomials

`dsexercises.polynomial.Polynomial` holds `Term(coef, exp)` values, ordered by
exponent. It also accepts `(coef, exp)` tuples. When you add two polynomials,
like terms are merged and terms that cancel out are dropped.

```python
from dsexercises.polynomial import Polynomial, parse_term

a = Polynomial([parse_term("3,2"), parse_term("1,0")])
b = Polynomial([parse_term("-3,2"), parse_term("2,1")])
print(a + b)   # 1+2x^1
```

`parse_term` reads a coefficient, any one separator character and then an
integer exponent. It raises `ValueError` on malformed input.

`read_polynomial(stdin, stdout)` prompts for terms until `0,0` is entered.

### Topological sort

`dsexercises.topology.Graph` is a directed graph stored as adjacency lists. You
can parse it from text in this order:

1. a vertex count,
2. an edge count,
3. the vertex names,
4. one pair of names for each edge.

```python
from dsexercises.topology import Graph, CycleError

graph = Graph.parse("3 2  a b c  a b  b c")
print(graph.topological_order())   # ['a', 'b', 'c']
print(graph.indegree("c"))         # 1
print(graph.format_adjacency())
```

Other behaviour:

- `topological_order` raises `CycleError` (a `ValueError`) when the graph has a cycle.
- `locate` raises `KeyError` for an unknown vertex name.
- `load_graph(path)` reads a graph from a file.

### Workers

`dsexercises.workers` provides three things:

- `Worker` is a record with a name, age, salary and number.
  - `copy()` returns a copy whose number is one higher.
  - `same_as()` compares name, age and salary.
- `Roster` numbers the workers it hires. Only non-default workers get a number.
- `WorkerList` is a container with `push_front`, `push_back`, `insert`,
  `delete`, `delete_range`, `find`, `front`, `back`, `pop_front`, `pop_back`,
  `swap`, `clear` and `is_empty`.
  - `find` returns `-1` when there is no match.
  - Removing or reading from an empty list raises `IndexError`.

## Commands

    dsx-polynomial

Reads two polynomials from standard input and prints their sum. Enter one term
per line as `coef,exp`, and end each polynomial with `0,0`.

    dsx-toposort [FILE]

Reads a graph from `FILE` (by default `topologysort.txt`). It prints the
vertices, the edges and the adjacency lists, then a topological order. If the
graph has a cycle, it reports that instead. It exits with status 1 if the file
cannot be read or is not a valid graph.

    dsx-workers

Runs a short demonstration of the worker roster and list containers.

## Tests

    pytest