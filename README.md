# algokit

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

## What is inside

- `algokit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort`,
  `shell_sort`, `merge_sort`, `quick_sort` and `radix_sort`. Each takes any
  iterable, leaves it untouched and returns a new ascending list.
  `radix_sort` accepts only non-negative integers: it raises `TypeError` for
  non-integers (booleans included) and `ValueError` for negative numbers.
- `algokit.kmp`: `prefix_table(pattern)` builds the Knuth–Morris–Pratt failure
  table (entry 0 is `-1`; an empty pattern gives `[]`), and
  `kmp_search(text, pattern)` returns the index of the first occurrence of the
  pattern, or `-1`. Both work on any sequence, not only strings.
- `algokit.brackets`: `brackets_balanced(text)` checks that `()`, `[]` and
  `{}` are properly nested. Every character that is not an opening bracket is
  treated as closing the innermost open one, so the text should consist of
  brackets only.
- `algokit.disjoint_set`: `DisjointSet(n)` over the elements `0 .. n-1`, with
  path compression and union by size. `find(x)` gives a set's
  representative, `merge(a, b)` joins two sets and returns the new
  representative, `size(x)` counts a set's elements and `len()` gives `n`.
  Out-of-range elements raise `IndexError`.
- `algokit.btree`: `BTree(degree)`, a B-tree of the given minimum degree
  (at least 2) that keeps duplicate keys. It supports `insert`, `search`
  (returning the `BTreeNode` that holds the key, or `None`), `traverse` (a
  generator of keys in ascending order), `in`, iteration and `len()`.
- `algokit.graphs`: graphs whose nodes are the integers `0 .. n-1`. Weighted
  edges are `(u, v, weight)` triples, and parallel edges keep the lightest
  weight.
  - `dijkstra(n, edges, source, target)`: shortest directed path length;
    weights must be non-negative (`ValueError` otherwise), and an unreachable
    target raises `DisconnectedGraphError`.
  - `floyd(n, edges)`: all-pairs shortest distance matrix of a directed graph,
    with `math.inf` for unreachable pairs.
  - `prim(n, edges)`: total weight of a minimum spanning tree of an undirected
    graph; raises `DisconnectedGraphError` if there is none.
  - `topsort(n, edges)`: a topological order of `(u, v)` edges; raises
    `CycleError`, whose `partial` attribute holds the nodes ordered before the
    cycle blocked progress.
  Nodes outside `0 .. n-1` raise `ValueError`; both error classes are
  subclasses of `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.btree import BTree
from algokit.disjoint_set import DisjointSet
from algokit.brackets import brackets_balanced

tree = BTree(3)
for key in [10, 20, 5, 6, 12, 30, 7, 17]:
    tree.insert(key)

print(list(tree))   # [5, 6, 7, 10, 12, 17, 20, 30]
print(12 in tree)   # True
print(15 in tree)   # False
print(len(tree))    # 8

sets = DisjointSet(5)
sets.merge(1, 2)
print(sets.find(1) == sets.find(2))  # True
print(sets.size(1))                  # 2

print(brackets_balanced("{[()]}"))  # True
print(brackets_balanced("([)]"))    # False
```

```python
from algokit.graphs import CycleError, dijkstra, topsort

print(dijkstra(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)], 0, 2))  # 5
print(topsort(3, [(0, 1), (0, 2), (1, 2)]))                  # [0, 1, 2]

try:
    topsort(2, [(0, 1), (1, 0)])
except CycleError as error:
    print("the graph has a cycle", error.partial)  # ... []
```

## Command line

Installing the package provides an `algokit` command with two subcommands.
Both read their input from standard input as whitespace-separated tokens.

```
algokit --help
```

`algokit topsort` reads `n m` followed by `m` edges `a b`, with nodes numbered
from 1 to `n`, and prints a topological order, or `-1` if the graph has a
cycle:

```
$ printf '3 2\n1 2\n2 3\n' | algokit topsort
1 2 3
```

`algokit brackets` reads a string and an optional length (only that many
leading characters are checked) and prints `1` if the brackets are balanced,
else `0`:

```
$ echo '{[()]}' | algokit brackets
1
```

Malformed input makes the command print a usage error and exit with status 2.