# dslabs

Console tools and library code for studying classic data structures: a
queueing simulation on array and linked queues, binary search trees (plain
and AVL-balanced), searching integers in text files, a singly linked list,
and longest paths in weighted directed graphs. The programs talk to the user
in Russian.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Queueing simulation

```
dslabs-queueing
```

An interactive menu models a service unit fed by two request queues (T1 and
T2) until 1000 requests of type T1 have been served. T1 requests have
priority: a T2 request enters service only when the T1 queue is empty and no
T1 request is being served.

- `1` runs the model on linked queues,
- `2` runs the model on array-backed queues,
- `3` times adding and removing elements in both queue kinds,
- `0` exits (so does the end of input).

Before a model run you are asked whether to print the address of every
element as it is added or removed (answer `y` to enable). Every hundred
served T1 requests the current and average queue lengths are shown; at the
end a summary gives service time, idle time, the modelled time and its
expected value, requests in and out, how many times the unit ran, the run
time and the memory used.

The pieces are available on their own:

- `dslabs.queueing.queues`: `ArrayQueue` and `LinkedQueue`, with `add`,
  `pop` (raises `IndexError` when empty), `find(predicate)`, `len()` and
  iteration.
- `dslabs.queueing.simulation`: `RequestType`, `Request` (with
  `Request.random(kind, rng)`), `SimulationResult`, `dispatch`, `serve`,
  `array_model` and `linked_model`. The models accept a `random.Random`
  instance, an output stream and an optional trace stream.
- `dslabs.queueing.cli`: `print_menu`, `format_result` and
  `compare_operations(iterations=50)`, which returns average nanoseconds per
  operation under the keys `array_add`, `list_add`, `array_pop` and
  `list_pop`.

```python
import io
import random
from dslabs.queueing.simulation import linked_model
from dslabs.queueing.cli import format_result

result = linked_model(rng=random.Random(1), out=io.StringIO())
print(format_result(result))
```

## Search trees and file search

`dslabs.search.tree` builds binary search trees of integers from `TreeNode`
objects. `insert` adds without balancing (equal values go right),
`insert_balanced` keeps the tree AVL-balanced. `find` returns the node
holding a key, `find_comparisons` the number of nodes compared to reach it
(or `None`), `depth` the number of levels, and `comparison_stats` the node
count with the sum of node depths. `preorder` yields the values, while `draw`
and `display` return the tree drawn sideways as text.

```python
from dslabs.search import tree

root = None
for value in (8, 3, 10, 1, 6):
    root = tree.insert_balanced(root, value)
print(tree.find_comparisons(root, 6))
print(tree.draw(root))
```

`dslabs.search.fileio` reads whitespace-separated integers from a text
stream: `read_numbers` (raises `EmptyFileError` or `BadFileError`),
`find_in_file` (1-based position of a key, or `None`), `linear_search` and
`file_size`.

```python
import io
from dslabs.search.fileio import read_numbers, find_in_file

stream = io.StringIO("5 7 -2 9")
print(read_numbers(stream))      # [5, 7, -2, 9]
print(find_in_file(stream, -2))  # 3
```

## Longest paths in a weighted graph

```
dslabs-graphs graph.txt
```

The input file starts with the number of vertices, followed by edges, one
`u v weight` triple each. Vertices are named by any integers; the weight may
not be zero. Reading stops at the end of the file or at an edge whose first
vertex is `-1`. Naming more distinct vertices than declared is an error.

If `figlet` is installed, a banner is shown first. For every vertex the tool
prints the longest path to each vertex reachable from it, reports the search
time and memory used, then writes the graph in DOT form to `graphviz.txt` in
the current directory.

The graph is also usable directly through `dslabs.graphs.graph`
(`Graph`, `Edge`, `parse_graph`, `GraphInputError`):

```python
from dslabs.graphs.graph import Graph

graph = Graph(3)
graph.add_edge(0, 1, 5)
graph.add_edge(1, 2, 2)
graph.add_edge(0, 2, 4)
print(graph.longest_paths(0))   # [0, 5, 7]
print(graph.to_dot("example"))
```

`dslabs.graphs.linked_list.LinkedList` is a singly linked list with `push`,
`find`, `insert_before`, `remove_duplicates`, `sorted` and `is_sorted`, each
of the comparing methods taking an optional key function.

## What is not included

There is no command-line tool for the search structures and no hash table:
the tree and file-search code is available only as a library, and comparing
search times across structures is left to the caller.