# dsakit

A small collection of classic data structures and algorithms in plain
Python, with no dependencies outside the standard library. Functions
return their results and raise exceptions on bad input; nothing in the
library prints.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

### `dsakit.searching`

- `binary_search(values, target)`: sorts a copy of `values`, bisects it
  and returns `True` or `False`.
- `linear_search(values, target)`: index of the first occurrence of
  `target`, or `-1`.

### `dsakit.sorting`

- `merge_sort(values)`: a new ascending list; stable.
- `merge(left, right)`: merges two sorted sequences; on ties the element
  from `left` comes first.

### `dsakit.minmax`

- `min_max(values)` and `min_max_dac(values)`: both return
  `(minimum, maximum)`; the second works by divide and conquer. Both raise
  `ValueError` on an empty input.

### `dsakit.knapsack`

- `Item(weight, value)`: a frozen dataclass; `weight` must be positive
  (`ValueError` otherwise). `item.ratio` is value per unit of weight.
- `fractional_knapsack(capacity, items)`: the greatest value that fits,
  taking items whole in decreasing ratio order and the first one that does
  not fit in part. A negative capacity raises `ValueError`.

### `dsakit.containers`

- `BoundedArray(capacity)`: `insert(index, value)` for indices `0` to
  `len(array)`, `remove(index)` returns the removed element,
  `update(index, value)` returns the old one. Inserting into a full array
  raises `OverflowError`; a bad index raises `IndexError`. Supports
  `len()`, iteration and indexing.
- `Queue(capacity=10000)`: `enqueue`, `dequeue`, `front`, `is_empty`,
  `len()`. Full raises `OverflowError`; `dequeue`/`front` on an empty
  queue raise `IndexError`.
- `Stack(capacity=100)`: `push`, `pop`, `peek`, `is_empty`, `len()`, with
  the same errors as `Queue`.

### `dsakit.heaps`

- `MaxHeap(values=())`: `push`, `pop` and `peek` (largest value; both
  raise `IndexError` when empty), `drain()` yielding every value largest
  first and emptying the heap, `len()`, and iteration in storage (level)
  order.

### `dsakit.graphs`

- `Graph()`: `add_edge(u, v, directed=False)`, `neighbors(node)`,
  `nodes()`, `bfs(start)`, `dfs(start)` (explicit stack, neighbours
  explored in insertion order), `dfs_recursive(start)` (the preorder plain
  recursion produces, without recursing), and `adjacency_lines()` giving
  one `"node -> n1 n2 ..."` string per node. Traversals return lists.

### `dsakit.spanning`

- `Edge(src, dest, weight)`: a frozen dataclass.
- `kruskal_mst(vertex_count, edges)`: edges of a minimum spanning forest,
  lightest first. Vertices outside `0..vertex_count-1` raise `ValueError`.
- `prim_mst(matrix)`: a minimum spanning tree from a square weight matrix
  where `0` means no edge; one `Edge(parent, vertex, weight)` per vertex
  but 0, in vertex order. Raises `ValueError` for a non-square matrix or a
  disconnected graph.
- `total_weight(edges)`: sum of the weights.

## Examples

    from dsakit.sorting import merge_sort
    from dsakit.searching import binary_search
    from dsakit.graphs import Graph
    from dsakit.spanning import Edge, kruskal_mst, prim_mst, total_weight

    merge_sort([20, 1, 5, 66, 33, 52, 3240])
    # [1, 5, 20, 33, 52, 66, 3240]

    binary_search([10, 4, 45, 34, 6, 3], 34)
    # True

    g = Graph()
    for u, v in [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (3, 7)]:
        g.add_edge(u, v)
    g.bfs(1)
    # [1, 2, 3, 4, 5, 6, 7]
    g.dfs(1)
    # [1, 2, 4, 5, 3, 6, 7]

    tree = kruskal_mst(4, [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5),
                           Edge(1, 3, 15), Edge(2, 3, 4)])
    total_weight(tree)
    # 19

    prim_mst([[0, 2, 0, 6, 0],
              [2, 0, 3, 8, 5],
              [0, 3, 0, 0, 7],
              [6, 8, 0, 0, 9],
              [0, 5, 7, 9, 0]])
    # [Edge(0, 1, 2), Edge(1, 2, 3), Edge(0, 3, 6), Edge(1, 4, 5)]

## Command line

`dsakit-search` looks a key up in a small built-in sample. By default it
searches the values 10, 4, 45, 34, 6 and 3 with binary search and prints
`Key found!` or `Key not found.`:

    dsakit-search 34

With `--linear` it searches the values 1, 2, 5, 6, 7 and 8 linearly and
prints the index found, or `-1`:

    dsakit-search --linear 6

Leave the key out to be asked for one; a key that is not an integer is an
error.

## What it does not do

The command line only searches its built-in samples; there is no command
for sorting, graphs or spanning trees, and none of the structures can be
saved to or loaded from a file. Use the modules from Python for those.