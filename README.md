# algolab

A small collection of classic data structures and algorithms, written as
plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.arrays` | `array_insert`, `array_delete`, `counting_sort` (in place, for integers in `range(k)`) |
| `algolab.sorting` | `insert`, `insertion_sort`, `merge`, `merge_sort` |
| `algolab.linked_list` | `Node`, a singly linked list with a sentinel head: `insert_after`, `find_predecessor`, `delete_after`, `to_list`, iteration |
| `algolab.stack` | `Stack` with a fixed capacity, `<<` for pushing values or applying operators, and the reverse Polish operators `plus`, `minus`, `multiplies`, `divides`, `negate` |
| `algolab.ring_queue` | `Queue`, a fixed-capacity ring-buffer queue, and `Deque`, which also works at the other end |
| `algolab.formatting` | `format_sequence`, `print_sequence` |
| `algolab.binary_tree` | `BinaryTree` (nodes with parent links), `make_binary_tree`, `CompleteBT` (a list viewed as a complete binary tree) |
| `algolab.tree_traversal` | `height`, `df_traversal` and `bf_traversal` (generators), `format_binary_tree`, `print_binary_tree` |
| `algolab.bst` | `bst_search` (largest value not exceeding the key), `bst_insert`, `bst_min`, `bst_max` |
| `algolab.heap` | `heap_sift_up`, `heap_sift_down`, `build_heap`, `heap_sort`, `priority_enqueue`, `priority_dequeue`; max-heap by default, any comparison may be passed |
| `algolab.hash_table` | `HashTable` with separate chaining, a pluggable hash function and `format_stats` |
| `algolab.graph` | `Hop`, `to_sparse`, `graph_to_dot`, `encode_dot`, `print_graph`, and the sample graphs `TEST_GRAPH` and `SPARSE_TEST_GRAPH` |
| `algolab.shortest_paths` | `relax`, `bellman_ford`, `dijkstra`, `dijkstra_priority`, `floyd_warshall` |
| `algolab.lsh` | locality-sensitive hashing on the unit sphere: `LSHTable`, `LSHFamily`, `LSHResult`, `cosine_distance`, `naive_retrieve`, `benchmark` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## A taste

Reverse Polish arithmetic on a stack:

```python
from algolab.stack import Stack, plus, multiplies

stack = Stack(100)
stack << 2 << 2 << 3 << plus << multiplies
print(stack.top())  # 10
```

Shortest paths on the sample graph:

```python
from algolab.graph import TEST_GRAPH
from algolab.shortest_paths import dijkstra

for vertex, hop in enumerate(dijkstra(TEST_GRAPH, 2)):
    print(vertex, hop.weight, hop.vertex)
```

Each result entry is a `Hop`: the path weight to the vertex and the vertex
before it on the path (`-1` for the source and for unreachable vertices).

## Commands

Three commands are installed:

- `algolab-paths COMMAND [--source N] [--url BASE]` runs one of
  `graph`, `bellman-ford`, `dijkstra` or `floyd-warshall` on the sample
  graph. `graph` prints the graph in DOT form; the others print the graph
  and then the shortest paths from vertex `N` (default 2), or all pairs for
  `floyd-warshall`. With `--url BASE` graphs are printed as `BASE` followed
  by the percent-encoded DOT text instead.
- `algolab-lsh [--dataset-size N] [--queries N] [--seed N]` builds
  locality-sensitive hash tables over random unit vectors and prints a
  table comparing them, for several table counts, comparison budgets and
  amplifications, with a linear scan.
- `algolab-demos [DEMO ...]` walks through the arrays, lists, stacks,
  queues, trees, heaps and hash tables, printing each step. Without names
  every demonstration runs; names include `array`, `merge-sort`, `list`,
  `stack-rpn`, `deque`, `bst`, `heap`, `priority-queue` and `hash`.

## Limits

- The shortest-path functions take adjacency matrices only; adjacency lists
  of `Hop` can be drawn with `graph_to_dot` but not searched.
- There is no helper that turns a shortest-path result into the list of
  vertices along a path; follow the `vertex` field of each `Hop` back to
  the source.
- There is no radix sort; integer sorting is offered by `counting_sort`.