# gpartition

This package holds building blocks for multilevel graph partitioning. Each one
is deterministic, so a run can be reproduced step by step.

## Modules

### `gpartition.csr`

`CsrGraph` is a dataclass that holds an undirected graph in compressed sparse
row form. Its fields are `xadj`, `adjacency`, `edge_weights`, `vertex_weights`,
`vertex_sizes`, `num_constraints`, `label` and `partition`.

- Every undirected edge is stored once in each direction.
- Edge weights, vertex weights and vertex sizes default to 1.
- Labels default to the identity.
- The partition defaults to all zeros.
- Vertex weights are stored flat, with `num_constraints` entries per vertex.

The graph is checked when it is built:

- A constraint count that is not positive raises `NoConstraintsError`.
- Arrays that do not agree with each other raise `InvalidGraphError`.

Methods:

- `num_vertices()`
- `num_edges()`: the number of directed adjacency entries.
- `neighbors(v)`: yields `(neighbor, edge_weight)` pairs.

Helpers:

- `compute_cut(graph, partition)`: the total weight of the edges that cross parts.
- `compute_volume(graph, partition)`: the communication volume. Each vertex adds
  its size times the number of other parts among its neighbours.
- `compute_partition_weights(graph, partition, nparts)`: the vertex weight sums
  per part, with `num_constraints` entries for each part.
- `is_balanced_2way(total_weight, pwgt0, pwgt1, target_ratio, ubfactor)`: checks
  a bisection against its targets. The arithmetic is done in single precision.
- `split_graph_part(graph)`: splits a bisected graph into the subgraph of part 0
  and the subgraph of the remaining vertices. Only edges inside a side are kept,
  and labels follow their vertices.
- `argmax(values)`: the index of the first largest element.
- `bucket_sort_keys_inc(keys, max_key)`: the indices of `keys` in stable
  increasing key order.

### `gpartition.rng`

`Rng` is a linear congruential generator. Each step computes
`state = state * 214013 + 2531011` modulo 2**32 and returns the 15-bit value
`(state >> 16) & 0x7fff`. A seed of `-1` selects the default seed 4321.

- `rand()` returns a value in `[0, 32767]`.
- `rand_in_range(max_value)` returns a value in `[0, max_value)`.
- `call_count()` is the number of values drawn so far.
- `permute(arr, n, offset, identity)` shuffles the window
  `arr[offset:offset + n]` in place. With `identity` the window is first filled
  with `0..n`. Only windows shorter than 10 are shuffled.
- `permute_with_nshuffles(arr, n, offset, nshuffles, identity)` also shuffles
  longer windows. It runs `nshuffles` rounds of four cross swaps.

### `gpartition.pqueue`

`PQueue(max_nodes)` is a binary max-heap over the vertex ids
`0 .. max_nodes - 1`. A vertex can be queued at most once.

- `insert(node, key)` adds a vertex.
- `delete(node)` removes a vertex and returns its key.
- `pop_top()` removes and returns the maximum.
- `peek_top()` returns the maximum without removing it.
- `update(node, new_key)` changes a key in place and sifts the vertex from its
  current slot. If the vertex is not queued, it is inserted.
- `key(node)` returns the key of a queued vertex.
- `reset()` removes every vertex.
- `entries()` returns the queue in heap-array order.
- `position(node)` returns the heap-array index of a vertex.

The queue also supports `len()` and `in`.

Errors:

- Ids outside the range raise `IndexError`.
- Inserting a vertex that is already queued raises `ValueError`.
- Looking up a vertex that is not queued raises `KeyError`.

### `gpartition.heapcheck`

- `is_valid_heap(queue)` checks the heap property.
- `is_locator_consistent(queue)` checks that vertex positions and heap slots agree.
- `drain(queue)` pops every entry and returns them in extraction order.

### `gpartition.errors`

- `PartitionError` carries an `ErrorKind`: `INPUT`, `MEMORY` or `OTHER`.
- The graph construction errors are `NewGraphError` and its subclasses
  `NoConstraintsError`, `NoGraphPartsError`, `GraphTooLargeError` and
  `InvalidGraphError`.
- The mesh construction errors are `NewMeshError` and its subclasses
  `NoMeshPartsError`, `MeshTooLargeError` and `InvalidMeshError`.
- `as_partition_error(error)` turns a construction error into an input
  `PartitionError`.

## What the package does not do

The package does not partition graphs itself. It has no coarsening, no initial
bisection, no refinement and no k-way or recursive partitioning entry point.
It has no mesh type and cannot partition meshes. It has no command-line tool.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from gpartition.csr import CsrGraph, compute_cut, split_graph_part
from gpartition.heapcheck import drain
from gpartition.pqueue import PQueue
from gpartition.rng import Rng

# A path of four vertices, cut in the middle.
graph = CsrGraph(xadj=[0, 1, 3, 5, 6], adjacency=[1, 0, 2, 1, 3, 2],
                 partition=[0, 0, 1, 1])
print(compute_cut(graph, graph.partition))   # 1
left, right = split_graph_part(graph)
print(left.label, right.label)               # [0, 1] [2, 3]

rng = Rng(42)
values = [rng.rand_in_range(100) for _ in range(5)]

queue = PQueue(10)
for node, key in enumerate([1.0, 5.0, 3.0]):
    queue.insert(node, key)
queue.update(0, 10.0)
print(queue.peek_top())   # (0, 10.0)
print(drain(queue))       # [(0, 10.0), (1, 5.0), (2, 3.0)]
```

## Running the tests

```
pytest
```