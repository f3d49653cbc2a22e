"""Compressed-sparse-row graphs and the helpers that inspect and split them."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from gpartition.errors import InvalidGraphError, NoConstraintsError


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class CsrGraph:
    """An undirected graph in CSR form.

    Each undirected edge appears once in each direction in ``adjacency``.
    Vertex weights are stored flat, ``num_constraints`` per vertex. Missing
    weights and sizes default to one, labels to the identity and the
    partition to all zeros.
    """

    xadj: list[int]
    adjacency: list[int]
    edge_weights: list[int] | None = None
    vertex_weights: list[int] | None = None
    vertex_sizes: list[int] | None = None
    num_constraints: int = 1
    label: list[int] | None = None
    partition: list[int] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.num_constraints <= 0:
            raise NoConstraintsError()
        self.xadj = list(self.xadj)
        self.adjacency = list(self.adjacency)
        if not self.xadj or self.xadj[0] != 0:
            raise InvalidGraphError("xadj must start with 0")
        if any(a > b for a, b in zip(self.xadj, self.xadj[1:])):
            raise InvalidGraphError("xadj must be non-decreasing")
        if self.xadj[-1] != len(self.adjacency):
            raise InvalidGraphError("xadj does not match adjacency length")
        n = len(self.xadj) - 1
        if any(not 0 <= v < n for v in self.adjacency):
            raise InvalidGraphError("adjacency refers to a missing vertex")

        self.edge_weights = self._filled(
            self.edge_weights, len(self.adjacency), 1, "edge_weights"
        )
        self.vertex_weights = self._filled(
            self.vertex_weights, n * self.num_constraints, 1, "vertex_weights"
        )
        self.vertex_sizes = self._filled(self.vertex_sizes, n, 1, "vertex_sizes")
        self.partition = self._filled(self.partition, n, 0, "partition")
        if self.label is None:
            self.label = list(range(n))
        else:
            self.label = self._filled(self.label, n, 0, "label")

    @staticmethod
    def _filled(
        values: Sequence[int] | None, length: int, default: int, name: str
    ) -> list[int]:
        if values is None:
            return [default] * length
        values = list(values)
        if len(values) != length:
            raise InvalidGraphError(f"{name} must hold {length} entries")
        return values

    def num_vertices(self) -> int:
        """Number of vertices."""
        return len(self.xadj) - 1

    def num_edges(self) -> int:
        """Number of directed adjacency entries (twice the undirected edges)."""
        return len(self.adjacency)

    def neighbors(self, vertex: int) -> Iterator[tuple[int, int]]:
        """Yield ``(neighbor, edge_weight)`` pairs of ``vertex``."""
        start, end = self.xadj[vertex], self.xadj[vertex + 1]
        return zip(self.adjacency[start:end], self.edge_weights[start:end])


def argmax(values: Sequence[float]) -> int:
    """Index of the first largest element."""
    if not values:
        raise ValueError("argmax of an empty sequence")
    best = 0
    for i, value in enumerate(values):
        if value > values[best]:
            best = i
    return best


def compute_cut(graph: CsrGraph, partition: Sequence[int]) -> int:
    """Total weight of edges whose ends lie in different parts."""
    cut = sum(
        weight
        for u in range(graph.num_vertices())
        for v, weight in graph.neighbors(u)
        if partition[u] != partition[v]
    )
    return cut // 2


def compute_volume(graph: CsrGraph, partition: Sequence[int]) -> int:
    """Total communication volume of a partitioning.

    Each vertex contributes its size times the number of other parts
    among its neighbours.
    """
    volume = 0
    for u in range(graph.num_vertices()):
        me = partition[u]
        others = {partition[v] for v, _ in graph.neighbors(u)}
        others.discard(me)
        volume += graph.vertex_sizes[u] * len(others)
    return volume


def bucket_sort_keys_inc(keys: Sequence[int], max_key: int) -> list[int]:
    """Return the indices of ``keys`` in stable increasing key order.

    Every key must lie in ``[0, max_key]``.
    """
    buckets: list[list[int]] = [[] for _ in range(max_key + 1)] if max_key >= 0 else []
    for i, key in enumerate(keys):
        if not 0 <= key <= max_key:
            raise ValueError(f"key {key} outside [0, {max_key}]")
        buckets[key].append(i)
    return [i for bucket in buckets for i in bucket]


def compute_partition_weights(
    graph: CsrGraph, partition: Sequence[int], nparts: int
) -> list[int]:
    """Per-part vertex weight sums, ``num_constraints`` entries per part."""
    ncon = graph.num_constraints
    weights = [0] * (nparts * ncon)
    for u in range(graph.num_vertices()):
        base = partition[u] * ncon
        for j, w in enumerate(graph.vertex_weights[u * ncon:(u + 1) * ncon]):
            weights[base + j] += w
    return weights


def is_balanced_2way(
    total_weight: int,
    pwgt0: int,
    pwgt1: int,
    target_ratio: float,
    ubfactor: float,
) -> bool:
    """Whether both sides of a bisection stay within ``ubfactor`` of target."""
    ratio = _f32(target_ratio)
    ub = _f32(ubfactor)
    target0 = int(_f32(_f32(total_weight) * ratio))
    target1 = total_weight - target0
    return _f32(pwgt0) <= _f32(ub * _f32(target0)) and _f32(pwgt1) <= _f32(
        ub * _f32(target1)
    )


def split_graph_part(graph: CsrGraph) -> tuple[CsrGraph, CsrGraph]:
    """Split a bisected graph into the subgraphs of parts 0 and 1.

    Vertices with partition 0 go left and all others right. Edges are kept
    only between vertices of the same side; labels follow their vertices.
    """
    sides: tuple[list[int], list[int]] = ([], [])
    local: list[int] = []
    for v, part in enumerate(graph.partition):
        side = sides[0] if part == 0 else sides[1]
        local.append(len(side))
        side.append(v)
    left = _extract(graph, sides[0], 0, local)
    right = _extract(graph, sides[1], 1, local)
    return left, right


def _extract(
    graph: CsrGraph, vertices: list[int], keep: int, local: list[int]
) -> CsrGraph:
    ncon = graph.num_constraints
    xadj = [0]
    adjacency: list[int] = []
    edge_weights: list[int] = []
    vertex_weights: list[int] = []
    vertex_sizes: list[int] = []
    labels: list[int] = []
    for v in vertices:
        vertex_weights.extend(graph.vertex_weights[v * ncon:(v + 1) * ncon])
        vertex_sizes.append(graph.vertex_sizes[v])
        labels.append(graph.label[v])
        for u, w in graph.neighbors(v):
            if graph.partition[u] == keep:
                adjacency.append(local[u])
                edge_weights.append(w)
        xadj.append(len(adjacency))
    return CsrGraph(
        xadj=xadj,
        adjacency=adjacency,
        edge_weights=edge_weights,
        vertex_weights=vertex_weights,
        vertex_sizes=vertex_sizes,
        num_constraints=ncon,
        label=labels,
        partition=[0] * len(vertices),
    )