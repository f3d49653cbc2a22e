"""Addressable max-priority queue keyed by floats, holding vertex ids."""

from __future__ import annotations

from typing import Optional


class PQueue:
    """Binary max-heap over vertex ids ``0 .. max_nodes - 1``.

    Each vertex appears at most once. Besides insertion and extraction of
    the maximum, a vertex can be removed or have its key changed in place.
    """

    def __init__(self, max_nodes: int) -> None:
        if max_nodes < 0:
            raise ValueError("max_nodes must not be negative")
        self.max_nodes = max_nodes
        self._heap: list[tuple[float, int]] = []
        self._locator: list[int] = [-1] * max_nodes

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, int) or not 0 <= node < self.max_nodes:
            return False
        return self._locator[node] >= 0

    def _check_range(self, node: int) -> None:
        if not 0 <= node < self.max_nodes:
            raise IndexError(f"node {node} outside [0, {self.max_nodes})")

    def _locate(self, node: int) -> int:
        self._check_range(node)
        pos = self._locator[node]
        if pos < 0:
            raise KeyError(node)
        return pos

    def insert(self, node: int, key: float) -> None:
        """Add ``node`` with priority ``key``."""
        self._check_range(node)
        if self._locator[node] >= 0:
            raise ValueError(f"node {node} is already queued")
        pos = len(self._heap)
        self._heap.append((key, node))
        self._locator[node] = pos
        self._sift_up(pos)

    def delete(self, node: int) -> float:
        """Remove ``node`` and return its key."""
        pos = self._locate(node)
        key = self._heap[pos][0]
        self._locator[node] = -1
        last = len(self._heap) - 1
        if pos != last:
            moved = self._heap[last]
            self._heap[pos] = moved
            self._locator[moved[1]] = pos
            self._heap.pop()
            if pos < len(self._heap):
                self._sift_up(pos)
                self._sift_down(pos)
        else:
            self._heap.pop()
        return key

    def pop_top(self) -> Optional[tuple[int, float]]:
        """Remove and return ``(node, key)`` of the maximum, or ``None``."""
        if not self._heap:
            return None
        key, node = self._heap[0]
        self.delete(node)
        return node, key

    def peek_top(self) -> Optional[tuple[int, float]]:
        """Return ``(node, key)`` of the maximum without removing it."""
        if not self._heap:
            return None
        key, node = self._heap[0]
        return node, key

    def update(self, node: int, new_key: float) -> None:
        """Change the key of ``node`` in place, inserting it if absent.

        The node keeps its heap slot and sifts up when its new key exceeds
        its parent's key, and down otherwise.
        """
        if node not in self:
            self.insert(node, new_key)
            return
        pos = self._locator[node]
        self._heap[pos] = (new_key, node)
        if pos > 0 and new_key > self._heap[(pos - 1) // 2][0]:
            self._sift_up(pos)
        else:
            self._sift_down(pos)

    def key(self, node: int) -> float:
        """Current key of a queued ``node``."""
        return self._heap[self._locate(node)][0]

    def reset(self) -> None:
        """Remove every node."""
        for _, node in self._heap:
            self._locator[node] = -1
        self._heap.clear()

    def entries(self) -> list[tuple[int, float]]:
        """``(node, key)`` pairs in heap-array order."""
        return [(node, key) for key, node in self._heap]

    def position(self, node: int) -> Optional[int]:
        """Heap-array index of ``node``, or ``None`` if it is not queued."""
        if node not in self:
            return None
        return self._locator[node]

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        self._locator[heap[a][1]] = b
        self._locator[heap[b][1]] = a
        heap[a], heap[b] = heap[b], heap[a]

    def _sift_up(self, pos: int) -> None:
        heap = self._heap
        while pos > 0:
            parent = (pos - 1) // 2
            if heap[pos][0] > heap[parent][0]:
                self._swap(pos, parent)
                pos = parent
            else:
                break

    def _sift_down(self, pos: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            left = 2 * pos + 1
            right = left + 1
            largest = pos
            if left < n and heap[left][0] > heap[largest][0]:
                largest = left
            if right < n and heap[right][0] > heap[largest][0]:
                largest = right
            if largest == pos:
                break
            self._swap(pos, largest)
            pos = largest