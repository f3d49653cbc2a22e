"""Structural checks and draining helpers for :class:`PQueue`."""

from __future__ import annotations

from gpartition.pqueue import PQueue


def is_valid_heap(queue: PQueue) -> bool:
    """Whether every queued key is at least as large as its children's keys."""
    keys = [key for _, key in queue.entries()]
    size = len(keys)
    for parent, key in enumerate(keys):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < size and keys[child] > key:
                return False
    return True


def is_locator_consistent(queue: PQueue) -> bool:
    """Whether node positions and heap slots agree in both directions.

    Every queued node must report its own heap slot, and every node that
    reports a slot must be the one stored there.
    """
    entries = queue.entries()
    for pos, (node, _) in enumerate(entries):
        if queue.position(node) != pos:
            return False
    for node in range(queue.max_nodes):
        pos = queue.position(node)
        if pos is None:
            continue
        if not 0 <= pos < len(entries) or entries[pos][0] != node:
            return False
    return True


def drain(queue: PQueue) -> list[tuple[int, float]]:
    """Pop every node, returning the ``(node, key)`` pairs in extraction order."""
    drained: list[tuple[int, float]] = []
    while (top := queue.pop_top()) is not None:
        drained.append(top)
    return drained