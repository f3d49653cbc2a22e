"""Deterministic linear congruential generator used by the partitioner."""

from __future__ import annotations

from typing import MutableSequence

_MASK32 = 0xFFFFFFFF
_MULTIPLIER = 214013
_INCREMENT = 2531011
DEFAULT_SEED = 4321


class Rng:
    """LCG with ``state = state * 214013 + 2531011`` and 15-bit outputs.

    A seed of ``-1`` selects the default seed 4321; other seeds are taken
    modulo 2**32.
    """

    def __init__(self, seed: int = -1) -> None:
        self.state = DEFAULT_SEED if seed == -1 else seed & _MASK32
        self.count = 0

    def call_count(self) -> int:
        """Number of values drawn so far."""
        return self.count

    def rand(self) -> int:
        """Return the next value in ``[0, 32767]``."""
        self.count += 1
        self.state = (self.state * _MULTIPLIER + _INCREMENT) & _MASK32
        return (self.state >> 16) & 0x7FFF

    def rand_in_range(self, max_value: int) -> int:
        """Return the next value reduced into ``[0, max_value)``."""
        if max_value <= 0:
            raise ValueError("max_value must be positive")
        return self.rand() % max_value

    def permute(
        self,
        arr: MutableSequence[int],
        n: int,
        offset: int = 0,
        identity: bool = True,
    ) -> None:
        """Shuffle ``arr[offset:offset + n]`` in place.

        With ``identity`` the window is first filled with ``0..n``. Only
        windows shorter than 10 are shuffled; longer ones need
        :meth:`permute_with_nshuffles`.
        """
        self._prepare(arr, n, offset, identity)
        if n < 10:
            self._small_shuffle(arr, n, offset)

    def permute_with_nshuffles(
        self,
        arr: MutableSequence[int],
        n: int,
        offset: int,
        nshuffles: int,
        identity: bool = True,
    ) -> None:
        """Shuffle ``arr[offset:offset + n]`` in place.

        Windows shorter than 10 get ``n`` pairwise swaps; longer windows get
        ``nshuffles`` rounds of four cross swaps between two random blocks.
        """
        self._prepare(arr, n, offset, identity)
        if n < 10:
            self._small_shuffle(arr, n, offset)
            return
        span = n - 3
        for _ in range(nshuffles):
            v = offset + self.rand_in_range(span)
            u = offset + self.rand_in_range(span)
            for a, b in ((0, 2), (1, 3), (2, 0), (3, 1)):
                arr[v + a], arr[u + b] = arr[u + b], arr[v + a]

    @staticmethod
    def _prepare(
        arr: MutableSequence[int], n: int, offset: int, identity: bool
    ) -> None:
        if n < 0 or offset < 0 or offset + n > len(arr):
            raise IndexError("permutation window lies outside the array")
        if identity:
            arr[offset:offset + n] = list(range(n))

    def _small_shuffle(self, arr: MutableSequence[int], n: int, offset: int) -> None:
        for _ in range(n):
            v = offset + self.rand_in_range(n)
            u = offset + self.rand_in_range(n)
            arr[v], arr[u] = arr[u], arr[v]