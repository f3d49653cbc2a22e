"""Deterministic building blocks for multilevel graph partitioning: CSR graphs, an LCG, and an indexed max-heap."""

__version__ = "0.1.0"
__all__ = ["csr", "errors", "heapcheck", "pqueue", "rng"]