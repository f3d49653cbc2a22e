"""Error types raised while building and partitioning graphs and meshes."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Broad category of a partitioning failure."""

    INPUT = "input error"
    MEMORY = "memory error"
    OTHER = "unknown error"


class PartitionError(Exception):
    """A partitioning run failed; ``kind`` says why."""

    def __init__(self, kind: ErrorKind = ErrorKind.OTHER) -> None:
        super().__init__(kind.value)
        self.kind = kind


class NewGraphError(ValueError):
    """A graph could not be built from the given arrays."""

    default_message = "invalid graph"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NoConstraintsError(NewGraphError):
    """The number of balance constraints was not positive."""

    default_message = "ncon must be positive"


class NoGraphPartsError(NewGraphError):
    """The number of graph parts was not positive."""

    default_message = "nparts must be positive"


class GraphTooLargeError(NewGraphError):
    """An input array is longer than an index can address."""

    default_message = "array length does not fit in Idx"


class InvalidGraphError(NewGraphError):
    """The graph arrays are inconsistent with each other."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NewMeshError(ValueError):
    """A mesh could not be built from the given arrays."""

    default_message = "invalid mesh"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NoMeshPartsError(NewMeshError):
    """The number of mesh parts was not positive."""

    default_message = "nparts must be positive"


class MeshTooLargeError(NewMeshError):
    """An input array is longer than an index can address."""

    default_message = "array length does not fit in Idx"


class InvalidMeshError(NewMeshError):
    """The mesh arrays are inconsistent with each other."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def as_partition_error(error: BaseException) -> PartitionError:
    """Convert a construction error into a :class:`PartitionError`.

    Graph and mesh construction errors become input errors; a
    :class:`PartitionError` is returned unchanged.
    """
    if isinstance(error, PartitionError):
        return error
    if isinstance(error, (NewGraphError, NewMeshError)):
        converted = PartitionError(ErrorKind.INPUT)
        converted.__cause__ = error
        return converted
    raise TypeError(f"cannot convert {type(error).__name__} to PartitionError")