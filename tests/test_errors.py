import pytest

from gpartition.errors import (
    ErrorKind,
    GraphTooLargeError,
    InvalidGraphError,
    InvalidMeshError,
    MeshTooLargeError,
    NewGraphError,
    NewMeshError,
    NoConstraintsError,
    NoGraphPartsError,
    NoMeshPartsError,
    PartitionError,
    as_partition_error,
)


@pytest.mark.parametrize(
    "kind, text",
    [
        (ErrorKind.INPUT, "input error"),
        (ErrorKind.MEMORY, "memory error"),
        (ErrorKind.OTHER, "unknown error"),
    ],
)
def test_partition_error_message(kind, text):
    err = PartitionError(kind)
    assert str(err) == text
    assert err.kind is kind


def test_partition_error_default_kind():
    assert PartitionError().kind is ErrorKind.OTHER


@pytest.mark.parametrize(
    "cls, text",
    [
        (NoConstraintsError, "ncon must be positive"),
        (NoGraphPartsError, "nparts must be positive"),
        (GraphTooLargeError, "array length does not fit in Idx"),
        (NoMeshPartsError, "nparts must be positive"),
        (MeshTooLargeError, "array length does not fit in Idx"),
    ],
)
def test_fixed_messages(cls, text):
    assert str(cls()) == text


def test_invalid_graph_message_is_kept():
    err = InvalidGraphError("xadj is not monotone")
    assert str(err) == "xadj is not monotone"
    assert isinstance(err, NewGraphError)
    assert isinstance(err, ValueError)


def test_invalid_mesh_message_is_kept():
    err = InvalidMeshError("bad eptr")
    assert str(err) == "bad eptr"
    assert isinstance(err, NewMeshError)


def test_graph_error_becomes_input_error():
    source = NoGraphPartsError()
    converted = as_partition_error(source)
    assert converted.kind is ErrorKind.INPUT
    assert converted.__cause__ is source


def test_mesh_error_becomes_input_error():
    converted = as_partition_error(InvalidMeshError("bad"))
    assert converted.kind is ErrorKind.INPUT


def test_partition_error_passes_through():
    err = PartitionError(ErrorKind.MEMORY)
    assert as_partition_error(err) is err


def test_other_errors_are_rejected():
    with pytest.raises(TypeError):
        as_partition_error(RuntimeError("boom"))


def test_graph_error_is_a_value_error():
    err = NoConstraintsError()
    assert isinstance(err, NewGraphError)
    assert isinstance(err, ValueError)
    assert str(err) == "ncon must be positive"