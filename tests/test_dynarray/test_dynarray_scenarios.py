from __future__ import annotations

from conftest import Box

from seqcontainers.containers import DynArray
from seqcontainers.core.enums import ErrorKind
from seqcontainers.core.last_error import get_last_error


def test_dynarray_should_grow_past_initial_capacity(full_array: DynArray[Box]) -> None:
    assert full_array.size == 10
    assert full_array.capacity == 10

    extra = Box(73)
    appended = full_array.append(extra)

    assert appended.value == 10
    assert appended.ok
    assert full_array.size == 11
    assert full_array.capacity >= 20
    assert full_array.get(10).value is extra


def test_dynarray_should_reject_indices_at_and_past_size(full_array: DynArray[Box]) -> None:
    for index in (10, 11, 73):
        got = full_array.get(index)
        assert got.value is None
        assert got.error is ErrorKind.OUT_OF_RANGE
        assert get_last_error() is ErrorKind.OUT_OF_RANGE

    param = Box(42)
    for index in (11, 12, 73):
        inserted = full_array.insert(index, param)
        assert inserted.value == -1
        assert get_last_error() is ErrorKind.OUT_OF_RANGE
    assert full_array.size == 10

    inserted = full_array.insert(10, param)
    assert inserted.ok
    assert inserted.value == 11
    assert full_array.get(10).value is param


def test_dynarray_should_remove_then_swap(full_array: DynArray[Box], array_boxes: list[Box]) -> None:
    full_array.append(Box(73))

    removed = full_array.remove_at(4)
    assert removed.value is array_boxes[4]
    assert removed.value.value == 28
    assert full_array.size == 10

    replacement = Box(777)
    previous = full_array.swap(2, replacement)
    assert previous.value is array_boxes[2]
    assert previous.value.value == 666
    assert full_array.get(2).value is replacement
    assert [box.value for box in full_array] == [-1, 42, 777, 13, -54, 0, 7, 6, 5, 73]
