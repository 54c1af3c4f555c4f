from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

import pytest

from seqcontainers.containers import DynArray, FixedArray, LinkedList
from seqcontainers.core.last_error import clear_last_error


@dataclass(eq=False)
class Box:
    """Caller-owned payload; equality is identity unless a predicate says otherwise."""

    value: int


def eq_as_int(payload: Box, probe: Box) -> bool:
    assert payload is not None and probe is not None
    return payload.value == probe.value


def eq_as_int_or_empty(payload: Box | None, probe: Box) -> bool:
    return payload is not None and payload.value == probe.value


ARRAY_VALUES = [-1, 42, 666, 13, 28, -54, 0, 7, 6, 5]
LIST_VALUES = [42, 3, 7, 13, 6]


@pytest.fixture(autouse=True)
def _reset_last_error() -> None:
    clear_last_error()


@pytest.fixture
def box_factory() -> Callable[[List[int]], List[Box]]:
    def _factory(values: List[int]) -> List[Box]:
        return [Box(value) for value in values]

    return _factory


@pytest.fixture
def array_boxes(box_factory) -> List[Box]:
    return box_factory(ARRAY_VALUES)


@pytest.fixture
def list_boxes(box_factory) -> List[Box]:
    return box_factory(LIST_VALUES)


@pytest.fixture
def full_array(array_boxes) -> DynArray[Box]:
    """Capacity-10 array holding the ten ARRAY_VALUES boxes (size == capacity)."""

    array = DynArray.create(10).unwrap()
    for box in array_boxes:
        array.append(box)
    return array


@pytest.fixture
def filled_list(list_boxes) -> LinkedList[Box]:
    linked = LinkedList.create().unwrap()
    for box in list_boxes:
        linked.append(box)
    return linked


@pytest.fixture
def small_table() -> FixedArray[Box]:
    return FixedArray.create(4).unwrap()
