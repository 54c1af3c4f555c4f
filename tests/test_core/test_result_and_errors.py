from __future__ import annotations

import pytest

from seqcontainers.core.enums import ErrorKind
from seqcontainers.core.errors import (
    AllocationError,
    ContainerError,
    InvalidArgumentError,
    OutOfRangeError,
    error_for,
)
from seqcontainers.core.last_error import get_last_error
from seqcontainers.core.result import NO_INDEX, Result, failure, success


def test_success_should_carry_value_and_clear_channel() -> None:
    failure(ErrorKind.OUT_OF_RANGE)
    result = success("payload")
    assert result.ok is True
    assert result.value == "payload"
    assert result.error is ErrorKind.OK
    assert get_last_error() is ErrorKind.OK


def test_failure_should_carry_sentinel_and_set_channel() -> None:
    result = failure(ErrorKind.OUT_OF_RANGE, NO_INDEX)
    assert result.ok is False
    assert result.value == -1
    assert get_last_error() is ErrorKind.OUT_OF_RANGE


def test_failure_should_default_to_absent_sentinel() -> None:
    assert failure(ErrorKind.INVALID_ARGUMENT).value is None


@pytest.mark.parametrize(
    ("kind", "exc_type", "builtin"),
    [
        (ErrorKind.OUT_OF_MEMORY, AllocationError, MemoryError),
        (ErrorKind.INVALID_ARGUMENT, InvalidArgumentError, ValueError),
        (ErrorKind.OUT_OF_RANGE, OutOfRangeError, IndexError),
    ],
)
def test_unwrap_should_raise_matching_exception(kind, exc_type, builtin) -> None:
    result = Result(None, kind)
    with pytest.raises(exc_type) as info:
        result.unwrap()
    assert isinstance(info.value, builtin)
    assert isinstance(info.value, ContainerError)
    assert info.value.kind is kind


def test_value_or_should_fall_back_on_failure() -> None:
    assert Result(None, ErrorKind.OUT_OF_RANGE).value_or("fallback") == "fallback"
    assert Result(0).value_or(99) == 0


def test_error_for_should_reject_ok() -> None:
    with pytest.raises(ValueError):
        error_for(ErrorKind.OK)
