"""Error hierarchy shared by the containers.

Every :class:`~seqcontainers.core.enums.ErrorKind` except ``OK`` has a matching
exception. Operations report failures in-band through
:class:`~seqcontainers.core.result.Result`; the exceptions are raised when a
caller unwraps a failed result, when a constructor receives a bad size, or
when a released container is used again.
"""
from __future__ import annotations

from typing import Dict, Type

from .enums import ErrorKind


class ContainerError(Exception):
    """Base class for all custom exceptions in the library."""

    kind: ErrorKind = ErrorKind.OK


class AllocationError(ContainerError, MemoryError):
    """Raised when storage for a buffer or node could not be allocated."""

    kind = ErrorKind.OUT_OF_MEMORY


class InvalidArgumentError(ContainerError, ValueError):
    """Raised for missing arguments, zero sizes and failed searches."""

    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRangeError(ContainerError, IndexError):
    """Raised when an index falls outside the interval an operation accepts."""

    kind = ErrorKind.OUT_OF_RANGE


class ReleasedContainerError(ContainerError, RuntimeError):
    """Raised when a container is used (or released) after ``release()``."""


_ERRORS_BY_KIND: Dict[ErrorKind, Type[ContainerError]] = {
    ErrorKind.OUT_OF_MEMORY: AllocationError,
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.OUT_OF_RANGE: OutOfRangeError,
}


def error_for(kind: ErrorKind) -> Type[ContainerError]:
    """Return the exception class matching a failure ``kind``."""

    try:
        return _ERRORS_BY_KIND[kind]
    except KeyError:
        raise ValueError(f"{kind!r} does not describe a failure") from None
