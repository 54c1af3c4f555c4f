"""Generic in-memory sequence containers.

Three independent containers share one contract layer (``core``):

* :class:`DynArray`   - growable, densely packed, index addressable.
* :class:`FixedArray` - fixed number of slots, each occupied or empty.
* :class:`LinkedList` - doubly linked, head and tail cached.

Payloads are caller-owned references; the containers never copy, compare or
release them. Fallible operations return a :class:`Result` and mirror the
outcome into the thread-local last-error channel.
"""
from __future__ import annotations

import logging

from .containers import DynArray, FixedArray, LinkedList
from .core.enums import ErrorKind
from .core.errors import (
    AllocationError,
    ContainerError,
    InvalidArgumentError,
    OutOfRangeError,
    ReleasedContainerError,
)
from .core.last_error import clear_last_error, get_last_error
from .core.result import Result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AllocationError",
    "ContainerError",
    "DynArray",
    "ErrorKind",
    "FixedArray",
    "InvalidArgumentError",
    "LinkedList",
    "OutOfRangeError",
    "ReleasedContainerError",
    "Result",
    "clear_last_error",
    "get_last_error",
]
