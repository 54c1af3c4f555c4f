"""DynArray: growable, densely packed sequence with amortized O(1) append.

The array owns a buffer of ``capacity`` slots whose first ``size`` entries are
live. Inserting into a full buffer allocates a larger one before anything is
moved, so a failed allocation leaves the array exactly as it was. Capacity
never shrinks.
"""
from __future__ import annotations

import math
from typing import Any, Iterator, List, Optional, Sequence, TypeVar

from seqcontainers.core.enums import ErrorKind
from seqcontainers.core.errors import AllocationError, InvalidArgumentError
from seqcontainers.core.result import NO_INDEX, Result, failure, success
from seqcontainers.core.types import Predicate, Visitor

from .base import BaseContainer, resolve_predicate

T = TypeVar("T")

DEFAULT_GROWTH_FACTOR = 2.0


def _allocate_slots(count: int) -> List[Any]:
    """Return a fresh buffer of ``count`` empty slots."""

    return [None] * count


class DynArray(BaseContainer[T]):
    """Index-addressable sequence that grows on demand.

    Construct through :meth:`create` (returns a :class:`Result`) or directly,
    in which case a zero capacity raises :class:`InvalidArgumentError`.
    """

    def __init__(self, initial_capacity: int, *, growth_factor: float = DEFAULT_GROWTH_FACTOR) -> None:
        super().__init__()
        if initial_capacity < 1:
            raise InvalidArgumentError("initial_capacity must be at least 1")
        if not math.isfinite(growth_factor) or growth_factor <= 1.0:
            raise InvalidArgumentError("growth_factor must be a finite number greater than 1.0")
        try:
            self._slots: List[Any] = _allocate_slots(initial_capacity)
        except MemoryError as exc:
            raise AllocationError(f"cannot allocate {initial_capacity} slots") from exc
        self._size = 0
        self._growth_factor = growth_factor

    @classmethod
    def create(
        cls,
        initial_capacity: int,
        *,
        growth_factor: float = DEFAULT_GROWTH_FACTOR,
    ) -> Result[Optional["DynArray[T]"]]:
        """Build an empty array with room for ``initial_capacity`` payloads."""

        try:
            array: DynArray[T] = cls(initial_capacity, growth_factor=growth_factor)
        except AllocationError:
            return failure(ErrorKind.OUT_OF_MEMORY)
        except InvalidArgumentError:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return success(array)

    @classmethod
    def from_sequence(
        cls,
        payloads: Sequence[T],
        *,
        growth_factor: float = DEFAULT_GROWTH_FACTOR,
    ) -> Result[Optional["DynArray[T]"]]:
        """Build an array sized for ``payloads`` and append each in order."""

        created = cls.create(len(payloads), growth_factor=growth_factor)
        if not created.ok:
            return created
        array = created.value
        for payload in payloads:
            array.append(payload)
        return success(array)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def growth_factor(self) -> float:
        return self._growth_factor

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        self._ensure_alive()
        return iter(self._slots[: self._size])

    def __repr__(self) -> str:
        return f"DynArray(size={self._size}, capacity={self.capacity})"

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------
    def get(self, index: int) -> Result[Optional[T]]:
        self._ensure_alive()
        if not 0 <= index < self._size:
            return self._reject("get", ErrorKind.OUT_OF_RANGE, index=index)
        return success(self._slots[index])

    def set(self, index: int, payload: T) -> Result[None]:
        """Replace the payload at ``index``; the previous one is dropped."""

        self._ensure_alive()
        if not 0 <= index < self._size:
            return self._reject("set", ErrorKind.OUT_OF_RANGE, index=index)
        self._slots[index] = payload
        return success(None)

    def swap(self, index: int, payload: T) -> Result[Optional[T]]:
        """Replace the payload at ``index`` and return the previous one."""

        self._ensure_alive()
        if not 0 <= index < self._size:
            return self._reject("swap", ErrorKind.OUT_OF_RANGE, index=index)
        previous = self._slots[index]
        self._slots[index] = payload
        return success(previous)

    def insert(self, index: int, payload: T) -> Result[int]:
        """Insert ``payload`` before position ``index`` and return the new size.

        ``index == size`` appends. The buffer grows first when full; if that
        allocation fails the array is unchanged and ``-1`` is returned.
        """

        self._ensure_alive()
        size = self._size
        if not 0 <= index <= size:
            return self._reject("insert", ErrorKind.OUT_OF_RANGE, NO_INDEX, index=index)
        if size == len(self._slots):
            try:
                self._grow()
            except (MemoryError, OverflowError):
                return self._reject("insert", ErrorKind.OUT_OF_MEMORY, NO_INDEX, index=index)
        slots = self._slots
        slots[index + 1 : size + 1] = slots[index:size]
        slots[index] = payload
        self._size = size + 1
        return success(self._size)

    def append(self, payload: T) -> Result[int]:
        """Add ``payload`` at the end and return the index it was placed at."""

        inserted = self.insert(self._size, payload)
        if not inserted.ok:
            return inserted
        return success(inserted.value - 1)

    def remove_at(self, index: int) -> Result[Optional[T]]:
        """Extract the payload at ``index`` and close the gap."""

        self._ensure_alive()
        size = self._size
        if not 0 <= index < size:
            return self._reject("remove_at", ErrorKind.OUT_OF_RANGE, index=index)
        slots = self._slots
        payload = slots[index]
        slots[index : size - 1] = slots[index + 1 : size]
        slots[size - 1] = None
        self._size = size - 1
        return success(payload)

    # ------------------------------------------------------------------
    # Search and traversal
    # ------------------------------------------------------------------
    def find_first(self, probe: Any = None, predicate: Optional[Predicate] = None) -> Result[Optional[T]]:
        """Return the first payload for which ``predicate(payload, probe)`` holds."""

        index = self._index_of("find_first", probe, predicate)
        if index == NO_INDEX:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return success(self._slots[index])

    def remove_first(self, probe: Any = None, predicate: Optional[Predicate] = None) -> Result[Optional[T]]:
        """Remove and return the first payload matching ``probe``."""

        index = self._index_of("remove_first", probe, predicate)
        if index == NO_INDEX:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return self.remove_at(index)

    def for_each(self, visitor: Optional[Visitor]) -> Result[None]:
        """Call ``visitor`` on positions ``0..size`` in order."""

        self._ensure_alive()
        if visitor is None:
            return self._reject("for_each", ErrorKind.INVALID_ARGUMENT)
        slots = self._slots
        for index in range(self._size):
            visitor(slots[index])
        return success(None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _index_of(self, operation: str, probe: Any, predicate: Optional[Predicate]) -> int:
        self._ensure_alive()
        matches = resolve_predicate(predicate, probe)
        if matches is None:
            self._log_rejection(operation, ErrorKind.INVALID_ARGUMENT, reason="no_predicate_no_probe")
            return NO_INDEX
        slots = self._slots
        for index in range(self._size):
            if matches(slots[index], probe):
                return index
        self._log_rejection(operation, ErrorKind.INVALID_ARGUMENT, reason="not_found")
        return NO_INDEX

    def _grown_capacity(self) -> int:
        old = len(self._slots)
        return max(old + 1, int(old * self._growth_factor))

    def _grow(self) -> None:
        """Move the live payloads into a larger buffer. May raise MemoryError or OverflowError."""

        old_capacity = len(self._slots)
        new_capacity = self._grown_capacity()
        slots = _allocate_slots(new_capacity)
        slots[: self._size] = self._slots[: self._size]
        self._slots = slots
        self.logger.debug(
            "DynArray buffer grown",
            extra={"old_capacity": old_capacity, "new_capacity": new_capacity},
        )

    def _drop_storage(self) -> None:
        self._slots = []
        self._size = 0


__all__ = ["DEFAULT_GROWTH_FACTOR", "DynArray"]
