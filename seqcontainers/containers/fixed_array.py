"""FixedArray: a slot table whose size is fixed at construction.

Each slot is either occupied by a payload or empty (``None``). Slots are
independent: writing one never moves or touches another.
"""
from __future__ import annotations

from typing import Any, Iterator, List, Optional, TypeVar

from seqcontainers.core.enums import ErrorKind
from seqcontainers.core.errors import AllocationError, InvalidArgumentError
from seqcontainers.core.result import NO_INDEX, Result, failure, success
from seqcontainers.core.types import Disposer, Predicate, Visitor

from .base import BaseContainer, resolve_predicate

T = TypeVar("T")


def _allocate_slots(count: int) -> List[Any]:
    return [None] * count


class FixedArray(BaseContainer[T]):
    """Sparse, fixed-size, index-addressable table of payload slots."""

    def __init__(self, size: int) -> None:
        super().__init__()
        if size < 1:
            raise InvalidArgumentError("size must be at least 1")
        try:
            self._slots: List[Optional[T]] = _allocate_slots(size)
        except MemoryError as exc:
            raise AllocationError(f"cannot allocate {size} slots") from exc

    @classmethod
    def create(cls, size: int) -> Result[Optional["FixedArray[T]"]]:
        """Build a table of ``size`` empty slots."""

        try:
            table: FixedArray[T] = cls(size)
        except AllocationError:
            return failure(ErrorKind.OUT_OF_MEMORY)
        except InvalidArgumentError:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return success(table)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        """Declared number of slots; constant for the table's lifetime."""

        return len(self._slots)

    def count(self) -> int:
        """Return the number of occupied slots (linear scan)."""

        self._ensure_alive()
        return sum(1 for slot in self._slots if slot is not None)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[T]:
        self._ensure_alive()
        return (slot for slot in list(self._slots) if slot is not None)

    def __repr__(self) -> str:
        return f"FixedArray(size={self.size}, count={self.count() if not self._released else 0})"

    # ------------------------------------------------------------------
    # Slot access
    # ------------------------------------------------------------------
    def get(self, index: int) -> Result[Optional[T]]:
        """Return slot ``index``; an empty slot yields ``None`` with ``OK``."""

        self._ensure_alive()
        if not 0 <= index < len(self._slots):
            return self._reject("get", ErrorKind.OUT_OF_RANGE, index=index)
        return success(self._slots[index])

    def set(self, index: int, payload: T) -> Result[None]:
        """Overwrite slot ``index`` with a (non-``None``) payload."""

        self._ensure_alive()
        if not 0 <= index < len(self._slots):
            return self._reject("set", ErrorKind.OUT_OF_RANGE, index=index)
        if payload is None:
            return self._reject("set", ErrorKind.INVALID_ARGUMENT, index=index)
        self._slots[index] = payload
        return success(None)

    def unset(self, index: int) -> Result[Optional[T]]:
        """Empty slot ``index`` and return what it held."""

        self._ensure_alive()
        if not 0 <= index < len(self._slots):
            return self._reject("unset", ErrorKind.OUT_OF_RANGE, index=index)
        previous = self._slots[index]
        self._slots[index] = None
        return success(previous)

    def swap(self, index: int, payload: T) -> Result[Optional[T]]:
        """Store ``payload`` in slot ``index`` and return the previous contents."""

        self._ensure_alive()
        if not 0 <= index < len(self._slots):
            return self._reject("swap", ErrorKind.OUT_OF_RANGE, index=index)
        if payload is None:
            return self._reject("swap", ErrorKind.INVALID_ARGUMENT, index=index)
        previous = self._slots[index]
        self._slots[index] = payload
        return success(previous)

    def put(self, payload: T) -> Result[int]:
        """Store ``payload`` in the lowest empty slot and return its index.

        A full table is an ordinary outcome: the result holds ``-1`` and the
        error stays ``OK``.
        """

        self._ensure_alive()
        if payload is None:
            return self._reject("put", ErrorKind.INVALID_ARGUMENT, NO_INDEX)
        slots = self._slots
        for index, slot in enumerate(slots):
            if slot is None:
                slots[index] = payload
                return success(index)
        return success(NO_INDEX)

    # ------------------------------------------------------------------
    # Search and traversal
    # ------------------------------------------------------------------
    def find_first(self, probe: Any = None, predicate: Optional[Predicate] = None) -> Result[Optional[T]]:
        """Return the contents of the first slot matching ``probe``.

        The predicate sees every slot, empty ones included, so a caller
        predicate must accept ``None``. With identity and a ``None`` probe
        the first empty slot matches.
        """

        index = self._index_of("find_first", probe, predicate)
        if index == NO_INDEX:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return success(self._slots[index])

    def remove_first(self, probe: Any = None, predicate: Optional[Predicate] = None) -> Result[Optional[T]]:
        """Empty the first slot matching ``probe`` and return its contents."""

        index = self._index_of("remove_first", probe, predicate)
        if index == NO_INDEX:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return self.unset(index)

    def for_each(self, visitor: Optional[Visitor]) -> Result[None]:
        """Call ``visitor`` on occupied slots in ascending index order."""

        self._ensure_alive()
        if visitor is None:
            return self._reject("for_each", ErrorKind.INVALID_ARGUMENT)
        for slot in list(self._slots):
            if slot is not None:
                visitor(slot)
        return success(None)

    def clear(self, disposer: Optional[Disposer] = None) -> Result[None]:
        """Empty every slot, first passing occupied ones to ``disposer``."""

        self._ensure_alive()
        if disposer is not None:
            self.for_each(disposer)
        slots = self._slots
        for index in range(len(slots)):
            slots[index] = None
        return success(None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _index_of(self, operation: str, probe: Any, predicate: Optional[Predicate]) -> int:
        self._ensure_alive()
        matches = resolve_predicate(predicate, probe, allow_absent_probe=True)
        for index, slot in enumerate(self._slots):
            if matches(slot, probe):
                return index
        self._log_rejection(operation, ErrorKind.INVALID_ARGUMENT, reason="not_found")
        return NO_INDEX

    def _drop_storage(self) -> None:
        self._slots = []


__all__ = ["FixedArray"]
