"""LinkedList: doubly linked sequence with cached head and tail.

Nodes belong to the list; ``prev`` links are back-references only. The list
keeps these invariants between calls:

* ``length == 0`` if and only if ``head is None and tail is None``;
* ``head.prev is None`` and ``tail.next is None``;
* walking ``next`` from ``head`` visits exactly ``length`` nodes, ending at
  ``tail``.
"""
from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, Sequence, TypeVar

from seqcontainers.core.enums import ErrorKind
from seqcontainers.core.result import NO_INDEX, Result, failure, success
from seqcontainers.core.types import Predicate, Visitor

from .base import BaseContainer, resolve_predicate

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("payload", "next", "prev")

    def __init__(self, payload: T) -> None:
        self.payload = payload
        self.next: Optional[_Node[T]] = None
        self.prev: Optional[_Node[T]] = None


def _new_node(payload: Any) -> _Node[Any]:
    """Allocate a detached node holding ``payload``."""

    return _Node(payload)


class LinkedList(BaseContainer[T]):
    """Sequence optimised for insertion and removal at arbitrary positions.

    ``seek_from_nearest_end`` lets positional lookups walk backwards from the
    tail when the index lies in the second half of the list.
    """

    def __init__(self, *, seek_from_nearest_end: bool = True) -> None:
        super().__init__()
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._length = 0
        self._seek_from_nearest_end = seek_from_nearest_end

    @classmethod
    def create(cls, *, seek_from_nearest_end: bool = True) -> Result["LinkedList[T]"]:
        """Build an empty list. Never fails."""

        return success(cls(seek_from_nearest_end=seek_from_nearest_end))

    @classmethod
    def from_sequence(
        cls,
        payloads: Sequence[T],
        *,
        seek_from_nearest_end: bool = True,
    ) -> Result[Optional["LinkedList[T]"]]:
        """Build a list holding ``payloads`` in order."""

        linked: LinkedList[T] = cls(seek_from_nearest_end=seek_from_nearest_end)
        for payload in payloads:
            appended = linked.append(payload)
            if not appended.ok:
                linked.release()
                return failure(appended.error)
        return success(linked)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    @property
    def length(self) -> int:
        return self._length

    @property
    def head(self) -> Optional[T]:
        """Payload at the front, or ``None`` for an empty list."""

        return self._head.payload if self._head is not None else None

    @property
    def tail(self) -> Optional[T]:
        """Payload at the back, or ``None`` for an empty list."""

        return self._tail.payload if self._tail is not None else None

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        self._ensure_alive()
        return self._walk(self._head, forward=True)

    def __reversed__(self) -> Iterator[T]:
        self._ensure_alive()
        return self._walk(self._tail, forward=False)

    def __repr__(self) -> str:
        return f"LinkedList(length={self._length})"

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------
    def get(self, index: int) -> Result[Optional[T]]:
        self._ensure_alive()
        if not 0 <= index < self._length:
            return self._reject("get", ErrorKind.OUT_OF_RANGE, index=index)
        return success(self._node_at(index).payload)

    def set(self, index: int, payload: T) -> Result[None]:
        self._ensure_alive()
        if not 0 <= index < self._length:
            return self._reject("set", ErrorKind.OUT_OF_RANGE, index=index)
        self._node_at(index).payload = payload
        return success(None)

    def swap(self, index: int, payload: T) -> Result[Optional[T]]:
        """Replace the payload at ``index`` and return the previous one."""

        self._ensure_alive()
        if not 0 <= index < self._length:
            return self._reject("swap", ErrorKind.OUT_OF_RANGE, index=index)
        node = self._node_at(index)
        previous = node.payload
        node.payload = payload
        return success(previous)

    def insert(self, index: int, payload: T) -> Result[int]:
        """Splice ``payload`` in before position ``index`` and return ``index``.

        ``index == length`` appends at the tail.
        """

        self._ensure_alive()
        if not 0 <= index <= self._length:
            return self._reject("insert", ErrorKind.OUT_OF_RANGE, NO_INDEX, index=index)
        try:
            node = _new_node(payload)
        except MemoryError:
            return self._reject("insert", ErrorKind.OUT_OF_MEMORY, NO_INDEX, index=index)

        if index == self._length:
            node.prev = self._tail
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node
        else:
            successor = self._node_at(index)
            predecessor = successor.prev
            node.next = successor
            node.prev = predecessor
            successor.prev = node
            if predecessor is None:
                self._head = node
            else:
                predecessor.next = node
        self._length += 1
        return success(index)

    def append(self, payload: T) -> Result[int]:
        return self.insert(self._length, payload)

    def remove_at(self, index: int) -> Result[Optional[T]]:
        """Unlink the node at ``index`` and return its payload."""

        self._ensure_alive()
        if not 0 <= index < self._length:
            return self._reject("remove_at", ErrorKind.OUT_OF_RANGE, index=index)
        return success(self._unlink(self._node_at(index)))

    # ------------------------------------------------------------------
    # Search and traversal
    # ------------------------------------------------------------------
    def find_first(self, probe: Any = None, predicate: Optional[Predicate] = None) -> Result[Optional[T]]:
        """Return the payload nearest the head for which the predicate holds."""

        node = self._find_node("find_first", probe, predicate)
        if node is None:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return success(node.payload)

    def remove_first(self, probe: Any = None, predicate: Optional[Predicate] = None) -> Result[Optional[T]]:
        node = self._find_node("remove_first", probe, predicate)
        if node is None:
            return failure(ErrorKind.INVALID_ARGUMENT)
        return success(self._unlink(node))

    def for_each(self, visitor: Optional[Visitor]) -> Result[None]:
        """Call ``visitor`` on every payload from head to tail."""

        self._ensure_alive()
        if visitor is None:
            return self._reject("for_each", ErrorKind.INVALID_ARGUMENT)
        node = self._head
        while node is not None:
            following = node.next
            visitor(node.payload)
            node = following
        return success(None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @staticmethod
    def _walk(node: Optional[_Node[T]], *, forward: bool) -> Iterator[T]:
        while node is not None:
            yield node.payload
            node = node.next if forward else node.prev

    def _node_at(self, index: int) -> _Node[T]:
        """Return the node at a validated ``index``."""

        if self._seek_from_nearest_end and index > self._length // 2:
            node = self._tail
            for _ in range(self._length - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        else:
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _find_node(self, operation: str, probe: Any, predicate: Optional[Predicate]) -> Optional[_Node[T]]:
        self._ensure_alive()
        matches = resolve_predicate(predicate, probe)
        if matches is None:
            self._log_rejection(operation, ErrorKind.INVALID_ARGUMENT, reason="no_predicate_no_probe")
            return None
        node = self._head
        while node is not None:
            if matches(node.payload, probe):
                return node
            node = node.next
        self._log_rejection(operation, ErrorKind.INVALID_ARGUMENT, reason="not_found")
        return None

    def _unlink(self, node: _Node[T]) -> T:
        predecessor, successor = node.prev, node.next
        if predecessor is None:
            self._head = successor
        else:
            predecessor.next = successor
        if successor is None:
            self._tail = predecessor
        else:
            successor.prev = predecessor
        node.prev = node.next = None
        self._length -= 1
        return node.payload

    def _drop_storage(self) -> None:
        node = self._head
        while node is not None:
            following = node.next
            node.prev = node.next = None
            node = following
        self._head = self._tail = None
        self._length = 0


__all__ = ["LinkedList"]
