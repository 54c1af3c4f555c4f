"""Lifecycle and search plumbing shared by the three containers."""
from __future__ import annotations

import logging
from typing import Any, Generic, Optional, TypeVar

from seqcontainers.core.enums import ErrorKind
from seqcontainers.core.errors import ReleasedContainerError
from seqcontainers.core.result import Result, failure, success
from seqcontainers.core.types import Disposer, Predicate, Visitor, identity_equals

T = TypeVar("T")


class BaseContainer(Generic[T]):
    """Common behaviour: explicit release, scoped use and rejection logging.

    Subclasses implement :meth:`for_each` and :meth:`_drop_storage`. A
    container is released exactly once, either through :meth:`release`,
    :meth:`release_with` or by leaving a ``with`` block.
    """

    def __init__(self) -> None:
        self._released = False
        self.logger = logging.getLogger(f"seqcontainers.{type(self).__name__.lower()}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Free internal storage. Payloads are left untouched."""

        self._ensure_alive()
        self._drop_storage()
        self._released = True

    def release_with(self, disposer: Optional[Disposer]) -> Result[None]:
        """Visit every live payload with ``disposer``, then release."""

        self._ensure_alive()
        if disposer is None:
            return self._reject("release_with", ErrorKind.INVALID_ARGUMENT)
        self.for_each(disposer)
        self.release()
        return success(None)

    def __enter__(self) -> "BaseContainer[T]":
        self._ensure_alive()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._released:
            self.release()

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def for_each(self, visitor: Optional[Visitor]) -> Result[None]:
        raise NotImplementedError

    def _drop_storage(self) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _ensure_alive(self) -> None:
        if self._released:
            raise ReleasedContainerError(f"{type(self).__name__} has already been released")

    def _reject(self, operation: str, kind: ErrorKind, sentinel: Any = None, **context: Any) -> Result[Any]:
        self._log_rejection(operation, kind, **context)
        return failure(kind, sentinel)

    def _log_rejection(self, operation: str, kind: ErrorKind, **context: Any) -> None:
        self.logger.debug(
            "Container operation rejected",
            extra={"operation": operation, "error": kind.value, **context},
        )


def resolve_predicate(
    predicate: Optional[Predicate],
    probe: Any,
    *,
    allow_absent_probe: bool = False,
) -> Optional[Predicate]:
    """Return the predicate a search should use, or ``None`` if there is none.

    Without a caller predicate the search falls back to identity. An absent
    probe gives identity nothing to compare against unless the container
    treats ``None`` as a meaningful value (FixedArray empty slots).
    """

    if predicate is not None:
        return predicate
    if probe is None and not allow_absent_probe:
        return None
    return identity_equals


__all__ = ["BaseContainer", "resolve_predicate"]
