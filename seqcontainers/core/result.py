"""In-band outcome type returned by every fallible operation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .enums import ErrorKind
from .errors import error_for
from .last_error import set_last_error

T = TypeVar("T")

ABSENT = None
NO_INDEX = -1


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Value of an operation together with its :class:`ErrorKind`.

    On failure ``value`` holds the sentinel of the operation (``None`` for
    payload-returning calls, ``-1`` for index-returning calls), so callers
    that only look at ``value`` keep working.
    """

    value: T
    error: ErrorKind = ErrorKind.OK

    @property
    def ok(self) -> bool:
        return self.error is ErrorKind.OK

    def unwrap(self) -> T:
        """Return ``value`` or raise the exception matching ``error``."""

        if self.error is ErrorKind.OK:
            return self.value
        raise error_for(self.error)(f"operation failed: {self.error.value}")

    def value_or(self, default: T) -> T:
        return self.value if self.error is ErrorKind.OK else default


def success(value: T) -> Result[T]:
    """Build a successful result and clear the last-error channel."""

    set_last_error(ErrorKind.OK)
    return Result(value)


def failure(kind: ErrorKind, sentinel: T = ABSENT) -> Result[T]:  # type: ignore[assignment]
    """Build a failed result and record ``kind`` in the last-error channel."""

    set_last_error(kind)
    return Result(sentinel, kind)


__all__ = ["ABSENT", "NO_INDEX", "Result", "failure", "success"]
