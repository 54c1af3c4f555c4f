"""Thread-local last-error channel.

Each thread sees its own cell, so containers used on different threads never
overwrite each other's outcome. Every fallible operation writes the kind of
its result here, ``OK`` included.
"""
from __future__ import annotations

import threading

from .enums import ErrorKind

_channel = threading.local()


def get_last_error() -> ErrorKind:
    """Return the outcome of the latest fallible operation on this thread."""

    return getattr(_channel, "kind", ErrorKind.OK)


def set_last_error(kind: ErrorKind) -> ErrorKind:
    _channel.kind = kind
    return kind


def clear_last_error() -> None:
    _channel.kind = ErrorKind.OK


__all__ = ["clear_last_error", "get_last_error", "set_last_error"]
