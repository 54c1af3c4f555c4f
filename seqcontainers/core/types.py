"""Callable aliases used by the container APIs.

Visitors and disposers take one payload; predicates take the stored payload
first and the caller's probe second.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, TypeAlias

Visitor: TypeAlias = Callable[[Any], None]
Disposer: TypeAlias = Callable[[Any], None]
Predicate: TypeAlias = Callable[[Any, Any], bool]
Renderer: TypeAlias = Callable[[Optional[Any]], str]


def identity_equals(payload: Any, probe: Any) -> bool:
    """Default search predicate: both names refer to the same object."""

    return payload is probe
