"""Text rendering for containers, built on their traversal primitives.

Arrays render as ``[a, b, c]`` and linked lists as ``(a, b, c)``. A FixedArray
shows every slot, empty ones included, so holes stay visible. The default
renderer prints each payload's identity in hex and ``(nil)`` for ``None``;
pass ``render`` to show payload contents instead.
"""
from __future__ import annotations

import sys
from typing import Any, List, Optional, TextIO

from seqcontainers.containers import DynArray, FixedArray, LinkedList
from seqcontainers.core.types import Renderer


def render_identity(payload: Optional[Any]) -> str:
    if payload is None:
        return "(nil)"
    return hex(id(payload))


def format_container(container: DynArray | FixedArray | LinkedList, render: Optional[Renderer] = None) -> str:
    """Return the one-line text form of ``container``."""

    render = render or render_identity
    parts: List[str] = []
    if isinstance(container, FixedArray):
        for index in range(container.size):
            parts.append(render(container.get(index).value))
        return "[" + ", ".join(parts) + "]"
    if not isinstance(container, (DynArray, LinkedList)):
        raise TypeError(f"Cannot render {type(container).__name__}")
    container.for_each(lambda payload: parts.append(render(payload)))
    body = ", ".join(parts)
    if isinstance(container, LinkedList):
        return f"({body})"
    return f"[{body}]"


def print_container(
    container: DynArray | FixedArray | LinkedList,
    render: Optional[Renderer] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Write ``format_container(container, render)`` and a newline to ``stream``."""

    out = stream if stream is not None else sys.stdout
    out.write(format_container(container, render) + "\n")


__all__ = ["format_container", "print_container", "render_identity"]
