from __future__ import annotations

import io

from conftest import Box

from seqcontainers.containers import DynArray, FixedArray, LinkedList
from seqcontainers.rendering import format_container, print_container, render_identity


def _as_int(payload: Box | None) -> str:
    return "(null)" if payload is None else str(payload.value)


def test_dynarray_should_render_in_square_brackets(full_array) -> None:
    assert format_container(full_array, _as_int) == "[-1, 42, 666, 13, 28, -54, 0, 7, 6, 5]"


def test_linked_list_should_render_in_parentheses(filled_list) -> None:
    assert format_container(filled_list, _as_int) == "(42, 3, 7, 13, 6)"


def test_fixed_array_should_render_empty_slots(small_table: FixedArray) -> None:
    small_table.set(1, Box(9))
    assert format_container(small_table, _as_int) == "[(null), 9, (null), (null)]"
    assert format_container(small_table).startswith("[(nil), 0x")


def test_empty_containers_should_render_brackets_only() -> None:
    assert format_container(DynArray.create(2).unwrap()) == "[]"
    assert format_container(LinkedList.create().unwrap()) == "()"


def test_default_renderer_should_print_identity() -> None:
    payload = Box(1)
    assert render_identity(payload) == hex(id(payload))
    assert render_identity(None) == "(nil)"


def test_print_container_should_append_newline(filled_list) -> None:
    stream = io.StringIO()
    print_container(filled_list, _as_int, stream=stream)
    assert stream.getvalue() == "(42, 3, 7, 13, 6)\n"
