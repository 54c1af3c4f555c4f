"""Enumerations shared across the containers."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Outcome of a fallible container operation."""

    OK = "ok"
    OUT_OF_MEMORY = "out_of_memory"  # buffer or node allocation failed
    INVALID_ARGUMENT = "invalid_argument"  # missing argument, zero size, search miss
    OUT_OF_RANGE = "out_of_range"  # index outside the permitted interval
