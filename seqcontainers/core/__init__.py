"""Core primitives shared by every container.

This package holds the error vocabulary, the result type, the thread-local
last-error channel and the callable aliases. Container modules import from
here so that they never depend on each other.
"""

from . import enums, errors, last_error, result, types

__all__ = ["enums", "errors", "last_error", "result", "types"]
