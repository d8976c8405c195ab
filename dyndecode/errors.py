"""
Error taxonomy for dyndecode traversal and decoding.

Every failure carries the sub-path consumed so far, so a caller can tell
exactly which segment failed.
"""

from __future__ import annotations

from .parser import format_path
from .types import Path


class DecodingError(Exception):
    """Decoding failed at some sub-path of the document."""

    def __init__(self, cause: str, path: Path = ()):
        super().__init__(cause, path)
        self.cause = cause
        self.path = tuple(path)

    def __str__(self) -> str:
        where = format_path(self.path) or "<root>"
        return f"decoding failed at sub-path `{where}`: {self.cause}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cause!r}, path={self.path!r})"


class MalformedInput(DecodingError, ValueError):
    """The raw input does not parse as a JSON document."""


class ShapeMismatch(DecodingError, TypeError):
    """A step expected an object but found an array or leaf, or vice versa."""


class KeyNotFound(DecodingError, KeyError):
    """An object step named a key absent from that object."""


class IndexOutOfRange(DecodingError, IndexError):
    """An array step named an index beyond the array's element count."""


class TypeMismatch(DecodingError, TypeError):
    """The leaf value cannot be coerced into the requested type."""


class UnpositionedRoot(DecodingError):
    """A value was requested without any path segment having been applied."""
