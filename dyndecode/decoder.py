"""
Navigable decode contexts over a parsed JSON document.

A document is opened with open_root() and then navigated through
ObjectContext (keyed access) and ArrayContext (forward-only sequential
access). Leaf values are coerced into the requested type with pydantic.

Contexts opened from raw JSON carry json_input=True. In strict mode their
leaves are validated with pydantic's JSON-mode rules, so a JSON array is a
valid tuple, a JSON string is a valid enum value or datetime, and so on.
Contexts built over already-parsed Python data use Python-mode rules.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json, to_json

from .context import is_strict
from .errors import (
    IndexOutOfRange,
    KeyNotFound,
    MalformedInput,
    ShapeMismatch,
    TypeMismatch,
)
from .logging import get_logger
from .types import Path, T

logger = get_logger(__name__)


def open_root(data: bytes | bytearray | str) -> RootContext:
    """
    Parse raw JSON input into a navigable root context.

    NaN and Infinity are rejected; they are not JSON.

    Raises:
        MalformedInput: If the input is not a valid JSON document
    """
    try:
        value = from_json(data, allow_inf_nan=False)
    except ValueError as e:
        raise MalformedInput(f"invalid JSON input: {e}") from e

    unit = "characters" if isinstance(data, str) else "bytes"
    logger.debug("Parsed JSON document (%d %s)", len(data), unit)
    return RootContext(value, json_input=True)


@lru_cache(maxsize=256)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def _coerce(value: Any, tp: type[T] | Any, path: Path, json_input: bool = False) -> T:
    """Validate a leaf value into the requested type."""
    try:
        adapter = _adapter(tp)
    except TypeError:
        # Unhashable type expressions bypass the cache
        adapter = TypeAdapter(tp)

    strict = is_strict()
    try:
        if strict and json_input:
            return adapter.validate_json(to_json(value), strict=True)
        return adapter.validate_python(value, strict=strict)
    except ValidationError as e:
        summary = "; ".join(err["msg"] for err in e.errors())
        raise TypeMismatch(
            f"expected {_type_name(tp)}, got {_shape(value)} ({summary})", path
        ) from e


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _shape(value: Any) -> str:
    """Describe a parsed JSON value by its JSON shape."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence):
        return "array"
    return type(value).__name__


def _as_object(value: Any, path: Path) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ShapeMismatch(f"expected an object, found {_shape(value)}", path)
    return value


def _as_array(value: Any, path: Path) -> Sequence[Any]:
    # str and bytes-like values are sequences but not arrays
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        raise ShapeMismatch(f"expected an array, found {_shape(value)}", path)
    return value


@dataclass(frozen=True, slots=True)
class RootContext:
    """The document-level position, before any traversal."""

    value: Any
    coding_path: Path = ()
    json_input: bool = False

    def object(self) -> ObjectContext:
        """Open the document as an object."""
        members = _as_object(self.value, self.coding_path)
        return ObjectContext(members, self.coding_path, json_input=self.json_input)

    def array(self) -> ArrayContext:
        """Open the document as an array."""
        items = _as_array(self.value, self.coding_path)
        return ArrayContext(items, self.coding_path, json_input=self.json_input)


@dataclass(frozen=True, slots=True)
class ObjectContext:
    """Keyed access into a JSON object."""

    members: Mapping[str, Any]
    coding_path: Path = ()
    json_input: bool = False
    enclosing: Optional[ObjectContext] = field(default=None, repr=False, compare=False)

    def keys(self) -> list[str]:
        return list(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def _member(self, key: str) -> Any:
        if key not in self.members:
            raise KeyNotFound(
                f"no value associated with key {key!r}", self.coding_path + (key,)
            )
        return self.members[key]

    def nested_object(self, key: str) -> ObjectContext:
        path = self.coding_path + (key,)
        return ObjectContext(
            _as_object(self._member(key), path),
            path,
            json_input=self.json_input,
            enclosing=self,
        )

    def nested_array(self, key: str) -> ArrayContext:
        path = self.coding_path + (key,)
        return ArrayContext(
            _as_array(self._member(key), path), path, json_input=self.json_input
        )

    def decode(self, tp: type[T] | Any, key: str) -> T:
        """Decode the value at `key` as `tp`."""
        return _coerce(
            self._member(key), tp, self.coding_path + (key,), self.json_input
        )

    def parent(self) -> Optional[ObjectContext]:
        """A fresh context over the enclosing object, if this one was opened by key."""
        if self.enclosing is None:
            return None
        return ObjectContext(
            self.enclosing.members,
            self.enclosing.coding_path,
            json_input=self.enclosing.json_input,
            enclosing=self.enclosing.enclosing,
        )


@dataclass(slots=True)
class ArrayContext:
    """
    Sequential access into a JSON array.

    The read position only moves forward: every read consumes the element
    at current_index. Use fork() to get an independent reader.
    """

    items: Sequence[Any]
    coding_path: Path = ()
    current_index: int = 0
    json_input: bool = False

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def is_at_end(self) -> bool:
        return self.current_index >= len(self.items)

    def fork(self) -> ArrayContext:
        """An independent reader over the same array at the same position."""
        return ArrayContext(
            self.items, self.coding_path, self.current_index, self.json_input
        )

    def _element_path(self) -> Path:
        return self.coding_path + (self.current_index,)

    def _next(self) -> Any:
        if self.is_at_end:
            raise IndexOutOfRange(
                f"index {self.current_index} is out of range "
                f"for array of {self.count} elements",
                self._element_path(),
            )
        value = self.items[self.current_index]
        self.current_index += 1
        return value

    def skip(self) -> None:
        """Decode the current element as Any and discard it."""
        self.decode(Any)

    def decode(self, tp: type[T] | Any) -> T:
        """Decode the current element as `tp` and advance."""
        path = self._element_path()
        return _coerce(self._next(), tp, path, self.json_input)

    def nested_object(self) -> ObjectContext:
        path = self._element_path()
        return ObjectContext(
            _as_object(self._next(), path), path, json_input=self.json_input
        )

    def nested_array(self) -> ArrayContext:
        path = self._element_path()
        return ArrayContext(
            _as_array(self._next(), path), path, json_input=self.json_input
        )
