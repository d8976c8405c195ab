"""
Path-addressable lazy traversal over decode contexts.

A PathCursor is an immutable position inside a document that has not been
materialized yet. Stepping by key or index returns a new cursor; failures
are captured in an ErrorCursor and only raised by the terminal decode().

    cursor = PathCursor.from_root(open_root(raw))
    cursor.key("entities").index(0).key("name").decode(str)
    cursor.decode(str, "entities[0].name")      # same thing
    cursor["entities"][0].name.decode(str)      # same thing
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .decoder import ArrayContext, ObjectContext, RootContext
from .errors import DecodingError, IndexOutOfRange, UnpositionedRoot
from .parser import as_path, format_path
from .types import Path, Segment, T


class PathCursor:
    """
    Base class for the four cursor variants.

    ErrorCursor   - traversal already failed, absorbs every further step
    RootCursor    - no traversal yet
    KeyedCursor   - about to look up a pending key inside an object
    UnkeyedCursor - about to read a pending index of an array
    """

    __slots__ = ()

    # __getitem__ never raises IndexError, so opt out of sequence iteration
    __iter__ = None

    @staticmethod
    def from_root(root: RootContext) -> RootCursor:
        return RootCursor(root)

    @staticmethod
    def from_object(ctx: ObjectContext) -> KeyedCursor:
        """
        Cursor whose paths are relative to an object opened by key.

        Raises:
            UnpositionedRoot: If ctx was not opened by a key of an enclosing object
        """
        anchor = ctx.coding_path[-1] if ctx.coding_path else None
        parent = ctx.parent()
        if not isinstance(anchor, str) or parent is None:
            raise UnpositionedRoot(
                "cannot anchor a keyed cursor without a key", ctx.coding_path
            )
        return KeyedCursor(parent, anchor)

    @staticmethod
    def from_array(ctx: ArrayContext) -> UnkeyedCursor:
        """Cursor whose paths are relative to the element ctx is about to read."""
        return UnkeyedCursor(ctx.fork(), ctx.current_index)

    @property
    def path(self) -> Path:
        """Segments consumed so far, including the pending one."""
        raise NotImplementedError

    def _open_object(self) -> ObjectContext:
        raise NotImplementedError

    def _open_array(self) -> ArrayContext:
        raise NotImplementedError

    def _decode(self, tp: type[T]) -> T:
        raise NotImplementedError

    def key(self, name: str) -> PathCursor:
        """Step into an object member."""
        try:
            return KeyedCursor(self._open_object(), name)
        except DecodingError as e:
            return ErrorCursor(e)

    def index(self, i: int) -> PathCursor:
        """Step into an array element."""
        if i < 0:
            return ErrorCursor(
                IndexOutOfRange(
                    f"negative index {i} is not supported", self.path + (i,)
                )
            )
        try:
            return UnkeyedCursor(self._open_array(), i)
        except DecodingError as e:
            return ErrorCursor(e)

    def step(self, segment: Segment) -> PathCursor:
        if isinstance(segment, bool):
            raise TypeError("Path segments must be str or int, got bool")
        if isinstance(segment, str):
            return self.key(segment)
        if isinstance(segment, int):
            return self.index(segment)
        raise TypeError(
            f"Path segments must be str or int, got {type(segment).__name__}"
        )

    def walk(self, path: str | Iterable[Segment]) -> PathCursor:
        """Apply every segment of path in order."""
        cursor: PathCursor = self
        for segment in as_path(path):
            cursor = cursor.step(segment)
        return cursor

    def decode(self, tp: type[T], path: str | Iterable[Segment] | None = None) -> T:
        """
        Decode a value of type tp at this position, or at path relative to it.

        Raises:
            DecodingError: The first failure met while walking or decoding
        """
        if path is not None:
            return self.walk(path).decode(tp)
        return self._decode(tp)

    def __getitem__(self, segment: Segment) -> PathCursor:
        return self.step(segment)

    def __getattr__(self, name: str) -> PathCursor:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.key(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_path(self.path) or '<root>'})"


@dataclass(frozen=True, slots=True, repr=False)
class ErrorCursor(PathCursor):
    error: DecodingError

    @property
    def path(self) -> Path:
        return self.error.path

    def key(self, name: str) -> PathCursor:
        return self

    def index(self, i: int) -> PathCursor:
        return self

    def _decode(self, tp: type[T]) -> T:
        raise self.error


@dataclass(frozen=True, slots=True, repr=False)
class RootCursor(PathCursor):
    root: RootContext

    @property
    def path(self) -> Path:
        return self.root.coding_path

    def _open_object(self) -> ObjectContext:
        return self.root.object()

    def _open_array(self) -> ArrayContext:
        return self.root.array()

    def _decode(self, tp: type[T]) -> T:
        raise UnpositionedRoot(
            "cannot decode a value from an unpositioned root, "
            "at least one key or index step is required",
            self.path,
        )


@dataclass(frozen=True, slots=True, repr=False)
class KeyedCursor(PathCursor):
    container: ObjectContext
    pending_key: str

    @property
    def path(self) -> Path:
        return self.container.coding_path + (self.pending_key,)

    def _open_object(self) -> ObjectContext:
        return self.container.nested_object(self.pending_key)

    def _open_array(self) -> ArrayContext:
        return self.container.nested_array(self.pending_key)

    def _decode(self, tp: type[T]) -> T:
        return self.container.decode(tp, self.pending_key)


@dataclass(frozen=True, slots=True, repr=False)
class UnkeyedCursor(PathCursor):
    container: ArrayContext
    pending_index: int

    @property
    def path(self) -> Path:
        return self.container.coding_path + (self.pending_index,)

    def _positioned(self) -> ArrayContext:
        # Work on a fork so this cursor can be stepped or decoded again
        ctx = self.container.fork()
        seek(ctx, self.pending_index)
        return ctx

    def _open_object(self) -> ObjectContext:
        return self._positioned().nested_object()

    def _open_array(self) -> ArrayContext:
        return self._positioned().nested_array()

    def _decode(self, tp: type[T]) -> T:
        return self._positioned().decode(tp)


def seek(ctx: ArrayContext, index: int) -> None:
    """
    Advance ctx until its read position equals index.

    Elements before index are decoded and discarded one at a time, since
    an array context only supports sequential reads.

    Raises:
        IndexOutOfRange: If index is behind the read position or past the end
    """
    if ctx.current_index > index:
        raise IndexOutOfRange(
            f"cannot seek backwards from position {ctx.current_index} to {index}",
            ctx.coding_path + (index,),
        )

    try:
        while ctx.current_index < index:
            ctx.skip()
    except IndexOutOfRange as e:
        raise IndexOutOfRange(
            f"index {index} is out of range for array of {ctx.count} elements",
            ctx.coding_path + (index,),
        ) from e
