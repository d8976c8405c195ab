from .context import decoding_context
from .core import decode_at_path, decode_value_at_path
from .cursor import ErrorCursor, KeyedCursor, PathCursor, RootCursor, UnkeyedCursor
from .decoder import ArrayContext, ObjectContext, RootContext, open_root
from .errors import (
    DecodingError,
    IndexOutOfRange,
    KeyNotFound,
    MalformedInput,
    ShapeMismatch,
    TypeMismatch,
    UnpositionedRoot,
)
from .parser import format_path, parse_path

__all__ = [
    "decode_at_path",
    "decode_value_at_path",
    "decoding_context",
    "open_root",
    "parse_path",
    "format_path",
    # Cursor
    "PathCursor",
    "ErrorCursor",
    "RootCursor",
    "KeyedCursor",
    "UnkeyedCursor",
    # Decode contexts
    "RootContext",
    "ObjectContext",
    "ArrayContext",
    # Errors
    "DecodingError",
    "MalformedInput",
    "ShapeMismatch",
    "KeyNotFound",
    "IndexOutOfRange",
    "TypeMismatch",
    "UnpositionedRoot",
]
