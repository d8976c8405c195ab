"""
Entry points for decoding a typed value at a path inside a JSON document.
"""

from collections.abc import Iterable
from typing import Any

from .cursor import PathCursor
from .decoder import RootContext, open_root
from .errors import DecodingError
from .logging import get_logger
from .parser import as_path, format_path
from .types import Segment, T

logger = get_logger(__name__)


def decode_at_path(
    data: bytes | bytearray | str,
    tp: type[T],
    path: str | Iterable[Segment],
) -> T:
    """
    Decode the value at `path` inside raw JSON `data` as `tp`.

    Args:
        data: Raw JSON document
        tp: Target type; anything pydantic can validate (int, str,
            list[float], a BaseModel subclass, a TypedDict, ...)
        path: Path string (e.g., "xo_metadata.entities[0].terms.designer")
              or a sequence of segments (e.g., ["entities", 0, "name"])

    Returns:
        The decoded value

    Raises:
        MalformedInput: If data is not valid JSON
        KeyNotFound: If a key along the path is absent
        IndexOutOfRange: If an index along the path is past the array's end
        ShapeMismatch: If a key is applied to a non-object or an index to a non-array
        TypeMismatch: If the value at the path cannot be validated as tp
        UnpositionedRoot: If path has no segments
        ValueError: If a path string is not valid syntax

    Examples:
        decode_at_path(raw, str, "page.title")
        decode_at_path(raw, Designer, "entities.0.terms.designer")
        decode_at_path(raw, list[int], ["matrix", 2])
    """
    segments = as_path(path)
    return _resolve(open_root(data), tp, segments)


def decode_value_at_path(
    value: Any,
    tp: type[T],
    path: str | Iterable[Segment],
) -> T:
    """
    Same as decode_at_path, for data that has already been parsed.

    Examples:
        decode_value_at_path({"n": [1, 2]}, int, "n[1]")  # 2
    """
    segments = as_path(path)
    return _resolve(RootContext(value), tp, segments)


def _resolve(root: RootContext, tp: type[T], segments: tuple[Segment, ...]) -> T:
    cursor = PathCursor.from_root(root).walk(segments)
    try:
        result = cursor.decode(tp)
    except DecodingError as e:
        logger.debug("Failed to decode %s: %s", format_path(segments) or "<root>", e)
        raise

    logger.debug("Decoded %s at %s", getattr(tp, "__name__", tp), format_path(segments))
    return result
