"""
Path parser for dyndecode path expressions.

Supports:
- Simple keys: "data.patient.id"
- Array indices: "items[0]" or "items.0"
- Quoted keys: 'meta["content-type"]', "codes['1']"

A dotted segment made only of digits is an index. Keys that are digits or
contain dots, brackets or quotes must be written in quoted brackets.
"""

import json
import re
from collections.abc import Iterable

from .types import Path, Segment


class PathParser:
    """Parser for dyndecode path expressions."""

    # Regex patterns
    DOTTED_PATTERN = re.compile(r"^[^.\[\]\"']+")
    INDEX_PATTERN = re.compile(r"^\[(\d+)\]")
    NEGATIVE_INDEX_PATTERN = re.compile(r"^\[(-\d+)\]")
    DOUBLE_QUOTED_PATTERN = re.compile(r'^\[("(?:[^"\\]|\\.)*")\]')
    SINGLE_QUOTED_PATTERN = re.compile(r"^\['((?:[^'\\]|\\.)*)'\]")
    DIGITS_PATTERN = re.compile(r"^-?\d+$")

    def parse(self, path_str: str) -> Path:
        """Parse a path string into a tuple of segments."""
        segments: list[Segment] = []
        remaining = path_str

        # Allow a leading dot, as in ".data.items"
        if remaining.startswith("."):
            remaining = remaining[1:]
            if not remaining:
                raise ValueError(f"Invalid path syntax at: {path_str}")

        expect_segment = bool(remaining)
        while remaining:
            if remaining[0] == "[":
                segment, remaining = self._parse_bracket(remaining)
            elif expect_segment:
                segment, remaining = self._parse_dotted(remaining)
            else:
                raise ValueError(f"Invalid path syntax at: {remaining}")
            segments.append(segment)

            expect_segment = False
            # Skip dot separator if present
            if remaining and remaining[0] == ".":
                remaining = remaining[1:]
                if not remaining:
                    raise ValueError(f"Trailing dot in path: {path_str}")
                expect_segment = True

        return tuple(segments)

    def _parse_dotted(self, s: str) -> tuple[Segment, str]:
        """Parse a bare key or digit run from the start of string s."""
        match = self.DOTTED_PATTERN.match(s)
        if match is None:
            raise ValueError(f"Invalid path syntax at: {s}")

        token = match.group(0)
        if self.DIGITS_PATTERN.match(token):
            if token.startswith("-"):
                raise ValueError(
                    f"Negative index not supported: {token} "
                    "(quote it to use it as a key)"
                )
            return int(token), s[match.end() :]
        return token, s[match.end() :]

    def _parse_bracket(self, s: str) -> tuple[Segment, str]:
        """Parse a bracket expression like [0] or ["key"]."""
        if match := self.INDEX_PATTERN.match(s):
            return int(match.group(1)), s[match.end() :]

        if match := self.DOUBLE_QUOTED_PATTERN.match(s):
            return json.loads(match.group(1)), s[match.end() :]

        if match := self.SINGLE_QUOTED_PATTERN.match(s):
            key = re.sub(r"\\(.)", r"\1", match.group(1))
            return key, s[match.end() :]

        if match := self.NEGATIVE_INDEX_PATTERN.match(s):
            raise ValueError(f"Negative index not supported: {match.group(1)}")

        raise ValueError(f"Invalid path syntax at: {s}")


# Keys that can be written without brackets
_BARE_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def parse_path(path_str: str) -> Path:
    """Convenience function to parse a path string."""
    parser = PathParser()
    return parser.parse(path_str)


def as_path(path: str | Iterable[Segment]) -> Path:
    """
    Normalize a path given as a string or as a sequence of segments.

    Raises:
        ValueError: If a string path is not valid syntax
        TypeError: If a segment is neither a str nor an int
    """
    if isinstance(path, str):
        return parse_path(path)

    segments = tuple(path)
    for segment in segments:
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            raise TypeError(
                f"Path segments must be str or int, got {type(segment).__name__}"
            )
    return segments


def format_path(path: Iterable[Segment]) -> str:
    """Render segments back into path syntax, e.g. ('a', 1, 'b') -> 'a[1].b'."""
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif _BARE_KEY.match(segment):
            parts.append(f".{segment}" if parts else segment)
        else:
            parts.append(f"[{json.dumps(segment)}]")
    return "".join(parts)
