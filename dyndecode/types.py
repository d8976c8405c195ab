"""
Type aliases shared across dyndecode.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")

Segment = str | int
Path = tuple[Segment, ...]
