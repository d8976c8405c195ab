"""
Context manager for decoding configuration (e.g., strict mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict leaf coercion
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def decoding_context(*, strict: bool = False):
    """
    Context manager for decoding configuration.

    Args:
        strict: If True, leaf values are validated in pydantic strict mode,
               so no type coercion happens (e.g. "42" is not accepted as int).

    Example:
        from dyndecode import decode_at_path, decoding_context

        raw = b'{"user": {"age": "42"}}'

        decode_at_path(raw, int, "user.age")  # 42

        with decoding_context(strict=True):
            decode_at_path(raw, int, "user.age")  # TypeMismatch!
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
