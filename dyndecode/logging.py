"""
Logging for dyndecode.

Every module logs under the "dyndecode" logger hierarchy. As a library the
package installs nothing but a NullHandler; records reach whatever handlers
the application configures. install_handler() and the level helpers are
opt-in conveniences for scripts and debugging sessions.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "dyndecode"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

# Handler attached by install_handler(), if any
_installed: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a dyndecode module (pass __name__)."""
    return logging.getLogger(name)


def install_handler(
    level: int = logging.DEBUG,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """
    Send dyndecode records to `handler` (stderr by default).

    Calling it again swaps the previous handler out, so the package logger
    never ends up with duplicates.
    """
    global _installed

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _installed is not None:
        package_logger.removeHandler(_installed)

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _installed = handler
    return handler


def set_global_log_level(level: int) -> None:
    """Set the threshold of the package logger; handlers are left alone."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Drop back to inheriting the level from the application's loggers."""
    set_global_log_level(logging.NOTSET)


def reset_logging() -> None:
    """Undo install_handler() and any level change (mainly for tests)."""
    global _installed

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _installed is not None:
        package_logger.removeHandler(_installed)
        _installed = None
    package_logger.setLevel(logging.NOTSET)
