"""Test the package logging setup."""

import io
import logging

import pytest

from dyndecode import KeyNotFound, decode_at_path
from dyndecode.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    install_handler,
    reset_logging,
    set_global_log_level,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    reset_logging()


def _package_logger() -> logging.Logger:
    return logging.getLogger("dyndecode")


class TestLibraryDefaults:
    def test_only_null_handler_after_import(self):
        handlers = _package_logger().handlers
        assert handlers
        assert all(isinstance(h, logging.NullHandler) for h in handlers)

    def test_level_is_inherited(self):
        assert _package_logger().level == logging.NOTSET
        logger = get_logger("dyndecode.decoder.test")
        assert logger.name == "dyndecode.decoder.test"
        assert logger.level == logging.NOTSET

    def test_get_logger_adds_no_handlers(self):
        before = list(_package_logger().handlers)
        get_logger("dyndecode.a")
        get_logger("dyndecode.b")
        assert _package_logger().handlers == before
        assert get_logger("dyndecode.a").handlers == []

    def test_quiet_by_default(self, caplog):
        decode_at_path(b'{"a": 1}', int, "a")
        assert "Decoded" not in caplog.text

    def test_application_config_is_respected(self, caplog):
        caplog.set_level(logging.DEBUG)
        decode_at_path(b'{"a": [1, 2]}', int, "a[1]")
        assert "Decoded int at a[1]" in caplog.text


class TestDebugRecords:
    def test_decode_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dyndecode"):
            decode_at_path(b'{"a": [1, 2]}', int, "a[1]")
        assert "Parsed JSON document (13 bytes)" in caplog.text
        assert "Decoded int at a[1]" in caplog.text

    def test_str_input_is_measured_in_characters(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dyndecode"):
            decode_at_path('{"é": 1}', int, '["é"]')
        assert "Parsed JSON document (8 characters)" in caplog.text

    def test_failure_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dyndecode"):
            with pytest.raises(KeyNotFound):
                decode_at_path(b'{"a": 1}', int, "b")
        assert "Failed to decode b" in caplog.text


class TestOptInHelpers:
    def test_global_level(self):
        set_global_log_level(logging.WARNING)
        assert _package_logger().level == logging.WARNING

        enable_debug_logging()
        assert _package_logger().level == logging.DEBUG

        disable_debug_logging()
        assert _package_logger().level == logging.NOTSET

    def test_install_handler(self):
        stream = io.StringIO()
        install_handler(handler=logging.StreamHandler(stream), format_string="%(message)s")
        decode_at_path(b'{"a": 1}', int, "a")
        assert "Decoded int at a" in stream.getvalue()

    def test_install_handler_replaces_previous(self):
        first = install_handler(handler=logging.StreamHandler(io.StringIO()))
        second = install_handler(handler=logging.StreamHandler(io.StringIO()))
        handlers = _package_logger().handlers
        assert second in handlers
        assert first not in handlers

    def test_reset_removes_installed_handler(self):
        installed = install_handler(handler=logging.StreamHandler(io.StringIO()))
        reset_logging()
        assert installed not in _package_logger().handlers
        assert _package_logger().level == logging.NOTSET
        assert any(isinstance(h, logging.NullHandler) for h in _package_logger().handlers)
