"""
Tests for core/logging module

Covers the formatters, the logger adapter, correlation context variables
and the LogTimer context manager.
"""

import json
import logging
import sys
from unittest.mock import MagicMock

import pytest

from shortsmind.core.logging import (
    DevelopmentFormatter,
    LoggerAdapter,
    LogTimer,
    StructuredFormatter,
    clear_context,
    concept_id_var,
    get_logger,
    session_id_var,
    set_concept_id,
    set_session_id,
    setup_logging,
)


def _record(msg="Test message", level=logging.INFO, **attrs):
    record = logging.LogRecord(
        name="test.module",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Test suite for StructuredFormatter"""

    def test_format_basic_log(self):
        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert parsed["logger"] == "test.module"
        assert "timestamp" in parsed

    def test_extra_fields_are_collected(self):
        parsed = json.loads(StructuredFormatter().format(_record(library_size=3)))
        assert parsed["extra"]["library_size"] == 3

    def test_sensitive_extra_fields_are_redacted(self):
        parsed = json.loads(StructuredFormatter().format(_record(api_key="abc123")))
        assert parsed["extra"]["api_key"] == "***REDACTED***"

    def test_context_ids_included(self):
        set_session_id("session-1")
        set_concept_id("concept-9")

        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["session_id"] == "session-1"
        assert parsed["concept_id"] == "concept-9"
        assert "extra" not in parsed

    def test_format_with_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "boom"

    def test_non_ascii_message_preserved(self):
        parsed = json.loads(StructuredFormatter().format(_record(msg="자막 추출")))
        assert parsed["message"] == "자막 추출"


class TestDevelopmentFormatter:

    def test_contains_level_and_message(self):
        line = DevelopmentFormatter().format(_record(level=logging.WARNING))
        assert "WARNING" in line
        assert "Test message" in line

    def test_context_shown(self):
        set_session_id("abcdef123456")
        line = DevelopmentFormatter().format(_record())
        assert "session:abcdef12" in line


class TestLoggerAdapter:

    def test_process_adds_context_and_static_extra(self):
        set_session_id("s-1")
        adapter = LoggerAdapter(logging.getLogger("test"), {"component": "library_store"})

        _, kwargs = adapter.process("hello", {})

        assert kwargs["extra"]["session_id"] == "s-1"
        assert kwargs["extra"]["component"] == "library_store"

    def test_call_extra_wins_over_static_extra(self):
        adapter = LoggerAdapter(logging.getLogger("test"), {"component": "a"})
        _, kwargs = adapter.process("hello", {"extra": {"component": "b"}})
        assert kwargs["extra"]["component"] == "b"

    def test_get_logger_returns_adapter(self):
        logger = get_logger("shortsmind.test", component="unit")
        assert isinstance(logger, LoggerAdapter)
        assert logger.extra == {"component": "unit"}


class TestContext:

    def test_clear_context(self):
        set_session_id("s")
        set_concept_id("c")
        clear_context()
        assert session_id_var.get() is None
        assert concept_id_var.get() is None


class TestSetupLogging:

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        setup_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_json_console(self):
        setup_logging(level="INFO", use_json=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, StructuredFormatter)

    def test_file_handler_is_structured(self, tmp_path):
        log_file = tmp_path / "logs" / "shortsmind.log"
        setup_logging(level="INFO", log_file=log_file, use_json=False)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert isinstance(handlers[1].formatter, StructuredFormatter)
        assert log_file.parent.exists()


class TestLogTimer:

    def test_logs_start_and_completion(self):
        logger = MagicMock()
        with LogTimer(logger, "generate_image", level=logging.INFO):
            pass

        messages = [call.args[1] for call in logger.log.call_args_list]
        assert messages == ["Starting: generate_image", "Completed: generate_image"]
        assert "duration_seconds" in logger.log.call_args_list[1].kwargs["extra"]

    def test_failure_logged_and_propagated(self):
        logger = MagicMock()
        with pytest.raises(RuntimeError):
            with LogTimer(logger, "recommend"):
                raise RuntimeError("upstream down")

        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["extra"]["error"] == "upstream down"
