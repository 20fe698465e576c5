"""
Tests for core/logging module

Formatters, redaction of credential-like fields, correlation context
and the LogTimer context manager.
"""

import json
import sys
import logging
from unittest.mock import MagicMock

import pytest

from app.core.logging import (
    REDACTED,
    DevelopmentFormatter,
    LogTimer,
    LoggerAdapter,
    StructuredFormatter,
    clear_context,
    get_logger,
    job_id_var,
    redact,
    request_id_var,
    set_job_id,
    set_request_id,
    set_video_id,
    video_id_var,
)


def _record(msg="Test message", **extra):
    record = logging.LogRecord(
        name="test.module",
        level=logging.INFO,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def reset_context():
    clear_context()
    yield
    clear_context()


class TestRedact:
    """Credential-like keys never reach log output"""

    @pytest.mark.parametrize("key", [
        "password",
        "auth_token",
        "gemini_api_key",
        "apiKey",
        "AUTH_SECRET",
        "Authorization",
    ])
    def test_sensitive_keys_are_redacted(self, key):
        assert redact(key, "value") == REDACTED

    def test_plain_keys_are_kept(self):
        assert redact("video_id", "abc") == "abc"

    def test_nested_dicts_are_redacted(self):
        data = {"user": {"email": "a@b.c", "apify_api_token": "tok"}, "count": 2}

        result = redact("extra", data)

        assert result["user"]["email"] == "a@b.c"
        assert result["user"]["apify_api_token"] == REDACTED
        assert result["count"] == 2

    def test_lists_keep_their_type(self):
        assert redact("ids", ["a", "b"]) == ["a", "b"]
        assert redact("ids", ("a",)) == ("a",)


class TestStructuredFormatter:
    def test_format_basic_log(self):
        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert parsed["logger"] == "test.module"
        assert "timestamp" in parsed

    def test_extra_fields_are_redacted(self):
        record = _record(video_id="v1", atlas_cloud_api_key="secret-value")

        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["extra"]["video_id"] == "v1"
        assert parsed["extra"]["atlas_cloud_api_key"] == REDACTED
        assert "secret-value" not in json.dumps(parsed)

    def test_correlation_ids_are_included(self):
        set_request_id("req-1")
        set_job_id("job-1")
        set_video_id("vid-1")

        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["request_id"] == "req-1"
        assert parsed["job_id"] == "job-1"
        assert parsed["video_id"] == "vid-1"

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "boom"


class TestDevelopmentFormatter:
    def test_includes_short_context(self):
        set_job_id("abcdef1234567890")

        line = DevelopmentFormatter().format(_record())

        assert "Test message" in line
        assert "job:abcdef12" in line


class TestContext:
    def test_clear_context(self):
        set_request_id("r")
        set_job_id("j")
        set_video_id("v")

        clear_context()

        assert request_id_var.get() is None
        assert job_id_var.get() is None
        assert video_id_var.get() is None


class TestLoggerAdapter:
    def test_bound_and_call_extra_are_merged(self):
        adapter = get_logger("test", service="api")
        assert isinstance(adapter, LoggerAdapter)

        _, kwargs = adapter.process("msg", {"extra": {"path": "/"}})

        assert kwargs["extra"] == {"service": "api", "path": "/"}


class TestLogTimer:
    def test_logs_start_and_completion(self):
        logger = MagicMock()

        with LogTimer(logger, "Image generation"):
            pass

        messages = [call.args[1] for call in logger.log.call_args_list]
        assert messages == ["Starting: Image generation", "Completed: Image generation"]
        logger.warning.assert_not_called()

    def test_logs_failure_and_reraises(self):
        logger = MagicMock()

        with pytest.raises(RuntimeError):
            with LogTimer(logger, "Transcript scrape"):
                raise RuntimeError("down")

        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["extra"]["error"] == "down"
