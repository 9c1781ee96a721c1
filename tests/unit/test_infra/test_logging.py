"""Unit tests for logging configuration."""
from __future__ import annotations

import json
import logging
import sys

import pytest

from translate_client.core.settings import LoggingSettings
from translate_client.infra.logging import (
    JSONFormatter,
    configure_logging,
    reset_logging_state,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    reset_logging_state()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)
    reset_logging_state()


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="translate_client.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Cursor size %d bytes",
        args=(6000,),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


@pytest.mark.unit
class TestJSONFormatter:
    """Tests for the JSON Lines formatter."""

    def test_formats_core_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "WARNING"
        assert data["logger"] == "translate_client.test"
        assert data["message"] == "Cursor size 6000 bytes"
        assert data["timestamp"].endswith("Z")

    def test_includes_extra_and_static_fields(self):
        formatter = JSONFormatter(static={"service": "translate-client"})

        data = json.loads(formatter.format(make_record(cursor_size_bytes=6000)))

        assert data["service"] == "translate-client"
        assert data["cursor_size_bytes"] == 6000

    def test_single_line_with_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        output = JSONFormatter().format(record)

        assert "\n" not in output
        assert "ValueError: boom" in json.loads(output)["exception"]


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for dictConfig setup."""

    def test_text_handler_on_root(self, restore_root_logger):
        configure_logging(log_level="DEBUG", json_logs=False)

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert not isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_json_handler(self, restore_root_logger):
        configure_logging(json_logs=True, service_name="svc")

        formatter = restore_root_logger.handlers[0].formatter
        assert isinstance(formatter, JSONFormatter)
        assert formatter.static == {"service": "svc"}

    def test_httpx_quietened(self, restore_root_logger):
        configure_logging(log_level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_setup_logging_runs_once(self, restore_root_logger):
        setup_logging(LoggingSettings(level="ERROR"))
        setup_logging(LoggingSettings(level="DEBUG"))

        assert restore_root_logger.level == logging.ERROR

        setup_logging(LoggingSettings(level="DEBUG"), force=True)
        assert restore_root_logger.level == logging.DEBUG
