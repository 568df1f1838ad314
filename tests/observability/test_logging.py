"""Tests for structured logging configuration."""

import json
import logging
import sys

import pytest

from ulidtools.observability.logging import (
    DEFAULT_LOG_LEVEL,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    is_logging_configured,
)

pytestmark = pytest.mark.usefixtures("restore_logging")


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_level_is_warning(self) -> None:
        configure_logging(force=True)

        assert logging.getLogger().level == logging.getLevelName(DEFAULT_LOG_LEVEL)
        assert is_logging_configured()

    def test_respects_log_level(self) -> None:
        configure_logging(log_format="console", log_level="debug", force=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_writes_to_stderr(self) -> None:
        configure_logging(force=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_does_not_reconfigure_without_force(self) -> None:
        configure_logging(log_level="DEBUG", force=True)
        configure_logging(log_level="ERROR")

        assert logging.getLogger().level == logging.DEBUG

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="log format"):
            configure_logging(log_format="xml", force=True)

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="log level"):
            configure_logging(log_level="LOUD", force=True)


class TestJsonOutput:
    """Tests for the JSON renderer."""

    def test_json_line_with_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_format="json", log_level="INFO", force=True)
        bind_context(command="parse")

        get_logger("tests.json").info("test.event", key="value", number=42)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "test.event"
        assert event["key"] == "value"
        assert event["number"] == 42
        assert event["command"] == "parse"
        assert event["level"] == "info"
        assert event["logger"] == "tests.json"

    def test_level_filters_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_format="json", log_level="WARNING", force=True)

        get_logger("tests.filtered").info("hidden.event")

        assert "hidden.event" not in capsys.readouterr().err

    def test_clear_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_format="json", log_level="INFO", force=True)
        bind_context(command="generate")
        clear_context()

        get_logger("tests.cleared").info("test.cleared")

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert "command" not in event
