"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from dateranger.config.logging import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, stream=io.StringIO())
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, stream=io.StringIO())
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        before = root.handlers[:]
        configure_logging(verbose=True, stream=io.StringIO())
        assert root.handlers == before

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        log = structlog.get_logger("dateranger.test")
        log.warning("json test", answer=42)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dateranger.test"
        assert "timestamp" in parsed

    def test_stdlib_service_logger_gets_structured_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)

        logging.getLogger("dateranger.services.ranges").debug("Resolved with the short codec")

        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "Resolved with the short codec"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "dateranger.services.ranges"

    def test_debug_hidden_when_not_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        logging.getLogger("dateranger.services.ranges").debug("hidden")
        assert stream.getvalue() == ""

    def test_console_renderer_plain_on_non_tty(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)
        logging.getLogger("dateranger.domain").warning("clock skew")
        output = stream.getvalue()
        assert "clock skew" in output
        assert "\x1b[" not in output

    def test_defaults_to_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("dateranger.cli").warning("to stderr")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert json.loads(captured.err.strip())["event"] == "to stderr"

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        first = configure_logging(verbose=True, stream=io.StringIO())
        second = configure_logging(verbose=True, log_json=True, stream=io.StringIO())
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert second in handlers
        assert first not in handlers
