"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from garagenet.config.logging import configure_logging, redact_sensitive


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("garagenet")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("garagenet").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("garagenet").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("garagenet.test")
        log.warning("hello world", key="val")
        # Smoke test: no exception; format depends on terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("garagenet.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "garagenet.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("garagenet.services.forms").debug("Created Garage garage-1")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Created Garage garage-1"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "garagenet.services.forms"

    def test_http_library_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("httpx").debug("HTTP Request: POST ...")
        logging.getLogger("httpcore").debug("connect_tcp.started")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_credentials_redacted(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("garagenet.test").warning(
            "auth", token="id-token-abc", api_key="da2-key", phone="5551234567", mode="userPool"
        )
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["token"] == "***"
        assert parsed["api_key"] == "***"
        assert parsed["phone"] == "***"
        assert parsed["mode"] == "userPool"

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=False, log_json=False)
        configure_logging(verbose=False, log_json=False)
        assert len(logging.getLogger().handlers) == 1


def test_redact_sensitive_leaves_event() -> None:
    event = redact_sensitive(None, "info", {"event": "x", "email": "a@b.c"})
    assert event == {"event": "x", "email": "***"}


def test_redact_sensitive_masks_nested_payload() -> None:
    payload = {
        "name": "Combat Customs",
        "contacts": [{"name": "J Smith", "phone": "5551234567", "email": "j@example.com"}],
    }
    event = redact_sensitive(None, "info", {"event": "create", "payload": payload})
    assert event["payload"]["name"] == "Combat Customs"
    assert event["payload"]["contacts"] == [{"name": "J Smith", "phone": "***", "email": "***"}]
    assert payload["contacts"][0]["phone"] == "5551234567"


def test_redact_sensitive_matches_keys_case_insensitively() -> None:
    event = redact_sensitive(None, "info", {"event": "x", "Authorization": "tok"})
    assert event["Authorization"] == "***"
