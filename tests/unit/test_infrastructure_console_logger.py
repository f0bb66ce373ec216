"""Unit tests for ConsoleAdapter (structlog)."""

import json

import pytest

from rend_auth.infrastructure.logging import ConsoleAdapter
from rend_auth.infrastructure.logging.console_adapter import redact_credentials


def last_json_line(output: str) -> dict:
    return json.loads(output.strip().splitlines()[-1])


@pytest.mark.unit
class TestConsoleAdapter:
    def test_json_output_has_level_and_context(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.info("user_registered", user_id="u-1")

        entry = last_json_line(capsys.readouterr().out)
        assert entry["event"] == "user_registered"
        assert entry["level"] == "info"
        assert entry["user_id"] == "u-1"
        assert "timestamp" in entry

    def test_error_flattens_exception(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("store_failed", error=RuntimeError("db down"))

        entry = last_json_line(capsys.readouterr().out)
        assert entry["error_type"] == "RuntimeError"
        assert entry["error_message"] == "db down"

    def test_level_filters_lower_messages(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("hidden")
        logger.warning("shown")

        output = capsys.readouterr().out
        assert "hidden" not in output
        assert last_json_line(output)["event"] == "shown"

    def test_bind_adds_context(self, capsys):
        logger = ConsoleAdapter(use_json=True).bind(request_id="r-1")

        logger.warning("nonce_rejected")

        assert last_json_line(capsys.readouterr().out)["request_id"] == "r-1"

    def test_service_name_bound_on_every_event(self, capsys):
        logger = ConsoleAdapter(use_json=True, service="rend-auth")

        logger.info("nonce_issued")

        assert last_json_line(capsys.readouterr().out)["service"] == "rend-auth"

    def test_credentials_are_redacted(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.warning(
            "login_failed",
            email="ada@example.com",
            password="correct-horse",
            signature="0x" + "ab" * 65,
            reset_token="f" * 40,
            token_prefix="ffffffff",
        )

        entry = last_json_line(capsys.readouterr().out)
        assert entry["password"] == "<redacted>"
        assert entry["signature"] == "<redacted>"
        assert entry["reset_token"] == "<redacted>"
        assert entry["email"] == "ada@example.com"
        assert entry["token_prefix"] == "ffffffff"

    def test_bound_credentials_are_redacted(self, capsys):
        logger = ConsoleAdapter(use_json=True).bind(session_token="eyJ.x.y")

        logger.info("session_issued")

        output = capsys.readouterr().out
        assert "eyJ.x.y" not in output
        assert last_json_line(output)["session_token"] == "<redacted>"


@pytest.mark.unit
class TestRedactCredentials:
    def test_none_values_left_as_is(self):
        event = {"event": "x", "password": None, "token": "abc"}

        assert redact_credentials(None, "info", event) == {
            "event": "x",
            "password": None,
            "token": "<redacted>",
        }
