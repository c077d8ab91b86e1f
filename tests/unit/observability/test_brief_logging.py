"""
decision-brief — unit tests for structured logging

File: tests/unit/observability/test_brief_logging.py

Purpose
- Validate JSON-lines output, extra fields, level filtering, redaction, and
  handle shutdown.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from decision_brief.briefing import build_brief
from decision_brief.observability import (
    LoggingConfig,
    default_log_redactor,
    get_active_logger,
    setup_logging,
    setup_structured_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    shutdown_logging()


@pytest.mark.unit
def test_json_lines_include_extra_fields() -> None:
    stream = io.StringIO()
    logger = setup_logging({"log_level": "DEBUG", "log_format": "json"}, stream=stream)

    logger.info("brief rendered", extra={"format": "md", "out_path": Path("brief.md")})

    event = json.loads(stream.getvalue().strip())
    assert event["level"] == "INFO"
    assert event["logger"] == "decision_brief"
    assert event["message"] == "brief rendered"
    assert event["fields"] == {"format": "md", "out_path": "brief.md"}
    assert event["timestamp"].endswith("Z")


@pytest.mark.unit
def test_child_loggers_reach_the_configured_sink() -> None:
    stream = io.StringIO()
    setup_logging({"log_level": "DEBUG"}, stream=stream)

    build_brief({"question": "Ship?", "risk_tolerance": "high"})

    messages = [json.loads(line)["message"] for line in stream.getvalue().splitlines()]
    assert "scored request" in messages
    assert "assembled brief" in messages


@pytest.mark.unit
def test_level_filtering() -> None:
    stream = io.StringIO()
    logger = setup_logging({"log_level": "WARNING"}, stream=stream)

    logger.info("hidden")
    logger.warning("shown")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["message"] == "shown"


@pytest.mark.unit
def test_text_format_redacts_inline_secrets() -> None:
    stream = io.StringIO()
    logger = setup_logging({"log_level": "INFO", "log_format": "text"}, stream=stream)

    logger.info("calling with token=abc123 and Bearer xyz.987")

    output = stream.getvalue()
    assert "abc123" not in output
    assert "xyz.987" not in output
    assert "***REDACTED***" in output


@pytest.mark.unit
def test_default_redactor_masks_sensitive_keys() -> None:
    redacted = default_log_redactor(
        {"api_key": "sk-abcdefghijklmnop", "note": "key sk-abcdefghijklmnop", "count": 2}
    )

    assert redacted == {
        "api_key": "***REDACTED***",
        "note": "key ***REDACTED***",
        "count": 2,
    }


@pytest.mark.unit
def test_log_file_sink_and_shutdown(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "brief.log"
    handle = setup_structured_logging(
        LoggingConfig(level="INFO", log_file=log_path, log_to_stderr=False)
    )

    handle.logger.info("written")
    assert get_active_logger() is handle.logger

    shutdown_logging(handle)

    assert handle.is_shutdown
    assert get_active_logger() is None
    assert json.loads(log_path.read_text(encoding="utf-8"))["message"] == "written"
    assert not logging.getLogger("decision_brief").handlers


@pytest.mark.unit
def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="unsupported logging level"):
        setup_structured_logging(LoggingConfig(level="LOUD"))


@pytest.mark.unit
def test_json_lines_redact_sensitive_fields_and_exceptions() -> None:
    stream = io.StringIO()
    logger = setup_logging({"log_level": "INFO"}, stream=stream)

    try:
        raise RuntimeError("upstream rejected token=abc123")
    except RuntimeError:
        logger.exception("call failed", extra={"auth_token": "abc123", "attempt": 1})

    event = json.loads(stream.getvalue().strip())
    assert event["fields"] == {"auth_token": "***REDACTED***", "attempt": 1}
    assert "RuntimeError" in event["exception"]
    assert "abc123" not in stream.getvalue()
