"""
decision-brief — unit tests for request validation

File: tests/unit/briefing/test_validation.py

Purpose
- Validate that every violated rule is reported and that valid requests pass.
"""

from __future__ import annotations

import pytest

from decision_brief.briefing.validation import validate_request


@pytest.mark.unit
def test_minimal_request_is_valid() -> None:
    assert validate_request({"question": "Ship v2 now?"}) == []


@pytest.mark.unit
@pytest.mark.parametrize("payload", [None, [], "question", 42])
def test_non_object_input_short_circuits(payload: object) -> None:
    assert validate_request(payload) == ["input must be a JSON object"]


@pytest.mark.unit
def test_all_violations_are_collected() -> None:
    errors = validate_request(
        {
            "question": "   ",
            "constraints": "not-a-list",
            "risk_tolerance": "extreme",
            "time_horizon": "1y",
        }
    )

    assert errors == [
        "question must be a non-empty string",
        "constraints must be an array of strings when provided",
        "risk_tolerance must be one of: low, medium, high",
        "time_horizon must be one of: 24h, 7d, 30d",
    ]


@pytest.mark.unit
def test_enum_fields_are_case_insensitive() -> None:
    payload = {"question": "Pause?", "risk_tolerance": "HIGH", "time_horizon": "24H"}

    assert validate_request(payload) == []


@pytest.mark.unit
def test_constraint_entries_must_be_strings_or_text_objects() -> None:
    ok = {
        "question": "Pause?",
        "constraints": ["budget", {"text": "no downtime"}, {"text": "legal", "severity": "??"}],
    }
    bad = {"question": "Pause?", "constraints": ["budget", {"severity": "high"}, 7]}

    assert validate_request(ok) == []
    assert validate_request(bad) == [
        "constraints entries must be strings or objects with { text, severity? }"
    ]


@pytest.mark.unit
def test_explicit_null_enum_is_rejected() -> None:
    errors = validate_request({"question": "Go?", "risk_tolerance": None})

    assert len(errors) == 1
    assert "risk_tolerance" in errors[0]


@pytest.mark.unit
def test_missing_question_is_reported() -> None:
    assert validate_request({}) == ["question must be a non-empty string"]
