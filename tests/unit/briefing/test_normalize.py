"""Unit tests for constraint normalization."""

from __future__ import annotations

import pytest

from decision_brief.briefing.normalize import normalize_constraints, sanitize_severity
from decision_brief.domain.models import Constraint


@pytest.mark.unit
def test_strings_default_to_medium_severity() -> None:
    assert normalize_constraints(["budget", "headcount"]) == [
        Constraint("budget", "medium"),
        Constraint("headcount", "medium"),
    ]


@pytest.mark.unit
def test_object_severity_is_lowercased_and_sanitized() -> None:
    normalized = normalize_constraints(
        [
            {"text": "no downtime", "severity": "HIGH"},
            {"text": "legal review", "severity": "urgent"},
            {"text": "docs"},
            {"text": "pilot", "severity": "low"},
        ]
    )

    assert [item.severity for item in normalized] == ["high", "medium", "medium", "low"]
    assert [item.text for item in normalized] == ["no downtime", "legal review", "docs", "pilot"]


@pytest.mark.unit
def test_unsupported_entries_are_dropped_without_error() -> None:
    normalized = normalize_constraints(["keep", 5, None, {"severity": "high"}, {"text": 3}])

    assert normalized == [Constraint("keep", "medium")]


@pytest.mark.unit
@pytest.mark.parametrize("raw", [None, "budget", {"text": "x"}, 12])
def test_non_list_input_yields_empty_list(raw: object) -> None:
    assert normalize_constraints(raw) == []


@pytest.mark.unit
def test_sanitize_severity_handles_falsy_and_non_string_values() -> None:
    assert sanitize_severity(None) == "medium"
    assert sanitize_severity("") == "medium"
    assert sanitize_severity(True) == "medium"
    assert sanitize_severity("Low") == "low"
