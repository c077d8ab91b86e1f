"""
decision-brief — unit tests for report assembly

File: tests/unit/briefing/test_report.py

Purpose
- Validate stage merging, key order, number canonicalization, and the
  recommendation window mapping.
"""

from __future__ import annotations

import pytest

from decision_brief.briefing.pipeline import build_brief
from decision_brief.briefing.report import canonical_number, merge_stages, recommendation_window
from decision_brief.domain.models import ActionBias, RecommendationWindow

REPORT_KEYS = [
    "question",
    "riskTolerance",
    "timeHorizon",
    "direction",
    "confidence",
    "recommendation",
    "constraintsCount",
    "constraintPenalty",
    "urgencyScore",
    "actionBias",
    "riskScore",
    "horizonScore",
    "riskMatrix",
    "riskLevelCounts",
    "overallRiskLevel",
    "riskSummary",
    "dissentMap",
    "advisorCount",
    "varianceScore",
    "recommendationWindow",
]


@pytest.mark.unit
def test_merge_stages_later_keys_win() -> None:
    merged = merge_stages([{"a": 1, "b": 2}, {"b": 3, "c": 4}])

    assert dict(merged) == {"a": 1, "b": 3, "c": 4}
    assert list(merged) == ["a", "b", "c"]


@pytest.mark.unit
def test_merged_report_is_read_only() -> None:
    merged = merge_stages([{"a": 1}])

    with pytest.raises(TypeError):
        merged["a"] = 2  # type: ignore[index]


@pytest.mark.unit
@pytest.mark.parametrize(
    ("bias", "window"),
    [
        (ActionBias.ACT_NOW, RecommendationWindow.NEXT_24H),
        (ActionBias.SEQUENCE, RecommendationWindow.THIS_WEEK),
        (ActionBias.STABILIZE, RecommendationWindow.THIS_MONTH),
    ],
)
def test_recommendation_window_mapping(bias: ActionBias, window: RecommendationWindow) -> None:
    assert recommendation_window(bias) is window


@pytest.mark.unit
def test_canonical_number_drops_integral_fraction() -> None:
    assert canonical_number(0.0) == 0
    assert isinstance(canonical_number(0.0), int)
    assert canonical_number(0.61) == 0.61
    assert canonical_number(2) == 2


@pytest.mark.unit
def test_report_key_order_is_fixed() -> None:
    brief = build_brief({"question": "Ship v2 now?", "risk_tolerance": "high", "time_horizon": "24h"})

    assert list(brief.report) == REPORT_KEYS


@pytest.mark.unit
def test_report_for_high_tolerance_request() -> None:
    report = build_brief(
        {"question": "Ship v2 now?", "risk_tolerance": "high", "time_horizon": "24h"}
    ).report

    assert report["direction"] == "aggressive"
    assert report["confidence"] == 0.61
    assert report["urgencyScore"] == 0.63
    assert report["actionBias"] == "sequence"
    assert report["constraintPenalty"] == 0
    assert isinstance(report["constraintPenalty"], int)
    assert report["riskScore"] == 0.8
    assert report["horizonScore"] == 0.45
    assert report["riskLevelCounts"] == {"low": 1, "medium": 1, "high": 1}
    assert report["overallRiskLevel"] == "high"
    assert report["riskSummary"] == (
        "overall high risk (1 high, 1 medium, 1 low); driven by execution_speed"
    )
    assert report["advisorCount"] == 2
    assert report["varianceScore"] == 0.06
    assert report["recommendationWindow"] == "this_week"


@pytest.mark.unit
def test_report_for_low_tolerance_request_with_constraints() -> None:
    report = build_brief(
        {
            "question": "Migrate db?",
            "risk_tolerance": "low",
            "time_horizon": "30d",
            "constraints": ["a", "b", "c"],
        }
    ).report

    assert report["direction"] == "conservative"
    assert report["constraintsCount"] == 3
    assert report["constraintPenalty"] == 0.15
    assert report["actionBias"] == "stabilize"
    assert report["recommendationWindow"] == "this_month"
    assert [entry["level"] for entry in report["riskMatrix"]] == ["low", "low", "high"]  # type: ignore[index,union-attr]
    assert report["riskLevelCounts"] == {"low": 2, "medium": 0, "high": 1}
    assert report["overallRiskLevel"] == "high"
    assert report["varianceScore"] == 0.105
