"""Flat report assembly from the derived pipeline stages."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Final

from decision_brief.domain.models import (
    ActionBias,
    BriefRequest,
    DissentEntry,
    DissentMetrics,
    JSONValue,
    RecommendationWindow,
    Report,
    RiskAssessment,
    ScoreCard,
)

_WINDOWS: Final[dict[ActionBias, RecommendationWindow]] = {
    ActionBias.ACT_NOW: RecommendationWindow.NEXT_24H,
    ActionBias.SEQUENCE: RecommendationWindow.THIS_WEEK,
    ActionBias.STABILIZE: RecommendationWindow.THIS_MONTH,
}


def recommendation_window(action_bias: ActionBias) -> RecommendationWindow:
    return _WINDOWS[action_bias]


def assemble_report(
    request: BriefRequest,
    scores: ScoreCard,
    risk: RiskAssessment,
    dissent_map: Sequence[DissentEntry],
    metrics: DissentMetrics,
) -> Report:
    """Merge every stage into one read-only record.

    Stages are applied in pipeline order; when two stages emit the same key
    the later one wins.
    """

    stages: tuple[Mapping[str, JSONValue], ...] = (
        _request_fields(request),
        _score_fields(scores),
        _risk_fields(risk),
        {"dissentMap": [entry.to_dict() for entry in dissent_map]},
        {
            "advisorCount": metrics.advisor_count,
            "varianceScore": canonical_number(metrics.variance_score),
        },
        {"recommendationWindow": recommendation_window(scores.action_bias).value},
    )

    return merge_stages(stages)


def merge_stages(stages: Iterable[Mapping[str, JSONValue]]) -> Report:
    """Merge stage outputs in order into a read-only record; later keys win."""

    merged: dict[str, JSONValue] = {}
    for stage in stages:
        merged.update(stage)
    return MappingProxyType(merged)


def canonical_number(value: float) -> int | float:
    """Emit integral floats as ints so ``0.0`` renders as ``0`` everywhere."""

    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _request_fields(request: BriefRequest) -> dict[str, JSONValue]:
    return {
        "question": request.question,
        "riskTolerance": request.risk_tolerance,
        "timeHorizon": request.time_horizon,
    }


def _score_fields(scores: ScoreCard) -> dict[str, JSONValue]:
    return {
        "direction": scores.direction.value,
        "confidence": canonical_number(scores.confidence),
        "recommendation": scores.recommendation,
        "constraintsCount": scores.constraints_count,
        "constraintPenalty": canonical_number(scores.constraint_penalty),
        "urgencyScore": canonical_number(scores.urgency_score),
        "actionBias": scores.action_bias.value,
        "riskScore": canonical_number(scores.risk),
        "horizonScore": canonical_number(scores.horizon),
    }


def _risk_fields(risk: RiskAssessment) -> dict[str, JSONValue]:
    return {
        "riskMatrix": [entry.to_dict() for entry in risk.entries],
        "riskLevelCounts": dict(risk.level_counts),
        "overallRiskLevel": risk.overall_level.value,
        "riskSummary": risk.summary,
    }


__all__ = ["assemble_report", "canonical_number", "merge_stages", "recommendation_window"]
