"""
decision-brief — request scoring.

File: src/decision_brief/briefing/scoring.py

Purpose
- Map categorical request fields and normalized constraints to continuous
  scores and derive the direction and action-bias labels.

Functional requirements
- Unknown tolerance/horizon values fall back to the medium/7d defaults.
- Confidence and urgency are clamped, then rounded half-up to 2 places,
  each from unrounded intermediates.
- Labels are derived from unrounded scores.

Non-functional requirements
- Pure and deterministic; float operations keep a fixed evaluation order so
  repeated runs are byte-identical.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from decision_brief.constants import (
    ACT_NOW_URGENCY_THRESHOLD,
    AGGRESSIVE_RISK_THRESHOLD,
    CONFIDENCE_BOUNDS,
    CONSERVATIVE_RISK_THRESHOLD,
    DEFAULT_RISK_TOLERANCE,
    DEFAULT_SEVERITY,
    DEFAULT_TIME_HORIZON,
    HORIZON_SCORES,
    RISK_SCORES,
    SEVERITY_PENALTIES,
    STABILIZE_URGENCY_THRESHOLD,
    URGENCY_BOUNDS,
)
from decision_brief.domain.models import ActionBias, Constraint, Direction, ScoreCard

logger = logging.getLogger(__name__)

RECOMMENDATIONS: dict[Direction, str] = {
    Direction.AGGRESSIVE: (
        "Prioritize speed, accept bounded downside, and add short feedback loops."
    ),
    Direction.CONSERVATIVE: "Prioritize reversibility, guardrail checks, and staged rollout.",
    Direction.BALANCED: "Balance execution speed with explicit rollback and review gates.",
}


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of ``value`` half-up to ``places`` decimals."""

    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def risk_score(risk_tolerance: object = DEFAULT_RISK_TOLERANCE) -> float:
    key = str(risk_tolerance).lower()
    return RISK_SCORES.get(key, RISK_SCORES[DEFAULT_RISK_TOLERANCE])


def horizon_score(time_horizon: object = DEFAULT_TIME_HORIZON) -> float:
    key = str(time_horizon).lower()
    return HORIZON_SCORES.get(key, HORIZON_SCORES[DEFAULT_TIME_HORIZON])


def constraint_penalty(constraints: Sequence[Constraint]) -> float:
    """Sum per-constraint severity penalties in input order."""

    total = 0.0
    for constraint in constraints:
        total += SEVERITY_PENALTIES.get(
            constraint.severity, SEVERITY_PENALTIES[DEFAULT_SEVERITY]
        )
    return total


def confidence_score(horizon: float, penalty: float) -> float:
    """Unrounded, clamped confidence."""

    low, high = CONFIDENCE_BOUNDS
    return clamp(0.45 + horizon * 0.35 - penalty, low, high)


def urgency_score(risk: float, horizon: float, penalty: float) -> float:
    """Unrounded, clamped urgency."""

    low, high = URGENCY_BOUNDS
    return clamp((risk * 0.55) + ((1 - horizon) * 0.35) + (penalty * 0.9), low, high)


def direction_for(risk: float) -> Direction:
    if risk >= AGGRESSIVE_RISK_THRESHOLD:
        return Direction.AGGRESSIVE
    if risk <= CONSERVATIVE_RISK_THRESHOLD:
        return Direction.CONSERVATIVE
    return Direction.BALANCED


def action_bias_for(urgency: float) -> ActionBias:
    if urgency >= ACT_NOW_URGENCY_THRESHOLD:
        return ActionBias.ACT_NOW
    if urgency <= STABILIZE_URGENCY_THRESHOLD:
        return ActionBias.STABILIZE
    return ActionBias.SEQUENCE


def recommendation_for(direction: Direction) -> str:
    return RECOMMENDATIONS[direction]


def score_request(
    risk_tolerance: object,
    time_horizon: object,
    constraints: Sequence[Constraint],
) -> ScoreCard:
    """Compute the full score card for one request."""

    risk = risk_score(risk_tolerance)
    horizon = horizon_score(time_horizon)
    penalty = constraint_penalty(constraints)
    confidence = confidence_score(horizon, penalty)
    urgency = urgency_score(risk, horizon, penalty)
    direction = direction_for(risk)

    card = ScoreCard(
        risk=risk,
        horizon=horizon,
        constraint_penalty=round_half_up(penalty, 2),
        confidence=round_half_up(confidence, 2),
        urgency_score=round_half_up(urgency, 2),
        raw_urgency=urgency,
        direction=direction,
        action_bias=action_bias_for(urgency),
        recommendation=recommendation_for(direction),
        constraints_count=len(constraints),
    )
    logger.debug(
        "scored request",
        extra={
            "risk": card.risk,
            "horizon": card.horizon,
            "constraint_penalty": card.constraint_penalty,
            "confidence": card.confidence,
            "urgency_score": card.urgency_score,
            "direction": card.direction.value,
            "action_bias": card.action_bias.value,
        },
    )
    return card


__all__ = [
    "RECOMMENDATIONS",
    "action_bias_for",
    "clamp",
    "confidence_score",
    "constraint_penalty",
    "direction_for",
    "horizon_score",
    "recommendation_for",
    "risk_score",
    "round_half_up",
    "score_request",
    "urgency_score",
]
