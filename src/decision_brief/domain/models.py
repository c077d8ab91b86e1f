"""Frozen dataclass domain models for decision requests and their derived briefs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

Report = Mapping[str, JSONValue]


class Direction(StrEnum):
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


class ActionBias(StrEnum):
    STABILIZE = "stabilize"
    SEQUENCE = "sequence"
    ACT_NOW = "act_now"


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RecommendationWindow(StrEnum):
    NEXT_24H = "next_24h"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"


@dataclass(frozen=True, slots=True)
class Constraint:
    """Normalized constraint with a sanitized severity."""

    text: str
    severity: str = "medium"

    def to_dict(self) -> dict[str, JSONValue]:
        return {"text": self.text, "severity": self.severity}


@dataclass(frozen=True, slots=True)
class BriefRequest:
    """Echoed request fields plus normalized constraints.

    ``risk_tolerance`` and ``time_horizon`` keep the caller's spelling (only
    missing values are defaulted); lookups lower-case them on use.
    """

    question: str
    risk_tolerance: str
    time_horizon: str
    constraints: tuple[Constraint, ...] = ()


@dataclass(frozen=True, slots=True)
class ScoreCard:
    """Continuous scores and the labels derived from them.

    ``confidence``, ``urgency_score`` and ``constraint_penalty`` are rounded
    for reporting; ``raw_urgency`` keeps the unrounded value the action bias
    was derived from.
    """

    risk: float
    horizon: float
    constraint_penalty: float
    confidence: float
    urgency_score: float
    raw_urgency: float
    direction: Direction
    action_bias: ActionBias
    recommendation: str
    constraints_count: int


@dataclass(frozen=True, slots=True)
class RiskMatrixEntry:
    vector: str
    level: RiskLevel
    mitigation: str

    def to_dict(self) -> dict[str, JSONValue]:
        return {"vector": self.vector, "level": self.level.value, "mitigation": self.mitigation}


@dataclass(frozen=True, slots=True)
class RiskAssessment:
    """Risk matrix together with its deterministic aggregates."""

    entries: tuple[RiskMatrixEntry, ...]
    level_counts: Mapping[str, int]
    overall_level: RiskLevel
    summary: str


@dataclass(frozen=True, slots=True)
class DissentEntry:
    advisor: str
    stance: str
    confidence: float

    def to_dict(self) -> dict[str, JSONValue]:
        return {"advisor": self.advisor, "stance": self.stance, "confidence": self.confidence}


@dataclass(frozen=True, slots=True)
class DissentMetrics:
    advisor_count: int = 0
    variance_score: float = 0


@dataclass(frozen=True, slots=True)
class Brief:
    """Result of one pipeline run: the request it was built from and its report."""

    request: BriefRequest
    report: Report = field(repr=False)


__all__ = [
    "ActionBias",
    "Brief",
    "BriefRequest",
    "Constraint",
    "Direction",
    "DissentEntry",
    "DissentMetrics",
    "JSONScalar",
    "JSONValue",
    "RecommendationWindow",
    "Report",
    "RiskAssessment",
    "RiskLevel",
    "RiskMatrixEntry",
    "ScoreCard",
]
