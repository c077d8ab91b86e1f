"""
decision-brief — domain types

File: src/decision_brief/domain/__init__.py

Purpose
- Domain types shared across the pipeline: requests, constraints, scores,
  risk matrix rows, dissent entries, and the assembled brief.

Functional requirements
- Domain objects are immutable and carry no IO side effects.
"""

from decision_brief.domain.models import (
    ActionBias,
    Brief,
    BriefRequest,
    Constraint,
    Direction,
    DissentEntry,
    DissentMetrics,
    JSONValue,
    RecommendationWindow,
    Report,
    RiskAssessment,
    RiskLevel,
    RiskMatrixEntry,
    ScoreCard,
)

__all__ = [
    "ActionBias",
    "Brief",
    "BriefRequest",
    "Constraint",
    "Direction",
    "DissentEntry",
    "DissentMetrics",
    "JSONValue",
    "RecommendationWindow",
    "Report",
    "RiskAssessment",
    "RiskLevel",
    "RiskMatrixEntry",
    "ScoreCard",
]
