"""Briefing pipeline: validation, normalization, scoring, risk, dissent, and assembly."""

from decision_brief.briefing.dissent import build_dissent_map, dissent_metrics
from decision_brief.briefing.errors import (
    USAGE_HINT,
    BriefError,
    BriefValidationError,
    MalformedInputError,
    UsageError,
)
from decision_brief.briefing.normalize import normalize_constraints, sanitize_severity
from decision_brief.briefing.pipeline import build_brief, generate_brief, read_request, to_request
from decision_brief.briefing.report import assemble_report, recommendation_window
from decision_brief.briefing.risk_matrix import (
    RISK_VECTORS,
    assess_risk,
    build_risk_matrix,
    overall_risk_level,
)
from decision_brief.briefing.scoring import (
    constraint_penalty,
    horizon_score,
    risk_score,
    score_request,
)
from decision_brief.briefing.validation import validate_request

__all__ = [
    "RISK_VECTORS",
    "USAGE_HINT",
    "BriefError",
    "BriefValidationError",
    "MalformedInputError",
    "UsageError",
    "assemble_report",
    "assess_risk",
    "build_brief",
    "build_dissent_map",
    "build_risk_matrix",
    "constraint_penalty",
    "dissent_metrics",
    "generate_brief",
    "horizon_score",
    "normalize_constraints",
    "overall_risk_level",
    "read_request",
    "recommendation_window",
    "risk_score",
    "sanitize_severity",
    "score_request",
    "to_request",
    "validate_request",
]
