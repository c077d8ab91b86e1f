"""
decision-brief — briefing pipeline facade.

File: src/decision_brief/briefing/pipeline.py

Purpose
- Read a request document and run validate -> normalize -> score ->
  {risk matrix, dissent map -> metrics} -> assemble for one request.

Functional requirements
- ``generate_brief`` rejects invalid requests with every violated rule.
- ``build_brief`` skips validation and relies on the permissive
  normalizer/scorer fallbacks.
- JSON documents by default; ``.yaml``/``.yml`` paths are parsed as YAML.

Non-functional requirements
- One pass, no retries, no state kept between calls.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from decision_brief.briefing.dissent import build_dissent_map, dissent_metrics
from decision_brief.briefing.errors import BriefValidationError, MalformedInputError
from decision_brief.briefing.normalize import normalize_constraints
from decision_brief.briefing.report import assemble_report
from decision_brief.briefing.risk_matrix import assess_risk
from decision_brief.briefing.scoring import score_request
from decision_brief.briefing.validation import validate_request
from decision_brief.constants import DEFAULT_RISK_TOLERANCE, DEFAULT_TIME_HORIZON
from decision_brief.domain.models import Brief, BriefRequest

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def read_request(path: str | Path) -> object:
    """Read and parse a request document without validating it."""

    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"unable to read input {source}: {exc}") from exc

    try:
        if source.suffix.lower() in _YAML_SUFFIXES:
            return yaml.safe_load(raw)
        return json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError, RecursionError) as exc:
        raise MalformedInputError(f"unable to parse input {source}: {exc}") from exc


def to_request(payload: object) -> BriefRequest:
    """Echo and default the request fields and normalize its constraints."""

    fields: Mapping[str, object] = payload if isinstance(payload, Mapping) else {}
    return BriefRequest(
        question=_echo(fields.get("question"), ""),
        risk_tolerance=_echo(fields.get("risk_tolerance"), DEFAULT_RISK_TOLERANCE),
        time_horizon=_echo(fields.get("time_horizon"), DEFAULT_TIME_HORIZON),
        constraints=tuple(normalize_constraints(fields.get("constraints"))),
    )


def build_brief(payload: object) -> Brief:
    """Build a brief without validating ``payload`` first."""

    request = to_request(payload)
    scores = score_request(request.risk_tolerance, request.time_horizon, request.constraints)
    risk = assess_risk(scores.direction, scores.constraints_count)
    dissent_map = build_dissent_map(request.risk_tolerance)
    metrics = dissent_metrics(dissent_map)

    report = assemble_report(request, scores, risk, dissent_map, metrics)
    logger.debug(
        "assembled brief",
        extra={
            "direction": scores.direction.value,
            "overall_risk_level": risk.overall_level.value,
            "advisor_count": metrics.advisor_count,
        },
    )
    return Brief(request=request, report=report)


def generate_brief(payload: object) -> Brief:
    """Validate ``payload`` and build its brief.

    Raises ``BriefValidationError`` listing every violated rule.
    """

    issues = validate_request(payload)
    if issues:
        logger.debug("request rejected", extra={"issues": issues})
        raise BriefValidationError(issues)
    return build_brief(payload)


def _echo(value: object, default: str) -> str:
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


__all__ = ["build_brief", "generate_brief", "read_request", "to_request"]
