"""Brief rendering for decision-brief output.

File: src/decision_brief/ui/render.py

Purpose
- Serialize an assembled brief as JSON, as a Markdown document, or as JSON
  with the Markdown embedded under ``markdown``.

Functional requirements
- JSON keeps report key order and uses 2-space indentation.
- Markdown headings, ordering, and bullet punctuation are fixed; downstream
  tooling parses them.
- Numbers render identically in both forms.

Non-functional requirements
- No dependencies beyond the standard library.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final

from decision_brief.constants import DEFAULT_RISK_TOLERANCE, DEFAULT_TIME_HORIZON

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from decision_brief.domain.models import Brief, Constraint, JSONValue

ACTION_WINDOW_LINES: Final[tuple[str, ...]] = (
    "- Next 24h: validate assumptions with one low-cost experiment.",
    "- Next 7d: commit or rollback based on explicit success thresholds.",
)


def render_json(brief: Brief) -> str:
    """Render the report as indented JSON without a trailing newline."""

    return _dump(dict(brief.report))


def render_both(brief: Brief) -> str:
    """Render the report as JSON with the Markdown document embedded."""

    payload: dict[str, JSONValue] = dict(brief.report)
    payload["markdown"] = render_markdown(brief)
    return _dump(payload)


def render_markdown(brief: Brief) -> str:
    """Render the fixed Markdown brief skeleton."""

    report = brief.report
    lines: list[str] = [
        "# Decision Brief",
        "",
        "## Question",
        _text(report.get("question")) or "(missing question)",
        "",
        "## Direction",
        f"- **Mode:** {_text(report.get('direction'))}",
        f"- **Confidence:** {_text(report.get('confidence'))}",
        f"- **Risk tolerance:** {_text(report.get('riskTolerance')) or DEFAULT_RISK_TOLERANCE}",
        f"- **Time horizon:** {_text(report.get('timeHorizon')) or DEFAULT_TIME_HORIZON}",
        f"- **Urgency score:** {_text(report.get('urgencyScore', 0))}",
        f"- **Action bias:** {_text(report.get('actionBias', 'sequence'))}",
        "",
        "## Constraints",
        *_constraint_lines(brief.request.constraints),
        "",
        "## Recommendation",
        _text(report.get("recommendation")),
        "",
        "## Risk matrix",
        *_bullets(
            _records(report.get("riskMatrix")),
            "{vector}: {level} (mitigation: {mitigation})",
        ),
        "",
        "## Dissent map",
        f"- advisor count: {_text(report.get('advisorCount', 0))}",
        f"- variance score: {_text(report.get('varianceScore', 0))}",
        *_bullets(
            _records(report.get("dissentMap")),
            "{advisor}: {stance} (confidence: {confidence})",
        ),
        "",
        "## Action windows",
        *ACTION_WINDOW_LINES,
        "",
    ]
    return "\n".join(lines)


def render(brief: Brief, output_format: str) -> str:
    """Render ``brief`` in ``output_format``; anything unknown renders as JSON."""

    if output_format == "md":
        return render_markdown(brief)
    if output_format == "both":
        return render_both(brief)
    return render_json(brief)


def _dump(payload: Mapping[str, JSONValue]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _constraint_lines(constraints: Sequence[Constraint]) -> list[str]:
    if not constraints:
        return ["- none"]
    return [f"- {item.text} [severity: {item.severity}]" for item in constraints]


def _bullets(records: Sequence[Mapping[str, JSONValue]], template: str) -> list[str]:
    if not records:
        return ["- none"]
    return [
        "- " + template.format_map({key: _text(value) for key, value in record.items()})
        for record in records
    ]


def _records(value: object) -> list[Mapping[str, JSONValue]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "ACTION_WINDOW_LINES",
    "render",
    "render_both",
    "render_json",
    "render_markdown",
]
