"""Scripted advisor dissent keyed by risk tolerance, plus descriptive metrics."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Final

from decision_brief.briefing.scoring import round_half_up
from decision_brief.constants import DEFAULT_RISK_TOLERANCE
from decision_brief.domain.models import DissentEntry, DissentMetrics

_DISSENT_TABLE: Final[dict[str, tuple[DissentEntry, DissentEntry]]] = {
    "high": (
        DissentEntry("speed-advocate", "push launch in this cycle", 0.74),
        DissentEntry("risk-guardian", "allow launch only with kill-switch and canary", 0.62),
    ),
    "low": (
        DissentEntry(
            "risk-guardian", "defer launch until reversibility checks are complete", 0.76
        ),
        DissentEntry("speed-advocate", "ship a reduced scope behind a flag", 0.55),
    ),
    "medium": (
        DissentEntry("balance-operator", "ship progressively with rollback guardrails", 0.71),
        DissentEntry("speed-advocate", "optimize for iteration speed after first canary", 0.58),
    ),
}


def build_dissent_map(risk_tolerance: object) -> tuple[DissentEntry, ...]:
    """Look up the two advisor stances for ``risk_tolerance``.

    Anything other than ``low`` or ``high`` (case-insensitive) gets the
    medium stances.
    """

    key = str(risk_tolerance or DEFAULT_RISK_TOLERANCE).lower()
    return _DISSENT_TABLE.get(key, _DISSENT_TABLE[DEFAULT_RISK_TOLERANCE])


def dissent_metrics(entries: Sequence[DissentEntry]) -> DissentMetrics:
    """Count advisors with a finite confidence and their population std-dev."""

    confidences = [
        float(entry.confidence)
        for entry in entries
        if _is_number(entry.confidence) and math.isfinite(entry.confidence)
    ]
    if not confidences:
        return DissentMetrics(advisor_count=0, variance_score=0)

    mean = 0.0
    for value in confidences:
        mean += value
    mean /= len(confidences)

    variance = 0.0
    for value in confidences:
        variance += (value - mean) ** 2
    variance /= len(confidences)

    return DissentMetrics(
        advisor_count=len(confidences),
        variance_score=round_half_up(math.sqrt(variance), 3),
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ["build_dissent_map", "dissent_metrics"]
