"""Fixed three-vector risk matrix and its aggregates."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import Final

from decision_brief.constants import RISK_LEVELS
from decision_brief.domain.models import Direction, RiskAssessment, RiskLevel, RiskMatrixEntry

EXECUTION_SPEED: Final[str] = "execution_speed"
ROLLBACK_COMPLEXITY: Final[str] = "rollback_complexity"
CONSTRAINT_ALIGNMENT: Final[str] = "constraint_alignment"

RISK_VECTORS: Final[tuple[str, ...]] = (EXECUTION_SPEED, ROLLBACK_COMPLEXITY, CONSTRAINT_ALIGNMENT)

MITIGATIONS: Final[dict[str, str]] = {
    EXECUTION_SPEED: "use canary rollout and short feedback intervals",
    ROLLBACK_COMPLEXITY: "prepare explicit rollback runbook before release",
    CONSTRAINT_ALIGNMENT: "convert constraints into measurable acceptance checks",
}

_EXECUTION_LEVELS: Final[dict[Direction, RiskLevel]] = {
    Direction.AGGRESSIVE: RiskLevel.HIGH,
    Direction.BALANCED: RiskLevel.MEDIUM,
    Direction.CONSERVATIVE: RiskLevel.LOW,
}


def build_risk_matrix(direction: Direction, constraints_count: int) -> tuple[RiskMatrixEntry, ...]:
    """Return exactly one entry per risk vector, in fixed order."""

    rollback = RiskLevel.LOW if direction is Direction.CONSERVATIVE else RiskLevel.MEDIUM
    if constraints_count >= 3:
        alignment = RiskLevel.HIGH
    elif constraints_count >= 1:
        alignment = RiskLevel.MEDIUM
    else:
        alignment = RiskLevel.LOW

    levels = {
        EXECUTION_SPEED: _EXECUTION_LEVELS[direction],
        ROLLBACK_COMPLEXITY: rollback,
        CONSTRAINT_ALIGNMENT: alignment,
    }
    return tuple(
        RiskMatrixEntry(vector=vector, level=levels[vector], mitigation=MITIGATIONS[vector])
        for vector in RISK_VECTORS
    )


def count_risk_levels(entries: Sequence[RiskMatrixEntry]) -> dict[str, int]:
    counts = {level: 0 for level in RISK_LEVELS}
    for entry in entries:
        counts[entry.level.value] += 1
    return counts


def overall_risk_level(entries: Sequence[RiskMatrixEntry]) -> RiskLevel:
    """Highest level present; ``low`` for an empty matrix."""

    present = {entry.level for entry in entries}
    for level in (RiskLevel.HIGH, RiskLevel.MEDIUM):
        if level in present:
            return level
    return RiskLevel.LOW


def summarize_risk(entries: Sequence[RiskMatrixEntry]) -> str:
    counts = count_risk_levels(entries)
    overall = overall_risk_level(entries)
    breakdown = ", ".join(f"{counts[level]} {level}" for level in reversed(RISK_LEVELS))
    drivers = [entry.vector for entry in entries if entry.level is overall]
    driver_text = ", ".join(drivers) if drivers else "none"
    return f"overall {overall.value} risk ({breakdown}); driven by {driver_text}"


def assess_risk(direction: Direction, constraints_count: int) -> RiskAssessment:
    entries = build_risk_matrix(direction, constraints_count)
    return RiskAssessment(
        entries=entries,
        level_counts=MappingProxyType(count_risk_levels(entries)),
        overall_level=overall_risk_level(entries),
        summary=summarize_risk(entries),
    )


__all__ = [
    "CONSTRAINT_ALIGNMENT",
    "EXECUTION_SPEED",
    "MITIGATIONS",
    "RISK_VECTORS",
    "ROLLBACK_COMPLEXITY",
    "assess_risk",
    "build_risk_matrix",
    "count_risk_levels",
    "overall_risk_level",
    "summarize_risk",
]
