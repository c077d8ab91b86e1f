"""Constraint normalization into canonical ``Constraint`` records."""

from __future__ import annotations

from collections.abc import Mapping

from decision_brief.constants import DEFAULT_SEVERITY, SEVERITIES
from decision_brief.domain.models import Constraint


def normalize_constraints(raw_constraints: object) -> list[Constraint]:
    """Convert raw constraint entries into normalized constraints.

    Permissive by contract: a non-list yields ``[]`` and unsupported entries
    are dropped without error. Input order is preserved.
    """

    if not isinstance(raw_constraints, list):
        return []

    normalized: list[Constraint] = []
    for entry in raw_constraints:
        if isinstance(entry, str):
            normalized.append(Constraint(text=entry, severity=DEFAULT_SEVERITY))
            continue
        if isinstance(entry, Mapping) and isinstance(entry.get("text"), str):
            normalized.append(
                Constraint(text=entry["text"], severity=sanitize_severity(entry.get("severity")))
            )
    return normalized


def sanitize_severity(value: object) -> str:
    """Lower-case ``value`` and fall back to the default for anything unknown."""

    severity = str(value or DEFAULT_SEVERITY).lower()
    return severity if severity in SEVERITIES else DEFAULT_SEVERITY


__all__ = ["normalize_constraints", "sanitize_severity"]
