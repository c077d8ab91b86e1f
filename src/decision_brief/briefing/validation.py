"""
decision-brief — request validation.

File: src/decision_brief/briefing/validation.py

Purpose
- Check the shape and enum constraints of a raw parsed request document.

Functional requirements
- Collect every violated rule; an empty list means the request is valid.
- A non-object document short-circuits with a single error.
- Messages name the offending field so callers can surface them verbatim.

Non-functional requirements
- Pure function, no IO and no logging side effects.
"""

from __future__ import annotations

from collections.abc import Mapping

from decision_brief.constants import RISK_TOLERANCES, TIME_HORIZONS


class _IssueCollector:
    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[str] = []

    def add(self, message: str) -> None:
        self._items.append(message)

    def items(self) -> list[str]:
        return list(self._items)


def validate_request(payload: object) -> list[str]:
    """Return human-readable validation errors for ``payload``."""

    if not isinstance(payload, Mapping):
        return ["input must be a JSON object"]

    issues = _IssueCollector()

    question = payload.get("question")
    if not isinstance(question, str) or not question.strip():
        issues.add("question must be a non-empty string")

    if "constraints" in payload:
        constraints = payload["constraints"]
        if not isinstance(constraints, list):
            issues.add("constraints must be an array of strings when provided")
        elif not all(_is_constraint_entry(item) for item in constraints):
            issues.add("constraints entries must be strings or objects with { text, severity? }")

    if "risk_tolerance" in payload and not _is_enum_member(
        payload["risk_tolerance"], RISK_TOLERANCES
    ):
        issues.add(f"risk_tolerance must be one of: {', '.join(RISK_TOLERANCES)}")

    if "time_horizon" in payload and not _is_enum_member(payload["time_horizon"], TIME_HORIZONS):
        issues.add(f"time_horizon must be one of: {', '.join(TIME_HORIZONS)}")

    return issues.items()


def _is_constraint_entry(item: object) -> bool:
    if isinstance(item, str):
        return True
    return isinstance(item, Mapping) and isinstance(item.get("text"), str)


def _is_enum_member(value: object, allowed: tuple[str, ...]) -> bool:
    return str(value).lower() in allowed


__all__ = ["validate_request"]
