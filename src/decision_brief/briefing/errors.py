"""Typed failures raised by the briefing pipeline and its CLI front end."""

from __future__ import annotations

from collections.abc import Sequence

USAGE_HINT = (
    "Usage: decision-brief --input <json-file> [--format json|md|both] [--out <file>]"
)


class BriefError(RuntimeError):
    """Base class for terminal briefing failures."""


class UsageError(BriefError):
    """Raised when the required input path is missing."""

    def __init__(self, message: str = USAGE_HINT) -> None:
        super().__init__(message)


class MalformedInputError(BriefError):
    """Raised when the input document cannot be read or parsed."""


class BriefValidationError(BriefError):
    """Raised when a parsed request violates one or more validation rules."""

    def __init__(self, issues: Sequence[str]) -> None:
        self.issues = tuple(issues)
        rendered = "; ".join(self.issues) if self.issues else "unknown validation failure"
        super().__init__(f"Invalid input: {rendered}")


__all__ = [
    "USAGE_HINT",
    "BriefError",
    "BriefValidationError",
    "MalformedInputError",
    "UsageError",
]
