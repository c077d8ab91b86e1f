"""Stable constants shared across the briefing pipeline."""

from __future__ import annotations

from typing import Final

# Schema version for persisted config.
CONFIG_SCHEMA_VERSION: Final[int] = 1

# Accepted enum values for request fields.
RISK_TOLERANCES: Final[tuple[str, ...]] = ("low", "medium", "high")
TIME_HORIZONS: Final[tuple[str, ...]] = ("24h", "7d", "30d")
SEVERITIES: Final[tuple[str, ...]] = ("low", "medium", "high")
OUTPUT_FORMATS: Final[tuple[str, ...]] = ("json", "md", "both")

DEFAULT_RISK_TOLERANCE: Final[str] = "medium"
DEFAULT_TIME_HORIZON: Final[str] = "7d"
DEFAULT_SEVERITY: Final[str] = "medium"
DEFAULT_OUTPUT_FORMAT: Final[str] = "json"

# Score tables.
RISK_SCORES: Final[dict[str, float]] = {"low": 0.35, "medium": 0.6, "high": 0.8}
HORIZON_SCORES: Final[dict[str, float]] = {"24h": 0.45, "7d": 0.6, "30d": 0.75}
SEVERITY_PENALTIES: Final[dict[str, float]] = {"low": 0.03, "medium": 0.05, "high": 0.08}

# Clamp bounds.
CONFIDENCE_BOUNDS: Final[tuple[float, float]] = (0.2, 0.9)
URGENCY_BOUNDS: Final[tuple[float, float]] = (0.1, 0.95)

# Label thresholds.
AGGRESSIVE_RISK_THRESHOLD: Final[float] = 0.7
CONSERVATIVE_RISK_THRESHOLD: Final[float] = 0.45
ACT_NOW_URGENCY_THRESHOLD: Final[float] = 0.67
STABILIZE_URGENCY_THRESHOLD: Final[float] = 0.42

# Risk levels ordered from least to most severe.
RISK_LEVELS: Final[tuple[str, ...]] = ("low", "medium", "high")

__all__ = [
    "ACT_NOW_URGENCY_THRESHOLD",
    "AGGRESSIVE_RISK_THRESHOLD",
    "CONFIDENCE_BOUNDS",
    "CONFIG_SCHEMA_VERSION",
    "CONSERVATIVE_RISK_THRESHOLD",
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_RISK_TOLERANCE",
    "DEFAULT_SEVERITY",
    "DEFAULT_TIME_HORIZON",
    "HORIZON_SCORES",
    "OUTPUT_FORMATS",
    "RISK_LEVELS",
    "RISK_SCORES",
    "RISK_TOLERANCES",
    "SEVERITIES",
    "SEVERITY_PENALTIES",
    "STABILIZE_URGENCY_THRESHOLD",
    "TIME_HORIZONS",
    "URGENCY_BOUNDS",
]
