"""
decision-brief config package public API.

File: src/decision_brief/config/__init__.py

Purpose
- Export config loading/validation entrypoints and public error types.

Functional requirements
- Support loading from ``decision_brief.toml`` + ``DECISION_BRIEF_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from decision_brief.config.loader import (
    DEFAULT_CONFIG_FILE,
    ENV_BINDINGS,
    ENV_PREFIX,
    ConfigLoadError,
    dump_effective_config,
    load_config,
    normalize_paths,
)
from decision_brief.config.schema import (
    DEFAULT_CONFIG,
    LOG_FORMATS,
    LOG_LEVELS,
    PATH_FIELDS,
    BriefConfig,
    ConfigSchemaVersion,
    ConfigValidationError,
    ConfigValidationIssue,
    ConfigValidationResult,
    assert_valid_config,
    default_config,
    merge_config,
    migration_guidance,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE",
    "ENV_BINDINGS",
    "ENV_PREFIX",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "PATH_FIELDS",
    "BriefConfig",
    "ConfigLoadError",
    "ConfigSchemaVersion",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "assert_valid_config",
    "default_config",
    "dump_effective_config",
    "load_config",
    "merge_config",
    "migration_guidance",
    "normalize_paths",
    "validate_config",
]
