"""
decision-brief — runtime config loader.

File: src/decision_brief/config/loader.py

Purpose
- Build the effective config from defaults, ``decision_brief.toml``,
  ``DECISION_BRIEF_*`` environment variables, and CLI flags.

Functional requirements
- Precedence: CLI > env > file > defaults; a CLI value of ``None`` means "not given".
- A missing default file is fine; a missing explicit ``--config`` path is an error.
- ``observability.log_file`` is resolved relative to the config file's directory.

Non-functional requirements
- Every layer is validated against the schema; loading is deterministic.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from decision_brief.config.schema import (
    PATH_FIELDS,
    assert_valid_config,
    default_config,
    merge_config,
)

DEFAULT_CONFIG_FILE: Final[str] = "decision_brief.toml"
ENV_PREFIX: Final[str] = "DECISION_BRIEF_"

# Every overridable setting is a string; ``meta.schema_version`` is file-only.
ENV_BINDINGS: Final[dict[str, tuple[str, str]]] = {
    ENV_PREFIX + "OUTPUT_FORMAT": ("output", "format"),
    ENV_PREFIX + "OBSERVABILITY_LOG_LEVEL": ("observability", "log_level"),
    ENV_PREFIX + "OBSERVABILITY_LOG_FORMAT": ("observability", "log_format"),
    ENV_PREFIX + "OBSERVABILITY_LOG_FILE": ("observability", "log_file"),
}


class ConfigLoadError(ValueError):
    """Raised when the config file cannot be read or a CLI override key is malformed."""


def load_config(
    config_path: str | Path | None = None,
    *,
    cli_overrides: Mapping[str, object] | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Load the effective config.

    ``cli_overrides`` maps dotted keys such as ``"output.format"`` to values.
    """

    if config_path is None:
        source = (Path.cwd() / DEFAULT_CONFIG_FILE).resolve()
    else:
        source = Path(config_path).expanduser().resolve()

    layered = assert_valid_config(
        merge_config(default_config(), _read_toml(source, required=config_path is not None))
    )
    for overlay in (
        _env_layer(os.environ if environ is None else environ),
        _cli_layer(cli_overrides or {}),
    ):
        layered = merge_config(layered, overlay)

    return normalize_paths(assert_valid_config(layered), base_dir=source.parent)


def normalize_paths(config: Mapping[str, object], *, base_dir: Path) -> dict[str, Any]:
    """Resolve non-empty path settings against ``base_dir``."""

    resolved = merge_config({}, config)
    for section, key in PATH_FIELDS:
        table = resolved.get(section)
        if not isinstance(table, dict):
            continue
        raw = table.get(key)
        if isinstance(raw, str) and raw:
            candidate = Path(os.path.expandvars(raw)).expanduser()
            if not candidate.is_absolute():
                candidate = base_dir / candidate
            table[key] = Path(os.path.normpath(candidate)).as_posix()
    return resolved


def dump_effective_config(config: Mapping[str, object]) -> str:
    """Stable JSON rendering used by ``--print-config``."""

    return json.dumps(config, sort_keys=True, indent=2, ensure_ascii=False)


def _read_toml(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigLoadError(f"config file not found: {path}")
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigLoadError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigLoadError(f"unable to read config file {path}: {exc}") from exc


def _env_layer(environ: Mapping[str, str]) -> dict[str, Any]:
    overlay: dict[str, Any] = {}
    for env_name, (section, key) in ENV_BINDINGS.items():
        raw = environ.get(env_name)
        if raw is not None:
            overlay.setdefault(section, {})[key] = raw.strip()
    return overlay


def _cli_layer(cli_overrides: Mapping[str, object]) -> dict[str, Any]:
    overlay: dict[str, Any] = {}
    for dotted, value in cli_overrides.items():
        if value is None:
            continue
        section, _, key = dotted.partition(".")
        if not section or not key or "." in key:
            raise ConfigLoadError(f"invalid CLI override key {dotted!r}")
        overlay.setdefault(section, {})[key] = value
    return overlay


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ENV_BINDINGS",
    "ENV_PREFIX",
    "ConfigLoadError",
    "dump_effective_config",
    "load_config",
    "normalize_paths",
]
