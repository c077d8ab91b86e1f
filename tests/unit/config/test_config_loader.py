"""Unit tests for config loading precedence and path normalization."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from decision_brief.config import (
    ConfigLoadError,
    ConfigValidationError,
    dump_effective_config,
    load_config,
)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "decision_brief.toml"
    path.write_text(
        "[meta]\nschema_version = 1\n\n"
        '[output]\nformat = "md"\n\n'
        '[observability]\nlog_level = "INFO"\nlog_format = "text"\nlog_file = "logs/brief.log"\n',
        encoding="utf-8",
    )
    return path


@pytest.mark.unit
def test_defaults_when_no_file_exists(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = load_config(environ={})

    assert config["output"]["format"] == "json"
    assert config["observability"]["log_level"] == "WARNING"
    assert config["observability"]["log_file"] == ""


@pytest.mark.unit
def test_file_values_override_defaults(config_file: Path) -> None:
    config = load_config(config_file, environ={})

    assert config["output"]["format"] == "md"
    assert config["observability"]["log_format"] == "text"


@pytest.mark.unit
def test_log_file_is_resolved_relative_to_config_dir(config_file: Path) -> None:
    config = load_config(config_file, environ={})

    expected = (config_file.parent.resolve() / "logs" / "brief.log").as_posix()
    assert config["observability"]["log_file"] == expected


@pytest.mark.unit
def test_precedence_cli_over_env_over_file(config_file: Path) -> None:
    environ = {
        "DECISION_BRIEF_OUTPUT_FORMAT": "both",
        "DECISION_BRIEF_OBSERVABILITY_LOG_LEVEL": "error",
    }

    env_only = load_config(config_file, environ=environ)
    with_cli = load_config(
        config_file,
        environ=environ,
        cli_overrides={"output.format": "json", "observability.log_level": None},
    )

    assert env_only["output"]["format"] == "both"
    assert env_only["observability"]["log_level"] == "ERROR"
    assert with_cli["output"]["format"] == "json"
    assert with_cli["observability"]["log_level"] == "ERROR"


@pytest.mark.unit
def test_schema_version_is_not_env_overridable(config_file: Path) -> None:
    config = load_config(config_file, environ={"DECISION_BRIEF_META_SCHEMA_VERSION": "7"})

    assert config["meta"]["schema_version"] == 1


@pytest.mark.unit
def test_explicit_missing_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError, match="config file not found"):
        load_config(tmp_path / "absent.toml", environ={})


@pytest.mark.unit
def test_invalid_toml_is_an_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[output\nformat = ", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="invalid TOML"):
        load_config(path, environ={})


@pytest.mark.unit
def test_dump_is_sorted_json(config_file: Path) -> None:
    dumped = dump_effective_config(load_config(config_file, environ={}))

    payload = json.loads(dumped)
    assert list(payload) == ["meta", "observability", "output"]
    assert dumped == dump_effective_config(payload)


@pytest.mark.unit
def test_env_log_file_is_stripped_and_resolved(config_file: Path) -> None:
    config = load_config(
        config_file, environ={"DECISION_BRIEF_OBSERVABILITY_LOG_FILE": "  other.log \n"}
    )

    expected = (config_file.parent.resolve() / "other.log").as_posix()
    assert config["observability"]["log_file"] == expected


@pytest.mark.unit
def test_env_values_are_validated(config_file: Path) -> None:
    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(config_file, environ={"DECISION_BRIEF_OBSERVABILITY_LOG_FORMAT": "xml"})

    assert [issue.path for issue in exc_info.value.issues] == ["observability.log_format"]


@pytest.mark.unit
@pytest.mark.parametrize("key", ["format", "output.", "output.format.extra"])
def test_malformed_cli_override_key(config_file: Path, key: str) -> None:
    with pytest.raises(ConfigLoadError, match="invalid CLI override key"):
        load_config(config_file, environ={}, cli_overrides={key: "md"})
