"""Command-line front end for decision-brief."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from decision_brief.briefing import BriefError, UsageError, generate_brief, read_request
from decision_brief.config import (
    LOG_LEVELS,
    ConfigLoadError,
    ConfigValidationError,
    dump_effective_config,
    load_config,
)
from decision_brief.constants import OUTPUT_FORMATS
from decision_brief.main import ExitCode
from decision_brief.observability import setup_logging, shutdown_logging
from decision_brief.ui.render import render

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CLIError(RuntimeError):
    """Typed CLI failure with an explicit process exit code."""

    message: str
    exit_code: int = int(ExitCode.CONFIG_ERROR)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class BriefOptions:
    """Resolved options for one brief invocation.

    ``output_format`` is one of ``json`` (default), ``md`` or ``both``;
    ``out_path`` of ``None`` means stdout only.
    """

    input_path: Path
    output_format: str = "json"
    out_path: Path | None = None


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the brief generator."""

    parser = argparse.ArgumentParser(
        prog="decision-brief",
        description=(
            "decision-brief — deterministic advisory brief generator.\n\n"
            "Examples:\n"
            "  decision-brief --input request.json\n"
            "  decision-brief --input request.json --format md\n"
            "  decision-brief --input request.yaml --format both --out brief.json\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--input",
        dest="input_path",
        default=None,
        help="Path to the request document (JSON, or YAML for .yaml/.yml).",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: output.format from config, json out of the box).",
    )
    parser.add_argument(
        "--out",
        dest="out_path",
        default=None,
        help="Also write the rendered brief to this file (overwritten).",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to TOML config (default: ./decision_brief.toml if present).",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override observability.log_level.",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        default=False,
        help="Print the effective configuration as JSON and exit.",
    )
    return parser


# ---------------------------------------------------------------------------
# Entrypoints
# ---------------------------------------------------------------------------


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse argv, generate the brief, and return the process exit code."""

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if not args.print_config and _optional_str(args.input_path) is None:
        print(UsageError(), file=sys.stderr)
        return int(ExitCode.INPUT_REJECTED)

    try:
        config = _load_effective_config(args)
    except CLIError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code

    if args.print_config:
        sys.stdout.write(dump_effective_config(config) + "\n")
        return int(ExitCode.SUCCESS)

    observability = config.get("observability")
    setup_logging(observability if isinstance(observability, Mapping) else None)
    try:
        options = _resolve_options(args, config)
        return _cmd_brief(options)
    except BriefError as exc:
        logger.info("brief failed", extra={"error": type(exc).__name__})
        print(str(exc), file=sys.stderr)
        return int(ExitCode.INPUT_REJECTED)
    finally:
        shutdown_logging()


def main(argv: Sequence[str] | None = None) -> int:
    """Compatibility wrapper for main-module wiring."""

    return run_cli(argv)


# ---------------------------------------------------------------------------
# Command handler
# ---------------------------------------------------------------------------


def _cmd_brief(options: BriefOptions) -> int:
    payload = read_request(options.input_path)
    brief = generate_brief(payload)
    rendered = render(brief, options.output_format)

    if options.out_path is not None:
        options.out_path.write_text(rendered, encoding="utf-8")
    sys.stdout.write(rendered)
    sys.stdout.flush()

    logger.info(
        "brief rendered",
        extra={
            "format": options.output_format,
            "out_path": options.out_path,
            "direction": brief.report.get("direction"),
        },
    )
    return int(ExitCode.SUCCESS)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_effective_config(args: argparse.Namespace) -> dict[str, object]:
    overrides = {
        "output.format": args.output_format,
        "observability.log_level": args.log_level,
    }
    try:
        return load_config(args.config_path, cli_overrides=overrides)
    except (ConfigLoadError, ConfigValidationError) as exc:
        raise CLIError(str(exc)) from exc


def _resolve_options(args: argparse.Namespace, config: Mapping[str, object]) -> BriefOptions:
    output = config.get("output")
    output_format = output.get("format") if isinstance(output, Mapping) else None
    out_path = _optional_str(args.out_path)

    return BriefOptions(
        input_path=Path(args.input_path.strip()),
        output_format=output_format if isinstance(output_format, str) else "json",
        out_path=Path(out_path) if out_path is not None else None,
    )


def _optional_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    return cleaned or None


__all__ = ["BriefOptions", "CLIError", "build_parser", "main", "run_cli"]
