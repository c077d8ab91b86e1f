"""UI package exports for the CLI and brief rendering."""

from decision_brief.ui.cli import BriefOptions, build_parser, main, run_cli
from decision_brief.ui.render import render, render_both, render_json, render_markdown

__all__ = [
    "BriefOptions",
    "build_parser",
    "main",
    "render",
    "render_both",
    "render_json",
    "render_markdown",
    "run_cli",
]
