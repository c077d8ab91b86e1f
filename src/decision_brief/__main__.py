"""Module entrypoint for ``python -m decision_brief``."""

from __future__ import annotations

from decision_brief.main import cli_entrypoint

if __name__ == "__main__":
    raise SystemExit(cli_entrypoint())
