"""CLI package for QueryTranslator command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from QueryTranslator.cli.runner import CommandRunner
from QueryTranslator.cli.ui import cli


def main() -> None:
    """Run QueryTranslator CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
