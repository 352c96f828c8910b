"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click

from QueryTranslator.backend import create_backend_client
from QueryTranslator.backend.client import SearchBackendClient
from QueryTranslator.cli.commands import ExplainCommand, IndexCommand, SearchCommand, TranslateCommand
from QueryTranslator.config import AppConfig
from QueryTranslator.core.errors import QuerySyntaxError
from QueryTranslator.services import create_translation_service
from QueryTranslator.utils.log import configure_logging, log

T = TypeVar("T")


class CommandRunner:
    """Orchestrates command execution with proper resource management.

    Handles logging configuration, component creation, backend client
    lifecycle, and error handling for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_translate(self, action: str, text: str, *, compact: bool = False) -> str:
        """Translate ``text`` and return the rendered request body."""
        command = TranslateCommand(service=create_translation_service(self.config), compact=compact)
        return self._run(action, lambda: command.execute(text))

    def run_explain(self, action: str, text: str) -> str:
        """Return the bucketed clauses of ``text`` as text."""
        command = ExplainCommand(service=create_translation_service(self.config))
        return self._run(action, lambda: command.execute(text))

    def run_search(self, action: str, text: str) -> str:
        """Translate ``text``, run it against the configured backend and return the rendered hits."""

        def _search(client: SearchBackendClient) -> str:
            return SearchCommand(service=create_translation_service(self.config), client=client).execute(text)

        return self._run(action, lambda: self._with_client(_search))

    def run_index(self, action: str, path: Path) -> None:
        """Recreate the configured index from the documents in ``path``."""
        self._run(action, lambda: self._with_client(lambda client: IndexCommand(client=client).execute(path)))

    def _with_client(self, func: Callable[[SearchBackendClient], T]) -> T:
        with create_backend_client(self.config) as client:
            return func(client)

    def _run(self, action: str, func: Callable[[], T]) -> T:
        """Configure logging, run ``func`` and map failures to click errors.

        Raises:
            click.ClickException: When the query has a syntax error.
            click.Abort: When the command fails for any other reason.
        """
        runtime = self.config.runtime
        configure_logging(
            level=runtime.level,
            action=action,
            log_to_file=runtime.to_file,
            log_dir=runtime.dir,
        )
        try:
            return func()
        except QuerySyntaxError as e:
            log.debug("Syntax error detail: expected=%s position=%d", e.expected, e.position)
            raise click.ClickException(str(e)) from e
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
