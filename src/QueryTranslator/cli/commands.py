"""Command implementations for QueryTranslator CLI.

Encapsulates the logic of each command, separated from CLI parameter
handling and resource management.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from QueryTranslator.backend.client import SearchBackendClient
from QueryTranslator.backend.index import load_documents, read_documents, recreate_index, wait_for_documents
from QueryTranslator.renderers.console import render_hits, render_query
from QueryTranslator.renderers.json import render_document
from QueryTranslator.services.translate import QueryTranslationService
from QueryTranslator.utils.log import log


@dataclass(slots=True)
class TranslateCommand:
    """Translate a query string and render the request body as JSON."""

    service: QueryTranslationService
    compact: bool = False

    def execute(self, text: str) -> str:
        document = self.service.translate(text)
        log.debug("Translated %r", text)
        return render_document(document, compact=self.compact)


@dataclass(slots=True)
class ExplainCommand:
    """Render the classified clauses of a query, bucket by bucket."""

    service: QueryTranslationService

    def execute(self, text: str) -> str:
        query = self.service.parse(text)
        log.debug("Explained %r", text)
        return render_query(query)


@dataclass(slots=True)
class SearchCommand:
    """Translate a query, run it against the backend and render the hits."""

    service: QueryTranslationService
    client: SearchBackendClient

    def execute(self, text: str) -> str:
        document = self.service.translate(text)
        log.debug("Request body: %s", render_document(document, compact=True))
        hits = self.client.search(document)
        log.info("Fetched %d hits from %s", len(hits), self.client.index)
        return render_hits(hits)


@dataclass(slots=True)
class IndexCommand:
    """Recreate the index and load a document file into it."""

    client: SearchBackendClient
    wait_attempts: int = 6
    wait_delay: float = 0.5

    def execute(self, path: Path) -> int:
        documents = read_documents(path)
        recreate_index(self.client)
        sent = load_documents(self.client, documents)
        self.client.refresh()
        visible = wait_for_documents(
            self.client,
            sent,
            attempts=self.wait_attempts,
            delay=self.wait_delay,
        )
        log.info("Index %s ready with %d documents", self.client.index, visible)
        return visible
