"""Books index schema and corpus loading helpers."""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from QueryTranslator.backend.client import BackendError, SearchBackendClient
from QueryTranslator.utils.log import log

BOOKS_INDEX_BODY: dict[str, Any] = {
    "mappings": {
        "dynamic": False,
        "properties": {
            "title": {"type": "text", "analyzer": "standard"},
            "author": {"type": "text", "analyzer": "standard"},
            "publication_year": {"type": "integer"},
        },
    },
}


def read_documents(path: Path) -> list[dict[str, Any]]:
    """Read a YAML or JSON list of documents.

    Raises:
        ValueError: If the file is not a list of mappings.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of documents")
    documents: list[dict[str, Any]] = []
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise ValueError(f"{path}[{idx}] must be an object")
        documents.append(dict(item))
    return documents


def recreate_index(client: SearchBackendClient, body: Mapping[str, Any] = BOOKS_INDEX_BODY) -> None:
    """Drop the index if present, then create it from ``body``."""
    if client.index_exists():
        client.delete_index()
    client.create_index(body)


def load_documents(client: SearchBackendClient, documents: Iterable[Mapping[str, Any]]) -> int:
    """Index documents with sequential ids starting at 0.

    Returns:
        Number of documents sent.
    """
    count = 0
    for doc_id, document in enumerate(documents):
        client.index_document(str(doc_id), document)
        count += 1
    log.info("Indexed %d documents into %s", count, client.index)
    return count


def wait_for_documents(
    client: SearchBackendClient,
    expected: int,
    *,
    attempts: int = 6,
    delay: float = 0.5,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Poll until ``expected`` documents are visible to search.

    Indexed documents take a moment to become searchable.

    Args:
        client: Backend client.
        expected: Number of documents that should be visible.
        attempts: Number of polls before giving up.
        delay: Pause between polls in seconds.
        sleep: Sleep function, replaceable in tests.

    Returns:
        The visible document count.

    Raises:
        BackendError: If the count does not reach ``expected`` in time.
    """
    visible = -1
    for attempt in range(1, attempts + 1):
        visible = client.count()
        if visible == expected:
            log.debug("Documents visible after %d poll(s): %d", attempt, visible)
            return visible
        if attempt < attempts:
            log.debug("Waiting for documents: visible=%d expected=%d", visible, expected)
            sleep(delay)
    raise BackendError(f"Expected {expected} documents in {client.index}, found {visible}")
