"""Search backend integration.

Not part of the translation core: the client only sends the emitted request
body and returns hits. Construction from configuration lives here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from QueryTranslator.backend.client import BackendError, SearchBackendClient
from QueryTranslator.backend.index import (
    BOOKS_INDEX_BODY,
    load_documents,
    read_documents,
    recreate_index,
    wait_for_documents,
)

if TYPE_CHECKING:
    from QueryTranslator.config import AppConfig


def create_backend_client(config: AppConfig) -> SearchBackendClient:
    """Create a backend client from configuration.

    Args:
        config: Application configuration containing backend settings.

    Returns:
        A client the caller must close.
    """
    backend = config.backend
    return SearchBackendClient(
        backend.url,
        index=backend.index,
        timeout=backend.timeout,
        max_attempts=backend.max_attempts,
        auth=backend.credentials(),
    )


__all__ = [
    "BOOKS_INDEX_BODY",
    "BackendError",
    "SearchBackendClient",
    "create_backend_client",
    "load_documents",
    "read_documents",
    "recreate_index",
    "wait_for_documents",
]
