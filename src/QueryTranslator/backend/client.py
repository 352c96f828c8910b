"""Search backend HTTP client.

Talks to an Elasticsearch-compatible REST API with retry/backoff. The client
only moves request bodies and responses; building the query document is the
job of `QueryTranslator.emitters`.
"""

from __future__ import annotations

import random
import time
from typing import Any, Mapping

import requests

from QueryTranslator.utils.log import log

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_ATTEMPTS = 4
BASE_PAUSE = 0.5
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "query-translator/0.1",
    "Accept": "application/json",
}


class BackendError(RuntimeError):
    """Raised when the search backend rejects a request or stays unreachable."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SearchBackendClient:
    """Low-level HTTP client for one index of a search backend.

    The caller owns the client lifecycle: use it as a context manager or call
    `close()` when done.
    """

    def __init__(
        self,
        base_url: str,
        *,
        index: str,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        auth: tuple[str, str] | None = None,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            base_url: Backend root URL, e.g. ``http://localhost:9200``.
            index: Index name all operations target.
            timeout: Per-request timeout in seconds.
            max_attempts: Attempts per request, including the first one.
            auth: Optional basic-auth ``(username, password)``.
        """
        self.base_url = base_url.rstrip("/")
        self.index = index
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self._session = requests.Session()
        self._session.headers.update(HEADERS)
        if auth is not None:
            self._session.auth = auth

    def close(self) -> None:
        """Close the underlying HTTP session and release pooled connections."""
        self._session.close()

    def __enter__(self) -> SearchBackendClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def search(self, document: Mapping[str, Any]) -> list[dict[str, Any]]:
        """Run a search request.

        Args:
            document: Request body, e.g. the output of `compile_query`.

        Returns:
            The ``_source`` record of every hit, in ranking order.

        Raises:
            BackendError: If the backend rejects the request or stays unreachable.
        """
        payload = self._json("POST", "_search", body=document)
        hits = payload.get("hits", {}).get("hits", []) if isinstance(payload, dict) else []
        if not isinstance(hits, list):
            return []
        return [hit.get("_source", {}) for hit in hits if isinstance(hit, dict)]

    def count(self) -> int:
        """Return the number of documents visible to search."""
        payload = self._json("GET", "_count")
        value = payload.get("count") if isinstance(payload, dict) else None
        if isinstance(value, bool) or not isinstance(value, int):
            raise BackendError(f"Unexpected _count response: {payload!r}")
        return value

    def index_exists(self) -> bool:
        """Return True when the index exists."""
        response = self._request("HEAD", "")
        if response.status_code == 404:
            return False
        _raise_for_status(response, "HEAD", self._url(""))
        return True

    def create_index(self, body: Mapping[str, Any]) -> None:
        """Create the index with ``body`` (settings and mappings)."""
        self._json("PUT", "", body=body)
        log.info("Index created: %s", self.index)

    def delete_index(self) -> None:
        """Delete the index."""
        self._json("DELETE", "")
        log.info("Index deleted: %s", self.index)

    def index_document(self, doc_id: str, document: Mapping[str, Any]) -> None:
        """Create or replace one document."""
        self._json("PUT", f"_doc/{doc_id}", body=document)

    def refresh(self) -> None:
        """Make recent writes visible to search."""
        self._json("POST", "_refresh")

    def _url(self, path: str) -> str:
        base = f"{self.base_url}/{self.index}"
        return f"{base}/{path}" if path else base

    def _json(self, method: str, path: str, *, body: Mapping[str, Any] | None = None) -> Any:
        """Send a request and decode the JSON body of a successful response."""
        response = self._request(method, path, body=body)
        _raise_for_status(response, method, self._url(path))
        try:
            return response.json()
        except ValueError as error:
            raise BackendError(f"{method} {self._url(path)} returned invalid JSON") from error

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Mapping[str, Any] | None = None,
    ) -> requests.Response:
        """Issue a request with retry/backoff.

        Retries on timeouts/connection errors and selected HTTP status codes.

        Raises:
            BackendError: When all attempts failed.
        """
        url = self._url(path)
        last_err: Exception | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                log.debug("Backend request attempt %d/%d: %s %s", attempt, self.max_attempts, method, url)
                response = self._session.request(method, url, json=body, timeout=self.timeout)
                if response.status_code not in RETRYABLE_STATUS:
                    return response
                last_err = requests.HTTPError(f"HTTP {response.status_code}", response=response)
            except (requests.Timeout, requests.ConnectionError) as error:
                last_err = error

            if attempt < self.max_attempts:
                delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                log.debug("Backend retry attempt=%d/%d delay=%.2fs error=%s", attempt, self.max_attempts, delay, last_err)
                time.sleep(delay)

        assert last_err is not None
        status_code = getattr(getattr(last_err, "response", None), "status_code", None)
        raise BackendError(
            f"{method} {url} failed after {self.max_attempts} attempts: {last_err}",
            status_code=status_code if isinstance(status_code, int) else None,
        ) from last_err


def _raise_for_status(response: requests.Response, method: str, url: str) -> None:
    """Turn an HTTP error status into `BackendError` with the response excerpt."""
    if response.status_code < 400:
        return
    excerpt = (response.text or "")[:200]
    raise BackendError(
        f"{method} {url} failed: HTTP {response.status_code} {excerpt}".rstrip(),
        status_code=response.status_code,
    )
