"""Tests for the search backend HTTP client (no network)."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import requests

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryTranslator.backend import BackendError, SearchBackendClient, create_backend_client
from QueryTranslator.config import AppConfig, BackendConfig


def _response(status_code: int, payload: object = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    response.encoding = "utf-8"
    return response


class TestSearchBackendClient(unittest.TestCase):
    def setUp(self) -> None:
        self.client = SearchBackendClient("http://es.test:9200/", index="books", max_attempts=3)
        self.addCleanup(self.client.close)
        sleep_patcher = patch("QueryTranslator.backend.client.time.sleep")
        self.sleep = sleep_patcher.start()
        self.addCleanup(sleep_patcher.stop)

    def test_search_returns_sources_in_order(self) -> None:
        payload = {"hits": {"hits": [{"_source": {"title": "A"}}, {"_source": {"title": "B"}}]}}
        document = {"query": {"bool": {}}}
        with patch.object(self.client._session, "request", return_value=_response(200, payload)) as request:
            hits = self.client.search(document)

        self.assertEqual(hits, [{"title": "A"}, {"title": "B"}])
        request.assert_called_once_with(
            "POST", "http://es.test:9200/books/_search", json=document, timeout=self.client.timeout
        )

    def test_retry_on_unavailable_then_success(self) -> None:
        responses = [_response(503), _response(200, {"count": 3})]
        with patch.object(self.client._session, "request", side_effect=responses) as request:
            self.assertEqual(self.client.count(), 3)
        self.assertEqual(request.call_count, 2)
        self.assertEqual(self.sleep.call_count, 1)

    def test_retry_on_connection_error(self) -> None:
        responses = [requests.ConnectionError("refused"), _response(200, {"count": 0})]
        with patch.object(self.client._session, "request", side_effect=responses):
            self.assertEqual(self.client.count(), 0)

    def test_exhausted_retries_raise_backend_error(self) -> None:
        with patch.object(self.client._session, "request", return_value=_response(503)) as request:
            with self.assertRaises(BackendError) as ctx:
                self.client.count()
        self.assertEqual(request.call_count, 3)
        self.assertEqual(self.sleep.call_count, 2)
        self.assertEqual(ctx.exception.status_code, 503)

    def test_client_error_is_not_retried(self) -> None:
        body = {"error": {"type": "parsing_exception"}}
        with patch.object(self.client._session, "request", return_value=_response(400, body)) as request:
            with self.assertRaises(BackendError) as ctx:
                self.client.search({"query": {}})
        self.assertEqual(request.call_count, 1)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn("parsing_exception", str(ctx.exception))

    def test_index_exists(self) -> None:
        with patch.object(self.client._session, "request", return_value=_response(404)):
            self.assertFalse(self.client.index_exists())
        with patch.object(self.client._session, "request", return_value=_response(200)):
            self.assertTrue(self.client.index_exists())

    def test_index_document_uses_doc_path(self) -> None:
        with patch.object(self.client._session, "request", return_value=_response(201, {"result": "created"})) as request:
            self.client.index_document("0", {"title": "A"})
        request.assert_called_once_with(
            "PUT", "http://es.test:9200/books/_doc/0", json={"title": "A"}, timeout=self.client.timeout
        )

    def test_unexpected_count_payload(self) -> None:
        with patch.object(self.client._session, "request", return_value=_response(200, {"count": "3"})):
            with self.assertRaises(BackendError):
                self.client.count()

    def test_invalid_json_body(self) -> None:
        response = _response(200)
        response._content = b"<html>"
        with patch.object(self.client._session, "request", return_value=response):
            with self.assertRaises(BackendError):
                self.client.search({})


class TestCreateBackendClient(unittest.TestCase):
    def test_client_built_from_config(self) -> None:
        config = AppConfig(backend=BackendConfig(url="https://search.test", index="books", max_attempts=2))
        with patch.object(BackendConfig, "credentials", return_value=("u", "p")):
            client = create_backend_client(config)
        self.addCleanup(client.close)
        self.assertEqual(client.base_url, "https://search.test")
        self.assertEqual(client.index, "books")
        self.assertEqual(client.max_attempts, 2)
        self.assertEqual(client._session.auth, ("u", "p"))


if __name__ == "__main__":
    unittest.main()
