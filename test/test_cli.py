"""CLI tests using click's CliRunner (no network)."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryTranslator.backend.client import BackendError, SearchBackendClient
from QueryTranslator.cli import cli


class TestTranslateCommand(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_prints_json_document(self) -> None:
        result = self.runner.invoke(cli, ["translate", '+cat "in the hat" 1950s'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            json.loads(result.stdout),
            {
                "query": {
                    "bool": {
                        "should": [
                            {"match_phrase": {"title": {"query": "in the hat"}}},
                            {"range": {"publication_year": {"gte": 1950, "lte": 1959}}},
                        ],
                        "must": [{"match": {"title": {"query": "cat"}}}],
                    }
                }
            },
        )

    def test_compact_output_is_single_line(self) -> None:
        result = self.runner.invoke(cli, ["translate", "--compact", "cat"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout.strip(), '{"query":{"bool":{"should":[{"match":{"title":{"query":"cat"}}}]}}}')

    def test_query_starting_with_minus_after_double_dash(self) -> None:
        result = self.runner.invoke(cli, ["translate", "--", "-cat"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("must_not", json.loads(result.stdout)["query"]["bool"])

    def test_syntax_error_exits_with_message(self) -> None:
        result = self.runner.invoke(cli, ["translate", '"cat'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid query at position 4", result.output)
        self.assertIn("expected one of: closing quote", result.output)

    def test_custom_config_fields(self) -> None:
        with self.runner.isolated_filesystem():
            Path("custom.yml").write_text("fields:\n  text: name\n  year: year\n", encoding="utf-8")
            result = self.runner.invoke(cli, ["--config", "custom.yml", "translate", "1990s"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            json.loads(result.stdout)["query"]["bool"]["should"],
            [{"range": {"year": {"gte": 1990, "lte": 1999}}}],
        )


class TestExplainCommand(unittest.TestCase):
    def test_lists_buckets(self) -> None:
        result = CliRunner().invoke(cli, ["explain", '+cat -"in the hat"'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("should:", result.output)
        self.assertIn("must:", result.output)
        self.assertIn("term cat", result.output)
        self.assertIn('phrase "in the hat"', result.output)

    def test_output_does_not_depend_on_log_level(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("quiet.yml").write_text("log:\n  level: WARNING\n", encoding="utf-8")
            result = runner.invoke(cli, ["--config", "quiet.yml", "explain", "+cat"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("must:\n   term cat\n", result.stdout)


class TestSearchCommand(unittest.TestCase):
    def test_prints_hits(self) -> None:
        hits = [{"title": "The Cat in the Hat", "author": ["Theodor Geisel"], "publication_year": 1957}]
        with patch.object(SearchBackendClient, "search", return_value=hits) as search:
            result = CliRunner().invoke(cli, ["search", "cat 1950s"])

        self.assertEqual(result.exit_code, 0, result.output)
        search.assert_called_once()
        document = search.call_args.args[0]
        self.assertEqual(len(document["query"]["bool"]["should"]), 2)
        self.assertIn("Fetched 1 hits", result.output)
        self.assertIn("The Cat in the Hat", result.output)

    def test_hits_printed_when_info_logs_are_silenced(self) -> None:
        hits = [{"title": "Cat Sense", "publication_year": 2013}]
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("quiet.yml").write_text("log:\n  level: WARNING\n", encoding="utf-8")
            with patch.object(SearchBackendClient, "search", return_value=hits):
                result = runner.invoke(cli, ["--config", "quiet.yml", "search", "cat"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("1. Cat Sense\n   Year: 2013\n", result.stdout)
        self.assertNotIn("Fetched", result.output)

    def test_backend_failure_aborts(self) -> None:
        with patch.object(SearchBackendClient, "search", side_effect=BackendError("unreachable")):
            result = CliRunner().invoke(cli, ["search", "cat"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("unreachable", result.output)


if __name__ == "__main__":
    unittest.main()
