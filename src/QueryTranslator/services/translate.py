"""Translation service: query string to backend request body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from QueryTranslator.core.query import Query, build_query
from QueryTranslator.emitters.elasticsearch import TEXT_FIELD, YEAR_FIELD, compile_query
from QueryTranslator.parsing.classifier import classify_clauses
from QueryTranslator.parsing.parser import parse_clauses
from QueryTranslator.utils.log import log


@dataclass(frozen=True, slots=True)
class QueryTranslationService:
    """Runs parse -> classify -> build -> emit for one query string per call.

    Instances hold only the target field names, so one instance can be
    shared across threads.
    """

    text_field: str = TEXT_FIELD
    year_field: str = YEAR_FIELD

    def parse(self, text: str) -> Query:
        """Parse ``text`` into a bucketed query.

        Raises:
            QuerySyntaxError: If ``text`` is not a well-formed clause sequence.
        """
        query = build_query(classify_clauses(parse_clauses(text)))
        log.debug(
            "Built query: should=%d must=%d must_not=%d",
            len(query.should),
            len(query.must),
            len(query.must_not),
        )
        return query

    def translate(self, text: str) -> dict[str, Any]:
        """Translate ``text`` into a boolean query request body.

        Raises:
            QuerySyntaxError: If ``text`` is not a well-formed clause sequence.
        """
        return compile_query(self.parse(text), text_field=self.text_field, year_field=self.year_field)


_DEFAULT_SERVICE = QueryTranslationService()


def parse_query(text: str) -> Query:
    """Parse ``text`` into a bucketed query using the default fields."""
    return _DEFAULT_SERVICE.parse(text)


def translate(
    text: str,
    *,
    text_field: str = TEXT_FIELD,
    year_field: str = YEAR_FIELD,
) -> dict[str, Any]:
    """Translate ``text`` into an Elasticsearch boolean query document.

    Args:
        text: Query surface string, e.g. ``'+cat -"in the hat" 1950s'``.
        text_field: Field searched by term and phrase clauses.
        year_field: Integer field filtered by decade clauses.

    Returns:
        ``{"query": {"bool": {...}}}``; see `compile_query`.

    Raises:
        QuerySyntaxError: If ``text`` is not a well-formed clause sequence.
    """
    return QueryTranslationService(text_field=text_field, year_field=year_field).translate(text)
