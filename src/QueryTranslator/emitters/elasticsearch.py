"""Elasticsearch query compiler.

Compiles the internal, bucketed `Query` into an Elasticsearch boolean query
request body.

Rules
- TermClause      -> match on the text field (``title``)
- PhraseClause    -> match_phrase on the text field
- DateRangeClause -> inclusive range on the year field (``publication_year``)

Sections are emitted in the order should / must / must_not; an empty bucket
is left out of the document entirely. A query without clauses compiles to a
``bool`` node with no sections.
"""

from __future__ import annotations

from typing import Any

from QueryTranslator.core.query import Clause, DateRangeClause, Operator, PhraseClause, Query, TermClause

TEXT_FIELD = "title"
YEAR_FIELD = "publication_year"


def _match(field: str, text: str) -> dict[str, Any]:
    return {"match": {field: {"query": text}}}


def _match_phrase(field: str, text: str) -> dict[str, Any]:
    return {"match_phrase": {field: {"query": text}}}


def _range(field: str, start_year: int, end_year: int) -> dict[str, Any]:
    return {"range": {field: {"gte": start_year, "lte": end_year}}}


def compile_clause(
    clause: Clause,
    *,
    text_field: str = TEXT_FIELD,
    year_field: str = YEAR_FIELD,
) -> dict[str, Any]:
    """Compile one clause into a query fragment.

    Args:
        clause: Typed clause.
        text_field: Field searched by term and phrase clauses.
        year_field: Integer field filtered by date-range clauses.

    Returns:
        A JSON-serializable fragment.

    Raises:
        TypeError: If ``clause`` is not a known clause type.
    """
    if isinstance(clause, TermClause):
        return _match(text_field, clause.text)
    if isinstance(clause, PhraseClause):
        return _match_phrase(text_field, clause.text)
    if isinstance(clause, DateRangeClause):
        return _range(year_field, clause.start_year, clause.end_year)
    raise TypeError(f"Unknown clause type: {type(clause).__name__}")


def compile_query(
    query: Query,
    *,
    text_field: str = TEXT_FIELD,
    year_field: str = YEAR_FIELD,
) -> dict[str, Any]:
    """Compile a bucketed query into a request body.

    Args:
        query: Bucketed query.
        text_field: Field searched by term and phrase clauses.
        year_field: Integer field filtered by date-range clauses.

    Returns:
        ``{"query": {"bool": {...}}}`` with only the non-empty sections.
    """
    bool_node: dict[str, Any] = {}
    for operator in Operator:
        clauses = query.bucket(operator)
        if clauses:
            bool_node[operator.value] = [
                compile_clause(c, text_field=text_field, year_field=year_field) for c in clauses
            ]
    return {"query": {"bool": bool_node}}
