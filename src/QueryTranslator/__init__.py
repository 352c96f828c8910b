"""QueryTranslator: compact search syntax to Elasticsearch boolean queries.

Usage::

    from QueryTranslator import translate

    body = translate('+cat -"in the hat" 1950s')
"""

from __future__ import annotations

from QueryTranslator.core.errors import ClassifierError, QuerySyntaxError
from QueryTranslator.core.query import (
    Clause,
    DateRangeClause,
    Operator,
    PhraseClause,
    Query,
    TermClause,
    build_query,
)
from QueryTranslator.emitters.elasticsearch import compile_query
from QueryTranslator.services.translate import QueryTranslationService, parse_query, translate

__version__ = "0.1.0"

__all__ = [
    "Clause",
    "ClassifierError",
    "DateRangeClause",
    "Operator",
    "PhraseClause",
    "Query",
    "QuerySyntaxError",
    "QueryTranslationService",
    "TermClause",
    "build_query",
    "compile_query",
    "parse_query",
    "translate",
]
