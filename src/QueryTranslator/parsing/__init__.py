"""Query surface syntax: grammar, parser and clause classifier."""

from __future__ import annotations

from QueryTranslator.parsing.classifier import classify_clause, classify_clauses, operator_from_symbol
from QueryTranslator.parsing.parser import ClauseKind, RawClause, parse_clauses, parse_tree

__all__ = [
    "ClauseKind",
    "RawClause",
    "parse_tree",
    "parse_clauses",
    "classify_clause",
    "classify_clauses",
    "operator_from_symbol",
]
