"""Console text renderers.

Renders a bucketed `Query` and backend hits into human-friendly text.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from QueryTranslator.core.query import Clause, DateRangeClause, Operator, PhraseClause, Query, TermClause


def describe_clause(clause: Clause) -> str:
    """Render one clause as a short label, e.g. ``phrase "cat in the hat"``."""
    if isinstance(clause, TermClause):
        return f"term {clause.text}"
    if isinstance(clause, PhraseClause):
        return f'phrase "{clause.text}"'
    if isinstance(clause, DateRangeClause):
        return f"years {clause.start_year}-{clause.end_year}"
    raise TypeError(f"Unknown clause type: {type(clause).__name__}")


def render_query(query: Query) -> str:
    """Render the clauses of a query grouped by bucket.

    Empty buckets are listed as ``-`` so the output always has three sections.
    """
    lines: list[str] = []
    for operator in Operator:
        clauses = query.bucket(operator)
        lines.append(f"{operator.value}:")
        if not clauses:
            lines.append("   -")
        for clause in clauses:
            lines.append(f"   {describe_clause(clause)}")
    return "\n".join(lines) + "\n"


def render_hits(hits: Iterable[Mapping[str, Any]]) -> str:
    """Render hit records (title, author, year) as a numbered list."""
    lines: list[str] = []
    for idx, hit in enumerate(hits, start=1):
        lines.append(f"{idx}. {hit.get('title', '-')}")
        author = hit.get("author")
        if isinstance(author, (list, tuple)):
            author = ", ".join(str(a) for a in author)
        if author:
            lines.append(f"   Author: {author}")
        if hit.get("publication_year") is not None:
            lines.append(f"   Year: {hit['publication_year']}")
    if not lines:
        return "No hits\n"
    return "\n".join(lines) + "\n"
