"""Backend document emitters."""

from __future__ import annotations

from QueryTranslator.emitters.elasticsearch import TEXT_FIELD, YEAR_FIELD, compile_clause, compile_query

__all__ = [
    "TEXT_FIELD",
    "YEAR_FIELD",
    "compile_clause",
    "compile_query",
]
