"""Output renderers for command results (console text, JSON)."""

from __future__ import annotations

from QueryTranslator.renderers.console import describe_clause, render_hits, render_query
from QueryTranslator.renderers.json import render_document

__all__ = [
    "describe_clause",
    "render_document",
    "render_hits",
    "render_query",
]
