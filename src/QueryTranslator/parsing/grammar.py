"""Lexical grammar of the query surface syntax.

Surface forms, tried in this order at every clause position:

1. phrase   ``"cat in the hat"``
2. decade   ``1990s`` / ``2010``; only when followed by whitespace or end of input
3. term     any run of characters that are neither whitespace nor ``"``

Each form may carry one leading operator (``+`` must, ``-`` must not) bound to
that clause only. Clauses are separated by optional ASCII whitespace; trailing
whitespace is allowed, leading whitespace is not.

The order is encoded as terminal priorities. With the contextual lexer an
operator is only recognized at the start of a clause, so ``++foo`` reads as
``+`` followed by the term ``+foo`` and ``a+b`` stays one term.
"""

from __future__ import annotations

import re
from typing import Final

# Only ASCII whitespace separates clauses; other Unicode spaces are term characters.
ASCII_WHITESPACE: Final[str] = " \t\n\r\f\v"

_WS: Final[str] = r"[ \t\n\r\f\v]"
_TERM_CHAR: Final[str] = r'[^ \t\n\r\f\v"]'

WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(_WS + "+")

QUOTE: Final[str] = '"'
MUST_SYMBOL: Final[str] = "+"
MUST_NOT_SYMBOL: Final[str] = "-"
DECADE_SUFFIX: Final[str] = "s"

GRAMMAR: Final[str] = rf"""
start: (clause _WS?)*

clause: OPERATOR? (PHRASE | DECADE | TERM)

PHRASE.4: /"(?:{_TERM_CHAR}[^"]*)?"/
DECADE.3: /(?:19|20)[0-9]0s?(?={_WS}|\Z)/
OPERATOR.2: /[+\-]/
TERM.1: /{_TERM_CHAR}+/
_WS: /{_WS}+/
"""

# Human-readable names for grammar terminals, used in syntax error reports.
TERMINAL_NAMES: Final[dict[str, str]] = {
    "PHRASE": "phrase",
    "DECADE": "decade",
    "TERM": "term",
    "OPERATOR": "operator",
    "_WS": "whitespace",
    "$END": "end of input",
}

# Reported when a phrase is still open at the failure point.
CLOSING_QUOTE_NAME: Final[str] = "closing quote"


def split_phrase(body: str) -> list[str]:
    """Split a phrase body into its terms.

    Args:
        body: Text between the quotes of a phrase.

    Returns:
        Terms in order, with any whitespace run treated as one separator.
    """
    return [term for term in WHITESPACE_RE.split(body) if term]
