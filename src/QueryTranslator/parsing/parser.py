"""Clause parser.

Turns a query string into an ordered list of raw clauses. Each raw clause
carries the operator symbol as written (or None) and exactly one payload
(phrase, decade or term). No semantic interpretation happens here; see
`QueryTranslator.parsing.classifier` for that.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from lark import Lark, Token, Transformer, Tree, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from QueryTranslator.core.errors import QuerySyntaxError
from QueryTranslator.parsing.grammar import (
    CLOSING_QUOTE_NAME,
    DECADE_SUFFIX,
    GRAMMAR,
    QUOTE,
    TERMINAL_NAMES,
    split_phrase,
)
from QueryTranslator.utils.log import log


class ClauseKind(Enum):
    """Payload kind of a parsed clause."""

    PHRASE = "phrase"
    DECADE = "decade"
    TERM = "term"


@dataclass(frozen=True, slots=True)
class RawClause:
    """One parsed clause, before classification.

    Attributes:
        operator: Operator symbol as written (``+``/``-``), or None.
        kind: Payload kind.
        value: Term text, phrase terms joined by single spaces, or the four
            decade digits without the ``s`` suffix.
    """

    operator: str | None
    kind: ClauseKind
    value: str


@lru_cache(maxsize=1)
def _query_parser() -> Lark:
    """Build the LALR parser once; the instance is safe to share."""
    return Lark(GRAMMAR, parser="lalr", lexer="contextual")


@v_args(inline=True)
class _RawClauseCollector(Transformer):
    """Collapse the lark parse tree into `RawClause` items."""

    def start(self, *clauses: RawClause) -> list[RawClause]:
        return list(clauses)

    def clause(self, *tokens: Token) -> RawClause:
        operator = str(tokens[0]) if len(tokens) == 2 else None
        payload = tokens[-1]
        if payload.type == "PHRASE":
            return RawClause(operator, ClauseKind.PHRASE, " ".join(split_phrase(payload[1:-1])))
        if payload.type == "DECADE":
            return RawClause(operator, ClauseKind.DECADE, payload.removesuffix(DECADE_SUFFIX))
        return RawClause(operator, ClauseKind.TERM, str(payload))


def parse_tree(text: str) -> Tree:
    """Parse ``text`` into the lark parse tree.

    Args:
        text: Query surface string.

    Returns:
        Tree rooted at ``start`` with one ``clause`` child per clause.

    Raises:
        TypeError: If ``text`` is not a string.
        QuerySyntaxError: If ``text`` is not a well-formed clause sequence.
    """
    if not isinstance(text, str):
        raise TypeError(f"Query must be a string, got {type(text).__name__}")
    try:
        return _query_parser().parse(text)
    except UnexpectedInput as error:
        raise _syntax_error(text, error) from error


def parse_clauses(text: str) -> list[RawClause]:
    """Parse ``text`` into raw clauses in left-to-right order.

    Raises:
        TypeError: If ``text`` is not a string.
        QuerySyntaxError: If ``text`` is not a well-formed clause sequence.
    """
    clauses = _RawClauseCollector().transform(parse_tree(text))
    log.debug("Parsed %d clauses from %r", len(clauses), text)
    return clauses


def _syntax_error(text: str, error: UnexpectedInput) -> QuerySyntaxError:
    """Translate a lark failure into a position + expected-alternatives error.

    A quote is only ever rejected as the start of a phrase that cannot match,
    so the error points into the phrase instead of at its opening quote.
    """
    if isinstance(error, (UnexpectedToken, UnexpectedEOF)) and _is_end(error):
        position = len(text)
    else:
        position = error.pos_in_stream if error.pos_in_stream is not None else len(text)
    position = min(max(position, 0), len(text))

    if position < len(text) and text[position] == QUOTE:
        return _phrase_error(text, position)

    names = [TERMINAL_NAMES.get(name, name.lower()) for name in _alternatives(error)]
    return QuerySyntaxError(text, position, names)


def _is_end(error: UnexpectedInput) -> bool:
    if isinstance(error, UnexpectedEOF):
        return True
    return error.token.type == "$END"


def _alternatives(error: UnexpectedInput) -> set[str]:
    """Terminal names the parser would have accepted at the failure point.

    The lexer only reports terminals it can match, so end of input is added
    when the parser state accepts it.
    """
    if isinstance(error, UnexpectedCharacters):
        tried = error.allowed or set()
    else:
        tried = error.expected or set()
    names = {str(getattr(terminal, "name", terminal)) for terminal in tried}
    interactive = getattr(error, "interactive_parser", None)
    if interactive is not None and "$END" in interactive.accepts():
        names.add("$END")
    return names


def _phrase_error(text: str, start: int) -> QuerySyntaxError:
    """Report a phrase opened at ``start`` that does not form a valid phrase."""
    if text.find(QUOTE, start + 1) < 0:
        return QuerySyntaxError(text, len(text), [CLOSING_QUOTE_NAME])
    # Closed, so the body must start with whitespace.
    return QuerySyntaxError(text, start + 1, [TERMINAL_NAMES["TERM"], CLOSING_QUOTE_NAME])
