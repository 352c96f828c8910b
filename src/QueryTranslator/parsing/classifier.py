"""Clause classifier.

Maps raw parsed clauses to typed clauses: operator symbol to `Operator`, payload
kind to clause variant. The mapping is total over parser output; anything it
cannot map is a grammar/classifier mismatch and raises `ClassifierError`.
"""

from __future__ import annotations

from typing import Iterable

from QueryTranslator.core.errors import ClassifierError
from QueryTranslator.core.query import Clause, DateRangeClause, Operator, PhraseClause, TermClause
from QueryTranslator.parsing.grammar import MUST_NOT_SYMBOL, MUST_SYMBOL
from QueryTranslator.parsing.parser import ClauseKind, RawClause


_OPERATOR_SYMBOLS: dict[str | None, Operator] = {
    MUST_SYMBOL: Operator.MUST,
    MUST_NOT_SYMBOL: Operator.MUST_NOT,
    None: Operator.SHOULD,
}


def operator_from_symbol(symbol: str | None) -> Operator:
    """Resolve an operator symbol.

    Args:
        symbol: ``+``, ``-`` or None when the clause has no prefix.

    Returns:
        The matching operator tag.

    Raises:
        ClassifierError: If ``symbol`` is not a known operator.
    """
    try:
        return _OPERATOR_SYMBOLS[symbol]
    except KeyError:
        raise ClassifierError(f"Unknown operator: {symbol!r}") from None


def classify_clause(raw: RawClause) -> Clause:
    """Build the typed clause for one raw clause."""
    operator = operator_from_symbol(raw.operator)
    if raw.kind is ClauseKind.TERM:
        return TermClause(operator=operator, text=raw.value)
    if raw.kind is ClauseKind.PHRASE:
        return PhraseClause(operator=operator, text=raw.value)
    if raw.kind is ClauseKind.DECADE:
        try:
            start_year = int(raw.value)
        except ValueError:
            raise ClassifierError(f"Malformed decade: {raw.value!r}") from None
        return DateRangeClause.from_decade(operator, start_year)
    raise ClassifierError(f"Unexpected clause type: {raw.kind!r}")


def classify_clauses(raws: Iterable[RawClause]) -> list[Clause]:
    """Classify raw clauses, preserving their order."""
    return [classify_clause(raw) for raw in raws]
