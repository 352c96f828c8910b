"""Structured boolean query model.

A query is a flat list of clauses partitioned into three buckets by operator:

- `should`: optional clauses that raise relevance
- `must`: clauses every hit has to satisfy
- `must_not`: clauses no hit may satisfy

How a clause maps to a backend fragment is handled by the emitters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Operator(Enum):
    """Semantic operator tag; values are the boolean-query section names."""

    SHOULD = "should"
    MUST = "must"
    MUST_NOT = "must_not"


@dataclass(frozen=True, slots=True)
class TermClause:
    """A single unquoted term."""

    operator: Operator
    text: str


@dataclass(frozen=True, slots=True)
class PhraseClause:
    """A quoted phrase; `text` holds the terms joined by single spaces."""

    operator: Operator
    text: str


@dataclass(frozen=True, slots=True)
class DateRangeClause:
    """An inclusive year range derived from a decade token.

    Attributes:
        operator: Operator tag.
        start_year: First year of the decade, always a multiple of 10.
        end_year: Last year of the decade, always ``start_year + 9``.
    """

    operator: Operator
    start_year: int
    end_year: int

    def __post_init__(self) -> None:
        if self.start_year % 10 != 0:
            raise ValueError(f"Decade start year must be a multiple of 10: {self.start_year}")
        if self.end_year != self.start_year + 9:
            raise ValueError(f"Decade must span ten years: {self.start_year}-{self.end_year}")

    @classmethod
    def from_decade(cls, operator: Operator, start_year: int) -> DateRangeClause:
        """Build the range covering ``start_year`` through ``start_year + 9``."""
        return cls(operator=operator, start_year=start_year, end_year=start_year + 9)


Clause = TermClause | PhraseClause | DateRangeClause


@dataclass(frozen=True, slots=True)
class Query:
    """Bucketed boolean query.

    Each bucket keeps the left-to-right input order of its clauses. Empty
    buckets are empty tuples; emitters decide whether to render them.
    """

    should: tuple[Clause, ...] = ()
    must: tuple[Clause, ...] = ()
    must_not: tuple[Clause, ...] = ()

    def bucket(self, operator: Operator) -> tuple[Clause, ...]:
        """Return the bucket holding clauses tagged with ``operator``."""
        return getattr(self, operator.value)

    def clauses(self) -> Iterator[Clause]:
        """Iterate all clauses bucket by bucket (should, must, must_not)."""
        for operator in Operator:
            yield from self.bucket(operator)

    @property
    def is_empty(self) -> bool:
        return not (self.should or self.must or self.must_not)


def build_query(clauses: Iterable[Clause]) -> Query:
    """Partition clauses into should/must/must_not buckets.

    The partition is stable: inside every bucket, clauses appear in the same
    relative order as in ``clauses``.

    Args:
        clauses: Classified clauses in input order.

    Returns:
        Query with every clause in exactly one bucket.
    """
    buckets: dict[Operator, list[Clause]] = {operator: [] for operator in Operator}
    for clause in clauses:
        buckets[clause.operator].append(clause)
    return Query(
        should=tuple(buckets[Operator.SHOULD]),
        must=tuple(buckets[Operator.MUST]),
        must_not=tuple(buckets[Operator.MUST_NOT]),
    )
