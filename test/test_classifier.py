"""Tests for clause classification."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryTranslator.core.errors import ClassifierError
from QueryTranslator.core.query import DateRangeClause, Operator, PhraseClause, TermClause
from QueryTranslator.parsing.classifier import classify_clause, classify_clauses, operator_from_symbol
from QueryTranslator.parsing.parser import ClauseKind, RawClause, parse_clauses


class TestOperatorFromSymbol(unittest.TestCase):
    def test_known_symbols(self) -> None:
        self.assertIs(operator_from_symbol("+"), Operator.MUST)
        self.assertIs(operator_from_symbol("-"), Operator.MUST_NOT)
        self.assertIs(operator_from_symbol(None), Operator.SHOULD)

    def test_unknown_symbol_is_a_defect(self) -> None:
        for symbol in ("*", "", "~", "++"):
            with self.subTest(symbol=symbol):
                with self.assertRaises(ClassifierError):
                    operator_from_symbol(symbol)


class TestClassifyClause(unittest.TestCase):
    def test_term(self) -> None:
        clause = classify_clause(RawClause("+", ClauseKind.TERM, "foo"))
        self.assertEqual(clause, TermClause(operator=Operator.MUST, text="foo"))

    def test_phrase(self) -> None:
        clause = classify_clause(RawClause("-", ClauseKind.PHRASE, "cat in the hat"))
        self.assertEqual(clause, PhraseClause(operator=Operator.MUST_NOT, text="cat in the hat"))

    def test_decade_becomes_ten_year_range(self) -> None:
        clause = classify_clause(RawClause(None, ClauseKind.DECADE, "2000"))
        self.assertEqual(clause, DateRangeClause(operator=Operator.SHOULD, start_year=2000, end_year=2009))

    def test_unknown_kind_is_a_defect(self) -> None:
        with self.assertRaises(ClassifierError):
            classify_clause(RawClause(None, "bogus", "x"))  # type: ignore[arg-type]

    def test_unknown_operator_is_a_defect(self) -> None:
        with self.assertRaises(ClassifierError):
            classify_clause(RawClause("!", ClauseKind.TERM, "x"))

    def test_classify_parsed_clauses_in_order(self) -> None:
        clauses = classify_clauses(parse_clauses('awesome "cat videos" -2000s'))
        self.assertEqual(
            clauses,
            [
                TermClause(Operator.SHOULD, "awesome"),
                PhraseClause(Operator.SHOULD, "cat videos"),
                DateRangeClause(Operator.MUST_NOT, 2000, 2009),
            ],
        )

    def test_every_form_takes_every_operator(self) -> None:
        expected_ops = {"": Operator.SHOULD, "+": Operator.MUST, "-": Operator.MUST_NOT}
        for prefix, operator in expected_ops.items():
            for body in ("cat", '"cat videos"', "1990s"):
                with self.subTest(prefix=prefix, body=body):
                    (clause,) = classify_clauses(parse_clauses(prefix + body))
                    self.assertIs(clause.operator, operator)


class TestDateRangeClause(unittest.TestCase):
    def test_from_decade(self) -> None:
        clause = DateRangeClause.from_decade(Operator.MUST, 1950)
        self.assertEqual((clause.start_year, clause.end_year), (1950, 1959))

    def test_start_must_be_multiple_of_ten(self) -> None:
        with self.assertRaises(ValueError):
            DateRangeClause.from_decade(Operator.SHOULD, 1955)

    def test_range_must_span_ten_years(self) -> None:
        with self.assertRaises(ValueError):
            DateRangeClause(Operator.SHOULD, 1950, 1960)


if __name__ == "__main__":
    unittest.main()
