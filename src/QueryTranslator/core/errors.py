"""Error types raised by the translation pipeline."""

from __future__ import annotations

from typing import Sequence


class QuerySyntaxError(ValueError):
    """Raised when a query string is not a well-formed clause sequence.

    Attributes:
        text: The rejected query string.
        position: 0-based character offset of the furthest point reached.
        line: 1-based line of ``position``.
        column: 1-based column of ``position``.
        expected: Names of the alternatives that were tried at ``position``.
    """

    def __init__(self, text: str, position: int, expected: Sequence[str]) -> None:
        self.text = text
        self.position = position
        self.line = text.count("\n", 0, position) + 1
        self.column = position - (text.rfind("\n", 0, position) + 1) + 1
        self.expected = tuple(sorted(set(expected)))
        super().__init__(self._describe())

    def _describe(self) -> str:
        found = self.text[self.position : self.position + 1]
        found_desc = repr(found) if found else "end of input"
        msg = f"Invalid query at position {self.position} (line {self.line}, column {self.column}): found {found_desc}"
        if self.expected:
            msg += f", expected one of: {', '.join(self.expected)}"
        return msg


class ClassifierError(RuntimeError):
    """Raised when parser output cannot be mapped to a clause.

    This signals a mismatch between the grammar and the classifier, never a
    problem with user input.
    """
