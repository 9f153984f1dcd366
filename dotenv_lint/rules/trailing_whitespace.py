"""Trailing whitespace rule."""

from __future__ import annotations

from dotenv_lint.entries import LineEntry
from dotenv_lint.rules.base import Finding


class TrailingWhitespaceRule:
    """Flags lines that end with whitespace."""

    name = "TrailingWhitespace"
    message = "Trailing whitespace detected"

    def evaluate(self, line: LineEntry) -> Finding | None:
        if line.raw_string[-1:].isspace():
            return Finding(line=line, rule_name=self.name, message=self.message)
        return None
