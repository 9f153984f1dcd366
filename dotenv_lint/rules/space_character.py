"""Whitespace around the delimiter."""

from __future__ import annotations

from dotenv_lint.entries import LineEntry
from dotenv_lint.rules.base import Finding


class SpaceCharacterRule:
    """Flags whitespace directly before or after the equal sign."""

    name = "SpaceCharacter"
    message = "The line has spaces around equal sign"

    def evaluate(self, line: LineEntry) -> Finding | None:
        key = line.get_key()
        value = line.get_value()
        if key is None or value is None:
            return None
        if key[-1].isspace() or value[:1].isspace():
            return Finding(line=line, rule_name=self.name, message=self.message)
        return None
