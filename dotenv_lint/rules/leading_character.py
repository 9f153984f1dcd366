"""Leading character rule."""

from __future__ import annotations

from dotenv_lint.entries import LineEntry
from dotenv_lint.rules.base import Finding


class LeadingCharacterRule:
    """Flags lines whose first character cannot start a key."""

    name = "LeadingCharacter"
    message = "Invalid leading character detected"

    def evaluate(self, line: LineEntry) -> Finding | None:
        if line.is_blank:
            return None
        first = line.raw_string[0]
        if first == "_" or (first.isascii() and first.isalpha()):
            return None
        return Finding(line=line, rule_name=self.name, message=self.message)
