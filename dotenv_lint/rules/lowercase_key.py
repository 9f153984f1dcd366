"""Lowercase key rule."""

from __future__ import annotations

from dotenv_lint.entries import LineEntry
from dotenv_lint.rules.base import Finding


class LowercaseKeyRule:
    """Flags keys that are not written in uppercase."""

    name = "LowercaseKey"
    template = "The {key} key should be in uppercase"

    def evaluate(self, line: LineEntry) -> Finding | None:
        key = line.get_key()
        if key is None:
            return None
        key = key.strip()
        if key == key.upper():
            return None
        return Finding(line=line, rule_name=self.name, message=self.template.format(key=key))
