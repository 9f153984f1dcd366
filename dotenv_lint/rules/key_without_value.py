"""Key without value rule."""

from __future__ import annotations

from dotenv_lint.entries import DELIMITER, LineEntry
from dotenv_lint.rules.base import Finding


class KeyWithoutValueRule:
    """Flags lines that never reach an equal sign."""

    name = "KeyWithoutValue"
    template = "The {key} key should be with a value or have an equal sign"

    def evaluate(self, line: LineEntry) -> Finding | None:
        if line.is_blank or DELIMITER in line.raw_string:
            return None
        return Finding(
            line=line,
            rule_name=self.name,
            message=self.template.format(key=line.raw_string.strip()),
        )
