"""Incorrect delimiter rule."""

from __future__ import annotations

from dotenv_lint.entries import LineEntry
from dotenv_lint.rules.base import Finding, is_key_char, strip_invalid_leading_chars


class IncorrectDelimiterRule:
    """Flags keys whose words are joined by anything other than an underscore."""

    name = "IncorrectDelimiter"
    template = "The {key} key has incorrect delimiter"

    def evaluate(self, line: LineEntry) -> Finding | None:
        key = line.get_key()
        if key is None:
            return None

        # Delimiters sit between characters; the leading run belongs to LeadingCharacter.
        cleaned = strip_invalid_leading_chars(key).strip()
        if all(is_key_char(char) for char in cleaned):
            return None

        return Finding(
            line=line,
            rule_name=self.name,
            message=self.template.format(key=key),
        )
