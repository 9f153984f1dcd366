"""Base rule protocol and finding model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from dotenv_lint.entries import LineEntry


@dataclass(frozen=True, slots=True)
class Finding:
    """A single problem emitted by a rule for one line."""

    line: LineEntry
    rule_name: str
    message: str


class Rule(Protocol):
    """Protocol for per-line lint rules."""

    name: str

    def evaluate(self, line: LineEntry) -> Finding | None:
        """Evaluate one line and return at most one finding."""


def is_key_char(char: str) -> bool:
    """Return True for letters, digits and underscore."""
    return char == "_" or char.isalnum()


def strip_invalid_leading_chars(key: str) -> str:
    """Drop the leading run of characters that cannot appear in a key."""
    for index, char in enumerate(key):
        if is_key_char(char):
            return key[index:]
    return ""
