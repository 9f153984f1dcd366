"""Rule execution over scanned files."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from re import compile

from dotenv_lint.entries import COMMENT_PREFIX, LineEntry, load_file
from dotenv_lint.rules import default_rules
from dotenv_lint.rules.base import Finding, Rule

logger = logging.getLogger(__name__)

DIRECTIVE_RE = compile(r"^dotenv-lint:(?P<action>on|off)\b(?P<names>.*)$")


@dataclass(slots=True)
class CheckResult:
    """Findings for a batch of checked files."""

    files: list[Path] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)

    @property
    def has_problems(self) -> bool:
        return bool(self.findings)


@dataclass(frozen=True, slots=True)
class Directive:
    """A parsed ``dotenv-lint:on|off`` comment."""

    enable: bool
    rule_names: frozenset[str]

    @property
    def applies_to_all(self) -> bool:
        return not self.rule_names


def parse_directive(line: LineEntry) -> Directive | None:
    """Parse an inline on/off directive from a comment line."""
    if not line.is_comment:
        return None
    body = line.raw_string.lstrip()[len(COMMENT_PREFIX) :].strip()
    match = DIRECTIVE_RE.match(body)
    if match is None:
        return None
    names = {
        item.strip() for item in match.group("names").replace(",", " ").split() if item.strip()
    }
    return Directive(enable=match.group("action") == "on", rule_names=frozenset(names))


def run_rules(lines: list[LineEntry], rules: list[Rule]) -> list[Finding]:
    """Evaluate every rule against every non-comment line of one file."""
    findings: list[Finding] = []
    disabled: set[str] = set()
    all_names = {rule.name for rule in rules}
    for line in lines:
        if line.is_comment:
            directive = parse_directive(line)
            if directive is not None:
                targets = all_names if directive.applies_to_all else directive.rule_names
                if directive.enable:
                    disabled.difference_update(targets)
                else:
                    disabled.update(targets)
            continue

        for rule in rules:
            if rule.name in disabled:
                continue
            finding = rule.evaluate(line)
            if finding is not None:
                findings.append(finding)
    return findings


def check_file(path: Path, rules: list[Rule]) -> list[Finding]:
    """Load one file and run the rules over it."""
    lines = load_file(path)
    findings = run_rules(lines, rules)
    logger.debug("Checked %s: %d line(s), %d finding(s)", path, len(lines), len(findings))
    return findings


def check_files(
    paths: list[Path],
    rules: list[Rule] | None = None,
    *,
    jobs: int = 1,
) -> CheckResult:
    """Check files, optionally in parallel, keeping findings in input order."""
    if jobs < 1:
        raise ValueError(f"jobs must be >= 1, got {jobs}")
    active_rules = rules if rules is not None else default_rules()

    if jobs == 1 or len(paths) <= 1:
        batches = [check_file(path, active_rules) for path in paths]
    else:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            batches = list(executor.map(lambda path: check_file(path, active_rules), paths))

    findings = [finding for batch in batches for finding in batch]
    logger.info("Checked %d file(s), found %d problem(s)", len(paths), len(findings))
    return CheckResult(files=list(paths), findings=findings)
