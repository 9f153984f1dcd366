"""Output rendering."""

from __future__ import annotations

import json
from typing import Any

import click

from dotenv_lint import __version__
from dotenv_lint.rules.base import Finding
from dotenv_lint.runner import CheckResult


def render_human(result: CheckResult) -> str:
    """Render one line per finding followed by a colorized summary."""
    lines = [_format_finding(finding) for finding in result.findings]
    if lines:
        lines.append("")

    problems = len(result.findings)
    if problems:
        noun = "problem" if problems == 1 else "problems"
        lines.append(click.style(f"Found {problems} {noun}", fg="red", bold=True))
    else:
        lines.append(click.style("No problems found", fg="green", bold=True))
    return "\n".join(lines)


def render_json(result: CheckResult) -> str:
    """Render stable JSON output for CI and automation."""
    return json.dumps(build_json_payload(result), sort_keys=True)


def build_json_payload(result: CheckResult) -> dict[str, Any]:
    return {
        "findings": [_serialize_finding(item) for item in result.findings],
        "meta": {
            "files_checked": len(result.files),
            "problems": len(result.findings),
            "version": __version__,
        },
    }


def _format_finding(finding: Finding) -> str:
    location = f"{finding.line.file.path}:{finding.line.number}"
    return f"{location} {click.style(finding.rule_name, bold=True)}: {finding.message}"


def _serialize_finding(finding: Finding) -> dict[str, Any]:
    return {
        "path": str(finding.line.file.path),
        "line": finding.line.number,
        "rule": finding.rule_name,
        "message": finding.message,
    }
