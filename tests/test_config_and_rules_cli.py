"""Tests for config loading and the rules/config CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dotenv_lint.cli import app
from dotenv_lint.config import default_config_template, load_app_config

runner = CliRunner()


def test_load_app_config_prefers_dot_file_over_pyproject(tmp_path: Path) -> None:
    root = tmp_path / "project"
    root.mkdir()
    (root / "pyproject.toml").write_text(
        "\n".join(["[tool.dotenv_lint]", 'format = "human"', "jobs = 8"]),
        encoding="utf-8",
    )
    (root / ".dotenv-lint.toml").write_text(
        "\n".join(
            [
                'format = "json"',
                "recursive = true",
                'exclude = ["*.example"]',
                "jobs = 2",
                "",
                "[rules]",
                'skip = ["LowercaseKey"]',
            ]
        ),
        encoding="utf-8",
    )

    config = load_app_config(root)
    assert config.format == "json"
    assert config.recursive is True
    assert config.exclude == ["*.example"]
    assert config.jobs == 2
    assert config.rule_enable is None
    assert config.rule_skip == ["LowercaseKey"]
    assert config.source == str(root / ".dotenv-lint.toml")


def test_load_app_config_reads_pyproject_hyphenated_key(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "\n".join(['[tool."dotenv-lint".rules]', 'enable = ["IncorrectDelimiter"]']),
        encoding="utf-8",
    )
    config = load_app_config(tmp_path)
    assert config.rule_enable == ["IncorrectDelimiter"]
    assert config.source == str(tmp_path / "pyproject.toml")


def test_load_app_config_defaults_without_files(tmp_path: Path) -> None:
    config = load_app_config(tmp_path)
    assert config.source is None
    assert config.format == "human"
    assert config.jobs == 1


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("jobs = 0", "jobs must be > 0"),
        ('format = "xml"', "format must be one of"),
        ("recursive = 1", "recursive must be a boolean"),
        ("exclude = [1]", "exclude must be a list of strings"),
        ("rules = 3", "rules must be a table"),
        ("format = ", "Invalid TOML"),
    ],
)
def test_load_app_config_rejects_invalid_values(
    tmp_path: Path, content: str, message: str
) -> None:
    (tmp_path / ".dotenv-lint.toml").write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_app_config(tmp_path)


def test_default_template_round_trips(tmp_path: Path) -> None:
    (tmp_path / ".dotenv-lint.toml").write_text(default_config_template(), encoding="utf-8")
    config = load_app_config(tmp_path)
    assert config.exclude == ["*.example"]
    assert config.rule_skip == []


def test_rules_command_json_reflects_skip_from_config(tmp_path: Path) -> None:
    (tmp_path / ".dotenv-lint.toml").write_text(
        "\n".join(["[rules]", 'skip = ["LowercaseKey"]']),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["rules", "--root", str(tmp_path), "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    rules_by_name = {item["name"]: item for item in payload["rules"]}
    assert rules_by_name["LowercaseKey"]["enabled"] is False
    assert rules_by_name["IncorrectDelimiter"]["enabled"] is True
    assert payload["meta"]["config_source"] == str(tmp_path / ".dotenv-lint.toml")


def test_rules_command_rejects_unknown_rule_in_config(tmp_path: Path) -> None:
    (tmp_path / ".dotenv-lint.toml").write_text(
        "\n".join(["[rules]", 'skip = ["Missing"]']),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["rules", "--root", str(tmp_path)])
    assert result.exit_code == 2


def test_config_command_json(tmp_path: Path) -> None:
    result = runner.invoke(app, ["config", "--root", str(tmp_path), "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["source"] is None
    assert "IncorrectDelimiter" in payload["active_rules"]


def test_config_init_refuses_to_overwrite(tmp_path: Path) -> None:
    out = tmp_path / ".dotenv-lint.toml"
    first = runner.invoke(app, ["config-init", "--out", str(out)])
    assert first.exit_code == 0
    assert out.read_text(encoding="utf-8") == default_config_template()

    second = runner.invoke(app, ["config-init", "--out", str(out)])
    assert second.exit_code == 2

    forced = runner.invoke(app, ["config-init", "--out", str(out), "--force"])
    assert forced.exit_code == 0
