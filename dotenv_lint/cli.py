"""CLI entrypoint for dotenv-lint."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from dotenv_lint import __version__
from dotenv_lint.config import AppConfig, default_config_template, load_app_config
from dotenv_lint.discovery import collect_files
from dotenv_lint.entries import ScanError
from dotenv_lint.log import configure_logging
from dotenv_lint.output import render_human, render_json
from dotenv_lint.rules import build_rules, list_rule_info
from dotenv_lint.rules.base import Rule
from dotenv_lint.runner import check_files

app = typer.Typer(
    name="dotenv-lint",
    no_args_is_help=True,
    help="Lint .env files and report formatting problems.",
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress.")] = False,
) -> None:
    """Root command callback."""
    _ = version
    configure_logging(verbose)


@app.command("check")
def check_command(
    paths: Annotated[
        list[Path] | None, typer.Argument(help="Files or directories to check.")
    ] = None,
    skip: Annotated[list[str] | None, typer.Option(help="Rule name to skip.")] = None,
    exclude: Annotated[list[str] | None, typer.Option(help="Exclude glob pattern.")] = None,
    recursive: Annotated[
        bool | None,
        typer.Option("--recursive/--no-recursive", help="Walk subdirectories."),
    ] = None,
    format: Annotated[
        str | None, typer.Option(help="Output format: human|json.", show_default="human")
    ] = None,
    jobs: Annotated[int | None, typer.Option(help="Files checked in parallel.")] = None,
    root: Annotated[Path, typer.Option(help="Project root used for config lookup.")] = Path("."),
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Check dotenv files and exit nonzero when problems are found."""
    app_config = _load_config_or_raise(root, config_file)
    output_format = (format or app_config.format).lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    resolved_jobs = jobs if jobs is not None else app_config.jobs
    if resolved_jobs < 1:
        raise typer.BadParameter("jobs must be >= 1", param_hint="--jobs")

    rules = _build_configured_rules_or_raise(app_config, extra_skip=skip or [])
    try:
        files = collect_files(
            paths or [Path(".")],
            exclude=[*app_config.exclude, *(exclude or [])],
            recursive=recursive if recursive is not None else app_config.recursive,
        )
        result = check_files(files, rules, jobs=resolved_jobs)
    except (ValueError, ScanError) as exc:
        raise typer.BadParameter(str(exc), param_hint="paths") from exc

    if output_format == "json":
        typer.echo(render_json(result))
    else:
        typer.echo(render_human(result))

    if result.has_problems:
        raise typer.Exit(code=1)


@app.command("rules")
def rules_command(
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    root: Annotated[Path, typer.Option(help="Project root used for config lookup.")] = Path("."),
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """List available rules."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(root, config_file)
    active_names = {rule.name for rule in _build_configured_rules_or_raise(app_config)}
    rule_info = list_rule_info()

    if output_format == "json":
        payload = {
            "rules": [
                {
                    "name": item.name,
                    "description": item.description,
                    "default_enabled": item.default_enabled,
                    "enabled": item.name in active_names,
                }
                for item in rule_info
            ],
            "meta": {"config_source": app_config.source},
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available rules:"]
    for item in rule_info:
        status = "enabled" if item.name in active_names else "disabled"
        lines.append(f"- {item.name} [{status}] - {item.description}")
    typer.echo("\n".join(lines))


@app.command("config")
def config_command(
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    root: Annotated[Path, typer.Option(help="Project root used for config lookup.")] = Path("."),
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Show resolved configuration."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(root, config_file)
    payload = app_config.to_dict()
    payload["active_rules"] = [rule.name for rule in _build_configured_rules_or_raise(app_config)]

    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = [
        "Resolved configuration:",
        f"- source: {payload['source'] or 'defaults'}",
        f"- format: {payload['format']}",
        f"- recursive: {payload['recursive']}",
        f"- exclude: {payload['exclude']}",
        f"- jobs: {payload['jobs']}",
        f"- rules.enable: {payload['rules']['enable']}",
        f"- rules.skip: {payload['rules']['skip']}",
        f"- active_rules: {payload['active_rules']}",
    ]
    typer.echo("\n".join(lines))


@app.command("config-init")
def config_init_command(
    out: Annotated[Path, typer.Option(help="Output path for starter config TOML.")] = Path(
        ".dotenv-lint.toml"
    ),
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite if file already exists."),
    ] = False,
) -> None:
    """Create a starter config file."""
    out_path = out.resolve()
    if out_path.exists() and not force:
        raise typer.BadParameter(
            f"Refusing to overwrite existing file: {out_path}. Use --force to overwrite."
        )
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(default_config_template(), encoding="utf-8")
    typer.echo(f"Wrote starter config: {out_path}")


def main() -> None:
    """Console script entrypoint."""
    app()


def _load_config_or_raise(root: Path, config_file: Path | None = None) -> AppConfig:
    try:
        return load_app_config(root, config_path=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _build_configured_rules_or_raise(
    app_config: AppConfig, *, extra_skip: list[str] | None = None
) -> list[Rule]:
    try:
        return build_rules(
            enabled_rule_names=app_config.rule_enable,
            skipped_rule_names=[*app_config.rule_skip, *(extra_skip or [])],
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="rules") from exc
