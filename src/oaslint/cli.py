"""CLI interface for oaslint using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from oaslint import __description__, __version__
from oaslint.config import LogLevel, OaslintConfig, OutputFormat, RuleConfiguration, load_config
from oaslint.loader import iter_parameters, load_document
from oaslint.models.parameter import ParameterWrapper
from oaslint.validation import RuleOutcome, Severity, parameter_validator

app = typer.Typer(
    name="oaslint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"oaslint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit")
    ] = False,
) -> None:
    """oaslint - Rule-based style checks for OpenAPI specification elements."""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_settings(config: Path | None, verbose: bool) -> OaslintConfig:
    try:
        settings = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _setup_logging(LogLevel.DEBUG.value if verbose else settings.logging.level)
    return settings


def _rule_configuration(settings: OaslintConfig, recommend: bool) -> RuleConfiguration:
    if recommend:
        return settings.rules.model_copy(update={"enable_recommendations": True})
    return settings.rules


def _print_table(findings: list[tuple[ParameterWrapper, RuleOutcome]]) -> None:
    table = Table()
    table.add_column("Operation", style="cyan")
    table.add_column("Parameter", style="white")
    table.add_column("Severity", style="white")
    table.add_column("Details", style="white")

    for wrapper, outcome in findings:
        severity_color = "red" if outcome.severity == Severity.ERROR else "yellow"
        table.add_row(
            escape(wrapper.operation_label),
            escape(wrapper.parameter.name) if wrapper.parameter else "",
            f"[{severity_color}]{outcome.severity.value.upper()}[/{severity_color}]",
            escape(outcome.result.details),
        )

    console.print(table)


@app.command()
def validate(
    spec: Annotated[
        Path,
        typer.Argument(help="Path to an OpenAPI document (JSON or YAML)")
    ],
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .oaslint.json)")
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json (default: from configuration)")
    ] = None,
    recommend: Annotated[
        bool,
        typer.Option("--recommend", help="Enable recommendation rules on top of the configuration")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Run parameter rules against every parameter of a specification."""
    valid_formats = [f.value for f in OutputFormat]
    if format is not None and format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{escape(format)}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    settings = _load_settings(config, verbose)
    output_format = format or settings.output.format

    try:
        document = load_document(spec)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    validator = parameter_validator(_rule_configuration(settings, recommend))

    parameters = 0
    findings: list[tuple[ParameterWrapper, RuleOutcome]] = []
    for wrapper in iter_parameters(document):
        parameters += 1
        result = validator.validate(wrapper)
        findings.extend((wrapper, outcome) for outcome in result.failures)

    errors = sum(1 for _, outcome in findings if outcome.severity == Severity.ERROR)
    warnings = len(findings) - errors

    if output_format == OutputFormat.JSON.value:
        report = {
            "specification": str(spec),
            "parameters": parameters,
            "rules": len(validator.rules),
            "errors": errors,
            "warnings": warnings,
            "findings": [
                {
                    "operation": wrapper.operation_label,
                    "parameter": wrapper.parameter.name if wrapper.parameter else None,
                    "rule": outcome.description,
                    "severity": outcome.severity.value,
                    "details": outcome.result.details,
                    "message": outcome.failure_message,
                }
                for wrapper, outcome in findings
            ],
        }
        typer.echo(jsonlib.dumps(report, indent=2))
    else:
        console.print(f"[green]Validating:[/green] {escape(str(spec))}")
        console.print(f"Checked {parameters} parameter(s) against {len(validator.rules)} rule(s)")
        if findings:
            _print_table(findings)
        else:
            console.print("[green]No issues found![/green]")
        console.print(f"{errors} error(s), {warnings} warning(s)")

    raise typer.Exit(1 if errors else 0)


@app.command()
def rules(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .oaslint.json)")
    ] = None,
    recommend: Annotated[
        bool,
        typer.Option("--recommend", help="Enable recommendation rules on top of the configuration")
    ] = False,
) -> None:
    """List the parameter rules active for a configuration, in evaluation order."""
    settings = _load_settings(config, verbose=False)
    validator = parameter_validator(_rule_configuration(settings, recommend))

    if not validator.rules:
        console.print("[dim]No rules enabled for this configuration[/dim]")
        return

    table = Table()
    table.add_column("#", style="dim", justify="right")
    table.add_column("Severity", style="white")
    table.add_column("Description", style="white")
    table.add_column("Failure message", style="dim")

    for index, rule in enumerate(validator.rules, start=1):
        table.add_row(str(index), rule.severity.value.upper(), rule.description, rule.failure_message)

    console.print(table)
    console.print(f"{len(validator.rules)} rule(s) enabled")
