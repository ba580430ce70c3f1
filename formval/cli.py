"""Command line interface for checking values against validators."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

import rich.traceback
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import normalize as normalize_module
from .messages import DEFAULT_MESSAGES
from .registry import UnknownValidatorError, registry
from .rulefile import PipelineConfig, RuleFileError, StepConfig, build_pipeline, load_rule_file

rich.traceback.install(show_locals=False)

app = typer.Typer(help="Validate single values with composable validators.")
console = Console()
logger = logging.getLogger(__name__)


class Mode(str, Enum):
    chain = "chain"
    first_error = "first_error"


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


def _parse_value(raw: str, as_json: bool) -> Any:
    """Decode a command line value, optionally as JSON."""
    if not as_json:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as error:
        raise typer.BadParameter(f"VALUE is not valid JSON: {error}") from error


def _resolve_path(path: Path) -> Path:
    resolved = Path(path).expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"Path does not exist: {resolved}")
    return resolved


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Configure logging for all commands."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def check(
    value: str = typer.Argument(..., help="Value to validate."),
    validator: Optional[List[str]] = typer.Option(
        None, "--validator", "-v", help="Registered validator name; repeat to add more."
    ),
    one_of: Optional[List[str]] = typer.Option(
        None, "--one-of", help="Allowed value; repeat to build a membership check."
    ),
    rules: Optional[Path] = typer.Option(None, "--rules", "-r", help="YAML rule file."),
    mode: Optional[Mode] = typer.Option(
        None, help="Combinator used to run validators; defaults to the rule file mode or chain."
    ),
    as_json: bool = typer.Option(False, "--json", help="Parse VALUE as JSON."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", help="Output format for errors."
    ),
) -> None:
    """Validate VALUE and exit with status 1 when it is invalid."""

    candidate = _parse_value(value, as_json)

    config = PipelineConfig()
    if rules is not None:
        try:
            config = load_rule_file(_resolve_path(rules))
        except RuleFileError as error:
            raise typer.BadParameter(str(error)) from error
    config.steps.extend(StepConfig(validator=name) for name in validator or [])
    if one_of:
        config.steps.append(StepConfig(validator="oneOf", options={"allowed": list(one_of)}))
    if mode is not None:
        config.mode = mode.value
    if not config.steps:
        raise typer.BadParameter("Provide at least one --validator, --one-of or --rules")

    try:
        pipeline = build_pipeline(config, registry)
    except (UnknownValidatorError, RuleFileError) as error:
        raise typer.BadParameter(str(error)) from error

    errors = pipeline(candidate)
    logger.debug("Ran %d validators in %s mode", len(config.steps), config.mode)

    if output_format is OutputFormat.json:
        console.print_json(data={"valid": not errors, "errors": errors}, default=str)
    elif errors:
        for message in errors:
            console.print(f"[red]✗[/red] {escape(str(message))}", highlight=False)
    else:
        console.print("[green]valid[/green]")

    if errors:
        raise typer.Exit(code=1)


@app.command()
def normalize(
    value: str = typer.Argument(..., help="Value to normalize to a boolean."),
    as_json: bool = typer.Option(False, "--json", help="Parse VALUE as JSON."),
) -> None:
    """Print the strict boolean form of VALUE."""

    candidate = _parse_value(value, as_json)
    try:
        result = normalize_module.normalize_boolean(candidate)
    except normalize_module.NormalizationError as error:
        console.print(f"[red]{escape(str(error))}[/red]", highlight=False)
        raise typer.Exit(code=2) from error
    console.print("true" if result else "false")


@app.command()
def messages() -> None:
    """Show the default error message table."""

    table = Table("kind", "message")
    for kind, template in DEFAULT_MESSAGES.items():
        table.add_row(kind, template.strip())
    console.print(table)


@app.command()
def validators() -> None:
    """List registered validator names."""

    for name in registry.names():
        console.print(name)


def main() -> None:
    """Entrypoint for the ``formval`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover
    main()
