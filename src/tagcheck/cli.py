"""CLI interface for tagcheck using Typer framework."""

import importlib
import json as jsonlib
import logging
from dataclasses import field, make_dataclass
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from tagcheck import __description__, __version__
from tagcheck.config import LogLevel, ValidationConfig, load_config
from tagcheck.errors import TagcheckError, ValidationErrors
from tagcheck.validation import ValidationEngine, default_registry
from tagcheck.walk import is_struct_type

app = typer.Typer(
    name="tagcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def configure_logging(level: str) -> None:
    """Route log records through rich on stderr at the given level name."""
    logging.basicConfig(
        level=LOG_LEVELS.get(level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"tagcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Log level: error, warn, info, debug (default: from config, else warn)")
    ] = None,
) -> None:
    """tagcheck - Tag-driven validation of dataclasses and pydantic models."""
    if log_level is not None and log_level not in LOG_LEVELS:
        console.print(f"[red]Error:[/red] Invalid log level '{log_level}'. Must be one of: {', '.join(LOG_LEVELS)}")
        raise typer.Exit(1)

    ctx.obj = {"log_level": log_level}
    configure_logging(log_level or LogLevel.WARN.value)


def _import_model(model: str) -> type:
    """Resolve ``package.module:ClassName`` to a dataclass or pydantic model class."""
    module_name, sep, class_name = model.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Model must be given as 'module:ClassName', got '{model}'")

    module = importlib.import_module(module_name)
    target: Any = module
    for part in class_name.split("."):
        target = getattr(target, part)

    if not is_struct_type(target):
        raise ValueError(f"'{model}' is not a dataclass or pydantic model")
    return target


def _print_errors(errors: ValidationErrors) -> None:
    table = Table(title=f"Validation errors ({len(errors)} found)")
    table.add_column("Path", style="cyan")
    table.add_column("Rule", style="magenta")
    table.add_column("Message", style="white")

    for error in errors:
        table.add_row(error.dotted_path, error.validator, error.message)

    console.print(table)


@app.command()
def rules(
    filter_text: Annotated[
        Optional[str],
        typer.Option("--filter", "-f", help="Only show rules whose name contains this text")
    ] = None,
    negated: Annotated[
        bool,
        typer.Option("--negated", "-n", help="Include the generated !rule negations")
    ] = False,
) -> None:
    """List the registered validation rules."""
    registered = default_registry.snapshot()
    names = [
        name for name in default_registry.names(include_negated=negated)
        if not filter_text or filter_text.lower() in name.lower()
    ]

    if not names:
        console.print("[yellow]No rules found[/yellow]")
        return

    table = Table(title=f"Rules ({len(names)} found)")
    table.add_column("Rule", style="cyan")
    table.add_column("Message", style="white")
    for name in names:
        table.add_row(name, registered[name].message)

    console.print(table)


@app.command()
def check(
    tag: Annotated[
        str,
        typer.Argument(help="Rule tag, e.g. 'required,length(3|5)'")
    ],
    value: Annotated[
        str,
        typer.Argument(help="Value to validate")
    ],
    name: Annotated[
        str,
        typer.Option("--name", help="Field name used in messages")
    ] = "value",
) -> None:
    """Validate a single value against a rule tag."""
    checked = make_dataclass(
        "CheckedValue",
        [("value", str, field(default=value, metadata={"is": tag, "json": name}))],
    )

    ok, errors = ValidationEngine(ValidationConfig()).validate(checked())
    if ok:
        console.print(f"[green]OK[/green] {name} satisfies '{tag}'")
        return

    for error in errors:
        console.print(f"[red]FAIL[/red] {error.message}")
    raise typer.Exit(1)


@app.command()
def validate(
    ctx: typer.Context,
    file: Annotated[
        Path,
        typer.Argument(help="JSON document to validate")
    ],
    model: Annotated[
        str,
        typer.Option("--model", "-m", help="Target type as 'module:ClassName'")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .tagcheck.json)")
    ] = None,
) -> None:
    """Validate a JSON document against the rule tags of a model."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        tagcheck_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not (ctx.obj or {}).get("log_level"):
        configure_logging(tagcheck_config.logging.level)

    try:
        model_cls = _import_model(model)
    except (ImportError, AttributeError, ValueError) as e:
        console.print(f"[red]Error:[/red] Cannot load model: {e}")
        raise typer.Exit(1)

    try:
        with open(file, encoding="utf-8") as f:
            data = jsonlib.load(f)
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] File not found: {file}")
        raise typer.Exit(1)
    except jsonlib.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {file}: {e}")
        raise typer.Exit(1)

    try:
        instance = TypeAdapter(model_cls).validate_python(data)
    except PydanticValidationError as e:
        console.print(f"[red]Error:[/red] Document does not match {model_cls.__name__}: {file}\n{e}")
        raise typer.Exit(1)

    try:
        ok, errors = ValidationEngine(tagcheck_config.validation).validate(instance)
    except TagcheckError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if format == "json":
        report = errors.to_dict() if errors else {"count": 0, "errors": []}
        print(jsonlib.dumps({"valid": ok, **report}, indent=2))
    elif ok:
        console.print(f"[green]OK[/green] Valid {model_cls.__name__} document: {file}")
    else:
        _print_errors(errors)

    if not ok:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
