"""pwgen command line interface."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.env_publisher import render_exports
from adapters.json_exporter import export_records_json, records_to_payload
from adapters.output_sinks import MemoryOutputSink
from cli import doctor
from cli.ui_components import build_password_panel, build_results_table, print_banner
from core.config import load_settings
from core.config_loader import load_batch_config
from core.domain.models import OutputRecord, PasswordSpec
from core.exceptions import ConfigurationError, PwgenError
from core.services.batch_driver import generate_result, run_batch

app = typer.Typer(
    no_args_is_help=True,
    help="Generate random passwords, encode them and export them to the environment.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _fail(exc: Exception) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(code=1)


def _single_spec(name: str, length: int, symbols: bool, encoding: str, *, default_length: int) -> PasswordSpec:
    try:
        return PasswordSpec.from_entry(
            name,
            {"len": length, "symbols": symbols, "encoding": encoding},
            default_length=default_length,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"invalid password options: {exc}") from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """pwgen toolkit."""

    try:
        settings = load_settings()
    except PwgenError as exc:
        raise _fail(exc) from exc
    _configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def generate(
    config: Path = typer.Argument(..., exists=True, dir_okay=False, help="Batch config (.json or .toml)."),
    export_json: Optional[Path] = typer.Option(None, "--export-json", help="Write published records to a JSON file."),
    print_env: bool = typer.Option(False, "--print-env", help="Print shell export lines for env-enabled entries."),
    show_plain: bool = typer.Option(False, "--show-plain", help="Show plaintext passwords in the table."),
    as_json: bool = typer.Option(False, "--json", help="Print published records as JSON instead of a table."),
) -> None:
    """Generate every password described in CONFIG."""

    sink = MemoryOutputSink()
    try:
        settings = load_settings()
        batch = load_batch_config(config)
        results = run_batch(batch, sink=sink, environ=os.environ, settings=settings)
    except PwgenError as exc:
        raise _fail(exc) from exc

    if export_json is not None:
        path = export_records_json(records=sink.records, output_path=export_json)
        _err_console.print(f"[green]Saved records to:[/green] {path}")

    if as_json:
        typer.echo(json.dumps(records_to_payload(sink.records), ensure_ascii=False, indent=2))
    elif results:
        print_banner(_console)
        mask = settings.mask_plain and not show_plain
        _console.print(build_results_table(results, mask_plain=mask))
    else:
        _console.print("[yellow]No passwords generated (empty configuration).[/yellow]")

    if print_env:
        for line in render_exports(results):
            typer.echo(line)


@app.command()
def new(
    length: int = typer.Option(0, "--length", "-l", help="Password length (<= 0 uses the default)."),
    symbols: bool = typer.Option(False, "--symbols", "-s", help="Include symbols."),
    encoding: str = typer.Option("", "--encoding", "-e", help="sha256, sha512, md5, base64 or plain."),
    name: str = typer.Option("password", "--name", help="Output name."),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON."),
) -> None:
    """Generate a single password and print it."""

    try:
        settings = load_settings()
        spec = _single_spec(name, length, symbols, encoding, default_length=settings.default_length)
        result = generate_result(spec)
    except PwgenError as exc:
        raise _fail(exc) from exc

    if as_json:
        record = OutputRecord(name=result.name, value=result, tags=settings.output_tags)
        typer.echo(json.dumps(record.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return
    _console.print(build_password_panel(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
