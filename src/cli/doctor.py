"""Doctor command for environment diagnostics."""

from __future__ import annotations

import hashlib
import secrets

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file
from core.domain.encoding import Encoding
from core.services.password_generator import encode_password

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_entropy() -> tuple[bool, str]:
    """Draw a few bytes from the OS random source."""

    try:
        secrets.token_bytes(32)
        return True, "secrets.token_bytes(32) OK"
    except (OSError, NotImplementedError) as exc:
        return False, str(exc)


def _check_digests() -> list[tuple[str, bool, str]]:
    rows: list[tuple[str, bool, str]] = []
    for encoding in Encoding:
        if not encoding.is_digest():
            continue
        if encoding.value not in hashlib.algorithms_available:
            rows.append((encoding.value, False, "not provided by hashlib/OpenSSL"))
            continue
        try:
            encoded, _ = encode_password("doctor", encoding)
            rows.append((encoding.value, True, f"{len(encoded)} hex chars"))
        except ValueError as exc:
            # FIPS builds reject md5
            rows.append((encoding.value, False, str(exc)))
    return rows


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="pwgen Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_entropy, detail_entropy = _check_entropy()
    table.add_row("Random source", "OK" if ok_entropy else "FAIL", detail_entropy)

    for name, ok, detail in _check_digests():
        table.add_row(f"Digest {name}", "OK" if ok else "FAIL", detail)

    # Config
    table.add_row("Default length", "OK", str(settings.default_length))
    table.add_row("Output tags", "OK", ", ".join(settings.output_tags) or "(none)")
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    _console.print(table)

    if not ok_entropy:
        _console.print("\n[red]The OS random source is unavailable; `generate` will abort.[/red]")
        raise typer.Exit(code=1)
