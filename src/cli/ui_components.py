"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `generate` y `new`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.encoding import Encoding
from core.domain.models import PasswordResult

_MASK = "••••••••"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("PWGEN", style="bold cyan")
    subtitle = Text("Contraseñas aleatorias • Codificación • Entorno", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_results_table(results: list[PasswordResult], *, mask_plain: bool = True) -> Table:
    """Tabla Rich con una fila por contraseña publicada."""

    table = Table(title="Generated Passwords")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Length", style="white", justify="right")
    table.add_column("Symbols", style="white")
    table.add_column("Encoding", style="green")
    table.add_column("Plain", style="magenta")
    table.add_column("Encoded", style="magenta", overflow="fold")
    table.add_column("Environment", style="dim")

    for result in results:
        plain = _MASK if mask_plain else result.plain
        encoded = result.encoded
        # mask anything reversible to the plaintext
        if mask_plain and not Encoding.from_selector(result.encoding).is_digest():
            encoded = _MASK
        table.add_row(
            result.name,
            str(result.length),
            "yes" if result.symbols else "no",
            result.encoding,
            plain,
            encoded,
            ", ".join(result.environment) or "-",
        )
    return table


def build_password_panel(result: PasswordResult) -> Panel:
    """Panel para una contraseña suelta (`pwgen new`)."""

    body = Text()
    body.append("Plain:   ", style="bold")
    body.append(result.plain + "\n")
    body.append("Encoded: ", style="bold")
    body.append(result.encoded)
    body.append(f"\n\nEncoding: {result.encoding} • Length: {result.length}", style="dim")
    return Panel(body, title=Text(result.name, style="bold yellow"), border_style="yellow")
