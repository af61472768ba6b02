"""Publicación de contraseñas en variables de entorno.

Por qué está en adapters:
- Escribir en `os.environ` es un efecto global del proceso; se aísla aquí y
  solo lo invoca el paso de publicación del driver.
- `environ` es inyectable para que los tests no toquen el entorno real.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, MutableMapping

from core.domain.models import PasswordResult

logger = logging.getLogger(__name__)

PLAIN_SUFFIX = "_PLAIN"
ENCODED_SUFFIX = "_ENCODED"


def to_env_prefix(name: str) -> str:
    """Mayúsculas y guiones a guiones bajos (`db-pass` -> `DB_PASS`)."""

    return name.upper().replace("-", "_")


def env_var_names(prefix: str) -> list[str]:
    return [prefix + PLAIN_SUFFIX, prefix + ENCODED_SUFFIX]


def is_valid_env_prefix(prefix: str) -> bool:
    """Indica si `prefix` puede formar nombres de variables de entorno.

    `os.environ` rechaza nombres vacíos y los que contienen `=` o NUL.
    """

    return bool(prefix) and "=" not in prefix and "\x00" not in prefix


def publish_environment(
    result: PasswordResult,
    environ: MutableMapping[str, str] | None = None,
) -> bool:
    """Escribe `PREFIX_PLAIN` / `PREFIX_ENCODED`, sobrescribiendo valores previos.

    Devuelve False (sin tocar nada) si el resultado no tiene prefijo de exportación.
    """

    if not result.env_prefix:
        return False

    target = os.environ if environ is None else environ
    plain_var, encoded_var = env_var_names(result.env_prefix)
    target[plain_var] = result.plain
    target[encoded_var] = result.encoded
    logger.info("exported %s and %s", plain_var, encoded_var)
    return True


def _shell_quote(value: str) -> str:
    return "'" + value.replace("'", "'\"'\"'") + "'"


def render_exports(results: Iterable[PasswordResult]) -> list[str]:
    """Líneas `export` de shell para cada resultado con prefijo de exportación."""

    lines: list[str] = []
    for result in results:
        if not result.env_prefix:
            continue
        plain_var, encoded_var = env_var_names(result.env_prefix)
        lines.append(f"export {plain_var}={_shell_quote(result.plain)}")
        lines.append(f"export {encoded_var}={_shell_quote(result.encoded)}")
    return lines
