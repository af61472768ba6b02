"""Carga de configuraciones de lote (JSON / TOML).

Formatos soportados:
- `{"db-pass": {"len": 24, "encoding": "sha256", "env": true}, ...}`
- El mismo mapping anidado bajo una clave `pwgen` (bloque de un flujo mayor).
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_SECTION_KEY = "pwgen"


def _read(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            return json.loads(path.read_text(encoding="utf-8"))
        if suffix == ".toml":
            with path.open("rb") as fh:
                return tomllib.load(fh)
    except OSError as exc:
        raise ConfigurationError(f"cannot read {path}: {exc}") from exc
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"invalid {suffix[1:]} in {path}: {exc}") from exc
    raise ConfigurationError(f"unsupported config format {suffix or '(none)'!r}; use .json or .toml")


def load_batch_config(path: Path) -> dict[str, Any]:
    """Lee el mapping de configuración de lote desde `path`."""

    data = _read(path)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top-level value must be an object")

    section = data.get(_SECTION_KEY)
    if isinstance(section, dict):
        logger.debug("using %r section of %s", _SECTION_KEY, path)
        data = section

    logger.debug("loaded %d entr(ies) from %s", len(data), path)
    return data
