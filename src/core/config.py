"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que servicios y adaptadores lean los mismos defaults.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from core.domain.models import DEFAULT_LENGTH, DEFAULT_TAGS
from core.exceptions import ConfigurationError


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pwgen-toolkit"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pwgen-toolkit"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pwgen-toolkit"
    return Path.home() / ".config" / "pwgen-toolkit"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="PWGEN_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_length: int = Field(
        default=DEFAULT_LENGTH,
        ge=1,
        description="Longitud usada cuando `len` falta o es <= 0.",
    )
    output_tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TAGS),
        description="Etiquetas de los registros publicados en el colector de salidas.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )
    mask_plain: bool = Field(
        default=True,
        description="Ocultar el texto plano en la tabla de resultados de la CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings() -> AppSettings:
    """Construye `AppSettings`; un `PWGEN_*` inválido se reporta como `ConfigurationError`."""

    try:
        return AppSettings()
    except (ValidationError, SettingsError) as exc:
        raise ConfigurationError(f"invalid PWGEN_* settings: {exc}") from exc
