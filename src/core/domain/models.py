"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Cada entrada de configuración se convierte una sola vez en un modelo tipado
  con defaults explícitos, en vez de consultar un dict con `get()` por todas
  partes.
- La serialización de resultados (`model_dump`) mantiene los nombres de campo
  que consumen los colectores de salida.

Nota:
- Estos modelos describen *qué* es una contraseña pedida/generada, no *cómo*
  se genera ni dónde se publica.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

DEFAULT_LENGTH = 16
DEFAULT_TAGS: tuple[str, ...] = ("toolkit", "pwgen")


class PasswordSpec(BaseModel):
    """Petición de contraseña construida a partir de una entrada de configuración.

    Claves reconocidas: `name`, `len`, `encoding`, `symbols`, `env`.
    Cualquier otra clave se ignora.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre de salida; por defecto la clave de la entrada.",
    )
    length: int = Field(
        default=DEFAULT_LENGTH,
        alias="len",
        description="Longitud pedida. Valores <= 0 se normalizan al default.",
    )
    encoding: str = Field(
        default="",
        description="Selector de codificación (sha256/sha512/md5/base64; otro -> plain).",
    )
    symbols: bool = Field(
        default=False,
        description="Incluir símbolos además de letras y dígitos.",
    )
    env: bool = Field(
        default=False,
        description="Exportar PREFIX_PLAIN / PREFIX_ENCODED al entorno del proceso.",
    )

    @field_validator("encoding", mode="before")
    @classmethod
    def _none_encoding_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_entry(
        cls,
        key: str,
        entry: dict[str, Any],
        *,
        default_length: int = DEFAULT_LENGTH,
    ) -> "PasswordSpec":
        """Construye la petición desde una entrada de configuración, rellenando defaults."""

        data = dict(entry)
        if data.get("name") in (None, ""):
            data["name"] = key
        if data.get("len") is None:
            data["len"] = default_length
        spec = cls.model_validate(data)
        if spec.length <= 0:
            spec = spec.model_copy(update={"length": default_length})
        return spec


class PasswordResult(BaseModel):
    """Contraseña generada, lista para publicarse.

    Por qué `env_prefix` no se serializa:
    - Es un detalle interno del paso de publicación; el registro de salida solo
      expone los nombres de variables ya derivados (`environment`).
    """

    name: str = Field(..., min_length=1, description="Nombre de salida.")
    length: int = Field(..., ge=1, description="Longitud efectiva del texto plano.")
    encoding: str = Field(..., description="Codificación efectiva (normalizada).")
    plain: str = Field(..., description="Contraseña generada en claro.")
    encoded: str = Field(..., description="Contraseña transformada según `encoding`.")
    symbols: bool = Field(default=False, description="Si el alfabeto incluía símbolos.")
    environment: list[str] = Field(
        default_factory=list,
        description="Variables de entorno exportadas (PREFIX_PLAIN, PREFIX_ENCODED).",
    )
    env_prefix: str | None = Field(
        default=None,
        exclude=True,
        description="Prefijo de variables de entorno; None si no se exporta.",
    )


class OutputRecord(BaseModel):
    """Registro etiquetado entregado al colector de salidas del host."""

    name: str = Field(..., min_length=1, description="Nombre de la salida.")
    value: PasswordResult = Field(..., description="Resultado completo.")
    tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TAGS),
        description="Etiquetas del registro.",
    )
