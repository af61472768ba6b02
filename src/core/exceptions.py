"""Errores del Core.

Por qué una jerarquía propia:
- La CLI (u otro host) captura `PwgenError` sin conocer los detalles de cada
  fallo.
- Los errores de la fuente de entropía se encadenan (`raise ... from`) para no
  perder la causa original.
"""

from __future__ import annotations


class PwgenError(Exception):
    """Error base del toolkit."""


class ConfigurationError(PwgenError):
    """Configuración ilegible o con forma incorrecta (fichero de lote, opciones, PWGEN_*)."""


class PasswordGenerationError(PwgenError):
    """La fuente de entropía falló al generar una contraseña."""
