"""Contrato del colector de salidas.

Por qué Protocol:
- El host decide dónde terminan los registros (memoria, fichero, su propio
  almacén de outputs); el Core solo necesita `append`.
- Permite testear el driver con un colector en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import OutputRecord


@runtime_checkable
class OutputSink(Protocol):
    """Destino de los registros etiquetados de cada contraseña generada."""

    def append(self, record: OutputRecord) -> None:
        """Recibe un registro; se llama exactamente una vez por resultado."""

        ...
