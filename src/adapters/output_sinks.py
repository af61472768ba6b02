"""Colectores de salida concretos.

Implementan `core.interfaces.sink.OutputSink`.
"""

from __future__ import annotations

import logging

from core.domain.models import OutputRecord
from core.interfaces.sink import OutputSink

logger = logging.getLogger(__name__)


class MemoryOutputSink(OutputSink):
    """Acumula los registros en orden de llegada."""

    def __init__(self) -> None:
        self.records: list[OutputRecord] = []

    def append(self, record: OutputRecord) -> None:
        logger.debug("collected output name=%s tags=%s", record.name, record.tags)
        self.records.append(record)

    def by_name(self, name: str) -> OutputRecord | None:
        for record in self.records:
            if record.name == name:
                return record
        return None

    def __len__(self) -> int:
        return len(self.records)


class NullOutputSink(OutputSink):
    """Descarta los registros (default cuando el llamador no pasa colector)."""

    def append(self, record: OutputRecord) -> None:
        return None
