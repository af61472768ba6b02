"""Exportación JSON de los registros publicados.

Por qué JSON:
- Interoperabilidad con otros pasos de un pipeline (CI, provisioning).
- Mismo formato que reciben los colectores: `name`, `value`, `tags`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from core.domain.models import OutputRecord


def records_to_payload(records: Iterable[OutputRecord]) -> list[dict]:
    return [record.model_dump(mode="json") for record in records]


def export_records_json(*, records: Iterable[OutputRecord], output_path: Path) -> Path:
    """Exporta los registros a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = records_to_payload(records)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
