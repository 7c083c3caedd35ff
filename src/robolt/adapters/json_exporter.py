"""Exportación JSON de registros obtenidos.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite persistir resultados sin depender del render de la terminal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_jsonable_python


def to_json_data(value: Any) -> Any:
    """Modelos (o listas de modelos) a datos JSON con nombres Python."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return to_jsonable_python(value, by_alias=False)


def export_json(*, value: Any, output_path: Path) -> Path:
    """Exporta `value` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(to_json_data(value), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
