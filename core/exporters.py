"""
Propósito:
    Convertir lotes de registros planos en texto JSON o CSV.
API pública:
    ``SeedJSONEncoder``, ``render_value``, ``render_json`` y ``render_csv``.
Flujo de datos:
    lista de ``dict`` ordenados (``to_record`` de cada dataclass) → texto listo
    para ``core.storage.SeedOutput``.
Decisiones de diseño:
    Fechas y UUID se representan igual en ambos formatos, reutilizando
    ``DjangoJSONEncoder``. Las columnas del CSV salen del primer registro salvo
    que el llamador las indique; el módulo ``csv`` aplica comillas solo cuando
    un valor contiene comas, comillas o saltos de línea.
Riesgos:
    Un lote con registros de forma distinta se rechaza en lugar de reconciliarse.
"""

from __future__ import annotations

import csv
import io
import json
from datetime import date, datetime, timezone as dt_timezone
from enum import Enum
from typing import Any, Mapping, Sequence
from uuid import UUID

from django.core.serializers.json import DjangoJSONEncoder

from .exceptions import EmptyBatchError, SerializationError


class SeedJSONEncoder(DjangoJSONEncoder):
    """``DjangoJSONEncoder`` que normaliza datetimes con zona a UTC (sufijo ``Z``)."""

    def default(self, o):
        if isinstance(o, datetime) and o.tzinfo is not None:
            o = o.astimezone(dt_timezone.utc)
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


_ENCODER = SeedJSONEncoder()


def render_value(value: Any) -> str:
    """Representación textual de un valor para una celda CSV."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date, UUID)):
        return _ENCODER.default(value)
    return str(value)


def render_json(records: Sequence[Mapping[str, Any]]) -> str:
    return json.dumps(list(records), cls=SeedJSONEncoder, ensure_ascii=False, separators=(",", ":"))


def render_csv(records: Sequence[Mapping[str, Any]], fields: Sequence[str] | None = None) -> str:
    """Serializa ``records`` como CSV con encabezado.

    Sin ``fields`` las columnas son las llaves del primer registro y todos los
    registros deben compartirlas. Con ``fields`` explícito, las llaves ausentes
    quedan como celdas vacías.

    Raises:
      EmptyBatchError: si ``records`` está vacío.
      SerializationError: si algún registro no calza con las columnas.
    """

    records = list(records)
    if not records:
        raise EmptyBatchError("No se puede generar CSV de un lote vacío")

    explicit = fields is not None
    columns = list(fields) if explicit else list(records[0].keys())
    expected = set(columns)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(columns)
    for position, record in enumerate(records):
        keys = set(record.keys())
        if (explicit and not keys <= expected) or (not explicit and keys != expected):
            raise SerializationError(
                f"El registro {position} no coincide con las columnas {columns}: {sorted(keys)}"
            )
        writer.writerow([render_value(record.get(column)) for column in columns])
    return buffer.getvalue().removesuffix("\n")
