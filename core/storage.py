"""Escritura de archivos semilla dentro del directorio de salida."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from .exporters import render_csv, render_json

logger = logging.getLogger(__name__)


def ensure_output_dir(path: Path) -> Path:
    """Crea el directorio de salida; si ya existe se registra y se continúa.

    Cualquier otro ``OSError`` (permisos, disco lleno) se propaga.
    """

    try:
        path.mkdir(parents=True)
    except FileExistsError:
        logger.info("Directorio de datos ya existe, se omite su creación", extra={"path": str(path)})
    else:
        logger.info("Directorio de datos creado", extra={"path": str(path)})
    return path


class SeedOutput:
    """Destino de los archivos generados; recuerda qué archivos escribió."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.written: list[Path] = []

    def write_text(self, filename: str, content: str) -> Path:
        target = self.directory / filename
        target.write_text(content, encoding="utf-8")
        self.written.append(target)
        logger.debug("Archivo escrito", extra={"file": filename, "bytes": len(content)})
        return target

    def write_json(self, filename: str, records: Sequence[Mapping[str, Any]]) -> Path:
        return self.write_text(filename, render_json(records))

    def write_csv(self, filename: str, records: Sequence[Mapping[str, Any]], fields: Sequence[str] | None = None) -> Path:
        return self.write_text(filename, render_csv(records, fields))

    def write_batch(self, basename: str, records: Sequence[Mapping[str, Any]], fields: Sequence[str] | None = None) -> None:
        """Escribe ``{basename}.json`` y ``{basename}.csv`` con los mismos registros."""

        self.write_json(f"{basename}.json", records)
        self.write_csv(f"{basename}.csv", records, fields)
        logger.info("Lote escrito", extra={"batch": basename, "records": len(records)})
