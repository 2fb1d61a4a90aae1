"""
===============================================================================
Propósito:
    Generar las unidades de negocio (áreas) a las que pertenecen los usuarios y
    a las que se atribuye cada ticket.
API pública:
    Dataclass ``BusinessUnit`` y funciones ``new_unit``, ``build_business_units``
    y ``generate_business_units``.
Flujo de datos:
    cantidad + nombres fijos → ``SeedRandom`` → unidades → ``units.json`` y
    ``units.csv``.
Decisiones:
    El código es el nombre truncado a tres caracteres en mayúsculas, sin
    relleno para nombres cortos.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List
from uuid import UUID

from core.randomizer import SeedRandom
from core.storage import SeedOutput

UNITS_BASENAME = "units"


@dataclass(frozen=True, slots=True)
class BusinessUnit:
    """Unidad organizacional que agrupa usuarios."""

    id: UUID
    name: str
    code: str
    number_phone: str
    extension: int

    def to_record(self) -> dict:
        return {
            "_id": self.id,
            "name": self.name,
            "code": self.code,
            "numberPhone": self.number_phone,
            "extension": self.extension,
        }


def unit_code(name: str) -> str:
    return name[:3].upper()


def new_unit(rng: SeedRandom, name: str | None = None, *, phone_format: str = "+51333#######") -> BusinessUnit:
    """Crea una unidad; sin ``name`` se sortea un área funcional."""

    name = name or rng.job_area()
    return BusinessUnit(
        id=rng.new_id(),
        name=name,
        code=unit_code(name),
        number_phone=rng.phone(phone_format),
        extension=rng.integer(0, 999),
    )


def build_business_units(
    count: int,
    additional_names: Iterable[str] = (),
    *,
    rng: SeedRandom,
    phone_format: str = "+51333#######",
) -> List[BusinessUnit]:
    """Primero ``count`` unidades aleatorias y luego una por cada nombre fijo."""

    if count < 0:
        raise ValueError("La cantidad de unidades no puede ser negativa")
    units = [new_unit(rng, phone_format=phone_format) for _ in range(count)]
    units.extend(new_unit(rng, name, phone_format=phone_format) for name in additional_names)
    return units


def generate_business_units(
    count: int,
    additional_names: Iterable[str] = (),
    *,
    rng: SeedRandom,
    output: SeedOutput,
    phone_format: str = "+51333#######",
) -> List[BusinessUnit]:
    units = build_business_units(count, additional_names, rng=rng, phone_format=phone_format)
    output.write_batch(UNITS_BASENAME, [unit.to_record() for unit in units])
    return units
