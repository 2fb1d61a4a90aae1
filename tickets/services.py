"""
Propósito:
    Orquestar una corrida completa de datos semilla.
API pública:
    ``run_seed`` y el resumen ``SeedSummary``.
Flujo de datos:
    ``SeedSettings`` → directorio de salida → unidades → usuarios por unidad
    (la última unidad aporta técnicos) → archivos de credenciales → tickets →
    reclamos.
Decisiones de diseño:
    No hay rollback: si un paso falla, los archivos ya escritos quedan en el
    directorio. La fecha de referencia se puede inyectar para obtener una
    ventana de fechas determinista.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List

from django.utils import timezone

from accounts.credentials import generate_user_files
from accounts.roles import ROLE_EMPLOYEE, ROLE_TECH
from accounts.users import User, generate_users
from catalog.units import BusinessUnit, generate_business_units
from core.conf import SeedSettings
from core.randomizer import DateWindow, SeedRandom
from core.storage import SeedOutput, ensure_output_dir

from .generators import Complaint, Ticket, generate_complaints, generate_tickets

logger = logging.getLogger(__name__)

EMPLOYEES_PREFIX = "employees-"
TECHNICIANS_PREFIX = "technicians-"


@dataclass(slots=True)
class SeedSummary:
    output_dir: Path
    window: DateWindow
    units: List[BusinessUnit] = field(default_factory=list)
    employees: List[User] = field(default_factory=list)
    technicians: List[User] = field(default_factory=list)
    tickets: List[Ticket] = field(default_factory=list)
    complaints: List[Complaint] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)


def partition_users(
    units: List[BusinessUnit],
    per_unit: int,
    *,
    rng: SeedRandom,
    config: SeedSettings,
) -> tuple[List[User], List[User]]:
    """Empleados para todas las unidades salvo la última, que aporta los técnicos."""

    employees: List[User] = []
    technicians: List[User] = []
    for index, unit in enumerate(units):
        is_last = index == len(units) - 1
        batch = generate_users(
            per_unit,
            ROLE_TECH if is_last else ROLE_EMPLOYEE,
            unit,
            rng=rng,
            domain=config.email_domain,
            password_length=config.password_length,
            password_pattern=config.password_pattern,
        )
        if is_last:
            technicians.extend(batch)
        else:
            employees.extend(batch)
    return employees, technicians


def run_seed(
    *,
    config: SeedSettings | None = None,
    rng: SeedRandom | None = None,
    today: date | None = None,
) -> SeedSummary:
    config = config or SeedSettings.from_settings()
    config.validate()
    rng = rng or SeedRandom(config.random_seed, locale=config.faker_locale, legacy_draws=config.legacy_draws)
    tz = timezone.get_current_timezone()
    today = today or timezone.localdate()
    window = DateWindow.months_back(today, config.window_months, tz)

    logger.info(
        "Iniciando generación de datos semilla",
        extra={
            "output_dir": str(config.output_dir),
            "seed": config.random_seed,
            "legacy_draws": config.legacy_draws,
            "window": [window.start.isoformat(), window.end.isoformat()],
        },
    )

    ensure_output_dir(config.output_dir)
    output = SeedOutput(config.output_dir)
    summary = SeedSummary(output_dir=config.output_dir, window=window, files=output.written)

    summary.units = generate_business_units(
        config.random_units,
        config.named_units,
        rng=rng,
        output=output,
        phone_format=config.phone_format,
    )
    employees, technicians = partition_users(summary.units, config.users_per_unit, rng=rng, config=config)

    summary.employees = generate_user_files(employees, EMPLOYEES_PREFIX, output=output, workers=config.hash_workers)
    summary.technicians = generate_user_files(technicians, TECHNICIANS_PREFIX, output=output, workers=config.hash_workers)

    # Los pools conservan la contraseña plana; tickets y reclamos solo usan ids.
    summary.tickets = generate_tickets(
        config.tickets, employees, technicians, rng=rng, window=window, output=output, tz=tz
    )
    summary.complaints = generate_complaints(
        config.complaints, employees, technicians, rng=rng, window=window, output=output
    )

    logger.info(
        "Datos semilla generados",
        extra={
            "units": len(summary.units),
            "employees": len(summary.employees),
            "technicians": len(summary.technicians),
            "tickets": len(summary.tickets),
            "complaints": len(summary.complaints),
            "files": len(summary.files),
        },
    )
    return summary
