from __future__ import annotations

import logging
import time
from collections import Counter

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from core.conf import SeedSettings
from tickets.services import SeedSummary, run_seed


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Genera archivos JSON/CSV de datos semilla (unidades, usuarios, tickets y reclamos)."

    def handle(self, *args, **options):
        try:
            config = SeedSettings.from_settings()
        except ImproperlyConfigured as exc:
            raise CommandError(f"Configuración de datos semilla inválida: {exc}") from exc

        self.stdout.write(self.style.WARNING(f"Generando datos semilla en {config.output_dir} ..."))
        start = time.perf_counter()
        summary = run_seed(config=config)
        duration = round(time.perf_counter() - start, 4)

        logger.info(
            "Comando generate_seed_data completado",
            extra={"duration_seconds": duration, "files": len(summary.files)},
        )
        self._print_summary(summary, duration)

    def _print_summary(self, summary: SeedSummary, duration: float) -> None:
        counts = Counter(ticket.status for ticket in summary.tickets)

        self.stdout.write(self.style.SUCCESS("Datos semilla generados"))
        self.stdout.write(
            self.style.NOTICE(
                f"Unidades: {len(summary.units)} | Empleados: {len(summary.employees)} | "
                f"Técnicos: {len(summary.technicians)}"
            )
        )
        self.stdout.write(
            self.style.NOTICE(
                f"Tickets: {len(summary.tickets)} | "
                + " | ".join(f"{status}: {amount}" for status, amount in sorted(counts.items()))
            )
        )
        self.stdout.write(self.style.NOTICE(f"Reclamos: {len(summary.complaints)}"))
        self.stdout.write(f"Duración (s): {duration}")
        for path in summary.files:
            self.stdout.write(f"  - {path.name}")
