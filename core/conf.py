"""
Propósito:
    Reunir los parámetros ``SEED_*`` de ``settings`` en un objeto validado.
API pública:
    ``SeedSettings`` y su constructor ``SeedSettings.from_settings``.
Flujo de datos:
    ``django.conf.settings`` → ``getattr`` con valores por defecto → validación
    → dataclass inmutable consumida por ``tickets.services.run_seed``.
Decisiones de diseño:
    Los valores por defecto replican ``seedgen/settings.py`` para que un
    settings alternativo pueda omitir cualquier ``SEED_*``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .randomizer import PASSWORD_CLASSES

DEFAULT_NAMED_UNITS = ("Human Resources", "Information Technologies")


@dataclass(frozen=True, slots=True)
class SeedSettings:
    output_dir: Path
    random_units: int = 4
    named_units: tuple[str, ...] = DEFAULT_NAMED_UNITS
    users_per_unit: int = 20
    tickets: int = 666
    complaints: int = 123
    email_domain: str = "esprezza.com"
    phone_format: str = "+51333#######"
    window_months: int = 2
    faker_locale: str = "es_ES"
    random_seed: int | None = None
    legacy_draws: bool = False
    hash_workers: int = 4
    password_length: int = 12
    password_pattern: str = "aA0!"

    @classmethod
    def from_settings(cls) -> "SeedSettings":
        """Construye la configuración a partir de ``django.conf.settings``."""

        output_dir = Path(getattr(settings, "SEED_OUTPUT_DIR", "data"))
        if not output_dir.is_absolute():
            output_dir = Path.cwd() / output_dir

        config = cls(
            output_dir=output_dir,
            random_units=getattr(settings, "SEED_RANDOM_UNITS", 4),
            named_units=tuple(getattr(settings, "SEED_NAMED_UNITS", DEFAULT_NAMED_UNITS)),
            users_per_unit=getattr(settings, "SEED_USERS_PER_UNIT", 20),
            tickets=getattr(settings, "SEED_TICKETS", 666),
            complaints=getattr(settings, "SEED_COMPLAINTS", 123),
            email_domain=getattr(settings, "SEED_EMAIL_DOMAIN", "esprezza.com"),
            phone_format=getattr(settings, "SEED_PHONE_FORMAT", "+51333#######"),
            window_months=getattr(settings, "SEED_WINDOW_MONTHS", 2),
            faker_locale=getattr(settings, "SEED_FAKER_LOCALE", "es_ES"),
            random_seed=getattr(settings, "SEED_RANDOM_SEED", None),
            legacy_draws=bool(getattr(settings, "SEED_LEGACY_DRAWS", False)),
            hash_workers=getattr(settings, "SEED_HASH_WORKERS", 4),
            password_length=getattr(settings, "SEED_PASSWORD_LENGTH", 12),
            password_pattern=getattr(settings, "SEED_PASSWORD_PATTERN", "aA0!"),
        )
        config.validate()
        return config

    def validate(self) -> None:
        errors: list[str] = []
        if not isinstance(self.random_units, int) or self.random_units < 0:
            errors.append("SEED_RANDOM_UNITS debe ser un entero no negativo")
        # Cada lote termina en un CSV, que no admite lotes vacíos.
        for name in ("users_per_unit", "tickets", "complaints"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                errors.append(f"SEED_{name.upper()} debe ser un entero positivo")
        if isinstance(self.random_units, int) and self.random_units + len(self.named_units) < 2:
            errors.append("Se requieren al menos dos unidades: empleados y técnicos")
        if self.window_months < 0:
            errors.append("SEED_WINDOW_MONTHS no puede ser negativo")
        if self.hash_workers < 1:
            errors.append("SEED_HASH_WORKERS debe ser mayor a cero")
        if self.password_length < 1:
            errors.append("SEED_PASSWORD_LENGTH debe ser mayor a cero")
        unknown = set(self.password_pattern) - set(PASSWORD_CLASSES)
        if not self.password_pattern or unknown:
            errors.append(f"SEED_PASSWORD_PATTERN inválido: {self.password_pattern!r}")
        if errors:
            raise ImproperlyConfigured("; ".join(errors))
