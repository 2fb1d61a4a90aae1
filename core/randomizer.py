"""
Propósito:
    Concentrar la aleatoriedad de la generación: identificadores, sorteos sobre
    vocabularios fijos, fechas, números, contraseñas y texto de relleno.
API pública:
    ``SeedRandom``, ``DateWindow`` y ``PASSWORD_CLASSES``.
Flujo de datos:
    semilla opcional → ``random.Random`` + ``Faker`` → valores consumidos por
    los generadores de ``catalog``, ``accounts`` y ``tickets``.
Decisiones de diseño:
    Una sola instancia agrupa ambos generadores para que una semilla fija
    reproduzca la corrida completa. El sorteo ``legacy_choice`` conserva el
    sesgo histórico ``floor(random * (n - 1))`` detrás de ``SEED_LEGACY_DRAWS``.
Riesgos:
    Cambiar el orden de las llamadas a ``SeedRandom`` altera los datos
    producidos para una misma semilla.
"""

from __future__ import annotations

import calendar
import math
import random
import string
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Sequence, TypeVar
from uuid import UUID

from django.utils.text import slugify
from faker import Faker

from .providers import JobAreaProvider

T = TypeVar("T")

# Alfabetos por clase de carácter (mismo criterio que ``randomatic``).
PASSWORD_CLASSES = {
    "a": string.ascii_lowercase,
    "A": string.ascii_uppercase,
    "0": string.digits,
    "!": "~!@#$%^&()_+-={}[];',.",
}


@dataclass(frozen=True, slots=True)
class DateWindow:
    """Rango cerrado de fechas con zona horaria usado para los timestamps."""

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("La ventana de fechas tiene inicio posterior al fin")

    @classmethod
    def months_back(cls, today: date, months: int, tz: tzinfo) -> "DateWindow":
        """Ventana desde la medianoche de ``today - months`` hasta la de ``today``."""

        month_index = today.year * 12 + (today.month - 1) - months
        year, month = divmod(month_index, 12)
        month += 1
        day = min(today.day, calendar.monthrange(year, month)[1])
        start = datetime.combine(date(year, month, day), time.min, tzinfo=tz)
        end = datetime.combine(today, time.min, tzinfo=tz)
        return cls(start=start, end=end)


class SeedRandom:
    """Fuente de aleatoriedad compartida por todos los generadores."""

    def __init__(self, seed: int | None = None, *, locale: str = "es_ES", legacy_draws: bool = False):
        self.seed = seed
        self.legacy_draws = legacy_draws
        self.random = random.Random(seed)
        self.faker = Faker(locale)
        self.faker.add_provider(JobAreaProvider)
        if seed is not None:
            self.faker.seed_instance(seed)

    # -- Identificadores ----------------------------------------------------
    def new_id(self) -> UUID:
        return self.faker.uuid4(cast_to=None)

    # -- Sorteos --------------------------------------------------------------
    def choice(self, seq: Sequence[T]) -> T:
        items = list(seq)
        if not items:
            raise ValueError("No se puede sortear sobre una lista vacía")
        return items[self.random.randrange(len(items))]

    def legacy_choice(self, seq: Sequence[T]) -> T:
        items = list(seq)
        if not items:
            raise ValueError("No se puede sortear sobre una lista vacía")
        return items[self._legacy_index(len(items))]

    def legacy_index(self, length: int, seq: Sequence[T]) -> T:
        """Sorteo sesgado acotado por ``length``; fuera de rango devuelve el último elemento."""

        items = list(seq)
        if not items:
            raise ValueError("No se puede sortear sobre una lista vacía")
        index = self._legacy_index(length)
        if index >= len(items):
            return items[-1]
        return items[index]

    def draw(self, seq: Sequence[T]) -> T:
        return self.legacy_choice(seq) if self.legacy_draws else self.choice(seq)

    def _legacy_index(self, length: int) -> int:
        return math.floor(self.random.random() * max(length - 1, 0))

    # -- Números y fechas ---------------------------------------------------
    def integer(self, low: int, high: int) -> int:
        return self.random.randint(low, high)

    def boolean(self) -> bool:
        return self.random.random() < 0.5

    def datetime_between(self, window: DateWindow) -> datetime:
        span = (window.end - window.start).total_seconds()
        return window.start + timedelta(seconds=self.random.uniform(0, span))

    # -- Texto --------------------------------------------------------------
    def password(self, length: int = 12, pattern: str = "aA0!") -> str:
        alphabet = "".join(PASSWORD_CLASSES[key] for key in dict.fromkeys(pattern))
        return "".join(self.random.choice(alphabet) for _ in range(length))

    def forename(self) -> str:
        return self.faker.first_name()

    def surname(self) -> str:
        return self.faker.last_name()

    def email(self, forename: str, surname: str, domain: str) -> str:
        first = slugify(forename).replace("-", "")
        last = slugify(surname).replace("-", "")
        local = self.choice(
            (
                f"{first}.{last}",
                f"{first}_{last}",
                f"{first}{self.random.randint(0, 99)}",
            )
        )
        return f"{local}@{domain}"

    def phone(self, fmt: str) -> str:
        return self.faker.numerify(fmt)

    def job_area(self) -> str:
        return self.faker.job_area()

    def paragraph(self) -> str:
        return self.faker.paragraph()

    def paragraphs(self, count: int = 3) -> str:
        return "\n".join(self.faker.paragraphs(nb=count))
