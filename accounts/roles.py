"""
===============================================================================
Propósito:
    Centralizar los roles con los que se generan usuarios semilla.
API pública:
    Enumeración ``Role``, constantes ``ROLE_EMPLOYEE`` y ``ROLE_TECH`` y la
    función ``parse_role``.
Decisiones:
    El rol no se persiste en el registro del usuario; solo decide en qué pool
    (empleados o técnicos) termina cada lote generado.
===============================================================================
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Role(models.TextChoices):
    EMPLOYEE = "employee", _("Empleado")
    TECHNICIAN = "technician", _("Técnico")


ROLE_EMPLOYEE = Role.EMPLOYEE
ROLE_TECH = Role.TECHNICIAN


def parse_role(value) -> Role:
    """Normaliza ``value`` a ``Role``; lanza ``ValueError`` si no es un rol conocido."""

    try:
        return Role(value)
    except ValueError:
        raise ValueError(f"Rol desconocido: {value!r}") from None
