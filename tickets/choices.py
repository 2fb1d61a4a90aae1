"""Vocabularios fijos de tickets y reclamos.

El orden de cada enumeración es parte del contrato: los sorteos trabajan por
índice y varias reglas dependen de la posición (p. ej. el último dispositivo
agrega una frase al título).
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Device(models.TextChoices):
    DESKTOP = "Pc Escritorio", _("Pc Escritorio")
    LAPTOP = "Pc Portátil", _("Pc Portátil")
    MONITOR = "Monitor", _("Monitor")
    PRINTER = "Impresora", _("Impresora")
    KEYBOARD = "Teclado", _("Teclado")
    MOUSE = "Mouse", _("Mouse")
    SCANNER = "Escáner", _("Escáner")
    PHONE = "Teléfono", _("Teléfono")
    OTHER = "Otro", _("Otro")


# Dispositivos con datos locales: solo para ellos se pregunta por respaldo.
BACKUP_ELIGIBLE_DEVICES = frozenset({Device.DESKTOP, Device.LAPTOP})

TITLE_PHRASES = (
    " presenta problemas",
    " no está funcionando",
    " me está fallando",
    " dejó de funcionar",
)


class Backup(models.TextChoices):
    YES = "Si", _("Si")
    NO = "No", _("No")
    UNKNOWN = "No lo sé", _("No lo sé")


class Status(models.TextChoices):
    WAITING = "En espera", _("En espera")
    IN_PROGRESS = "En proceso", _("En proceso")
    COMPLETED = "Completado", _("Completado")
    CANCELLED = "Cancelado", _("Cancelado")


class TicketType(models.TextChoices):
    HARDWARE = "Hardware", _("Hardware")
    SOFTWARE = "Software", _("Software")
    INTERNET = "Internet", _("Internet")


class ComplaintStatus(models.TextChoices):
    READ = "leido", _("Leído")
    UNREAD = "No leido", _("No leído")


EVALUATION_SCORES = (0, 1, 2, 3)
