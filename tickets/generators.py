"""
Propósito:
    Generar tickets de soporte y reclamos que referencian usuarios y técnicos
    ya generados en la misma corrida.
API pública:
    Dataclasses ``Ticket`` y ``Complaint``; funciones ``build_tickets``,
    ``generate_tickets``, ``build_complaints`` y ``generate_complaints``.
Flujo de datos:
    pools de ``accounts.users.User`` + ``DateWindow`` → ``SeedRandom`` →
    registros → ``tickets.*`` / ``complaints.*``.
Decisiones de diseño:
    Los sorteos pasan por ``SeedRandom.draw`` para que ``SEED_LEGACY_DRAWS``
    reproduzca el sesgo histórico en un único lugar. En modo histórico el tipo
    se acota por la cantidad de estados (con respaldo al último tipo); en modo
    uniforme se acota por la cantidad de tipos.
Riesgos:
    En modo histórico ``Device.OTHER`` nunca sale sorteado, por lo que el
    título con frase no aparece en esos datos.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import List, Sequence
from uuid import UUID

from django.utils import timezone

from accounts.users import User
from core.randomizer import DateWindow, SeedRandom
from core.storage import SeedOutput

from .choices import (
    BACKUP_ELIGIBLE_DEVICES,
    EVALUATION_SCORES,
    TITLE_PHRASES,
    Backup,
    ComplaintStatus,
    Device,
    Status,
    TicketType,
)

TICKETS_BASENAME = "tickets"
COMPLAINTS_BASENAME = "complaints"

# "tittle" es el nombre de campo que espera el helpdesk consumidor.
TICKET_FIELDS = (
    "tittle",
    "dateRequest",
    "hour",
    "observation",
    "backup",
    "device",
    "status",
    "area",
    "type",
    "assignedBy",
    "assignedTo",
    "evaluation",
)


@dataclass(frozen=True, slots=True)
class Ticket:
    title: str
    date_request: datetime
    hour: str
    observation: str
    backup: Backup
    device: Device
    status: Status
    area: UUID
    type: TicketType
    assigned_by: UUID
    assigned_to: UUID
    evaluation: int | None = None

    def to_record(self) -> dict:
        record = {
            "tittle": self.title,
            "dateRequest": self.date_request,
            "hour": self.hour,
            "observation": self.observation,
            "backup": self.backup,
            "device": self.device,
            "status": self.status,
            "area": self.area,
            "type": self.type,
            "assignedBy": self.assigned_by,
            "assignedTo": self.assigned_to,
        }
        if self.evaluation is not None:
            record["evaluation"] = self.evaluation
        return record


@dataclass(frozen=True, slots=True)
class Complaint:
    created_by: UUID
    date_incidence: datetime
    technician_id: UUID
    created_at: datetime
    message: str
    status: ComplaintStatus

    def to_record(self) -> dict:
        return {
            "createdBy": self.created_by,
            "dateIncidence": self.date_incidence,
            "technicianId": self.technician_id,
            "createdAt": self.created_at,
            "message": self.message,
            "status": self.status,
        }


def _check_pools(count: int, users: Sequence[User], technicians: Sequence[User]) -> None:
    if count < 0:
        raise ValueError("La cantidad a generar no puede ser negativa")
    if count and not users:
        raise ValueError("Se requiere al menos un usuario solicitante")
    if count and not technicians:
        raise ValueError("Se requiere al menos un técnico")


def format_hour(moment: datetime, tz: tzinfo) -> str:
    return timezone.localtime(moment, tz).strftime("%H:%M")


def build_title(device: Device, rng: SeedRandom) -> str:
    if device == Device.OTHER:
        return f"{device.value}{rng.draw(TITLE_PHRASES)}"
    return device.value


def _pick_type(rng: SeedRandom) -> TicketType:
    if rng.legacy_draws:
        return rng.legacy_index(len(Status), TicketType)
    return rng.choice(TicketType)


def build_tickets(
    count: int,
    users: Sequence[User],
    technicians: Sequence[User],
    *,
    rng: SeedRandom,
    window: DateWindow,
    tz: tzinfo | None = None,
) -> List[Ticket]:
    _check_pools(count, users, technicians)
    tz = tz or timezone.get_current_timezone()

    tickets: List[Ticket] = []
    for _ in range(count):
        device = rng.draw(Device)
        title = build_title(device, rng)
        requested_at = rng.datetime_between(window)
        observation = rng.paragraph()
        backup = rng.draw(Backup) if device in BACKUP_ELIGIBLE_DEVICES else Backup.NO
        status = rng.draw(Status)
        requester = rng.draw(users)
        ticket_type = _pick_type(rng)
        technician = rng.draw(technicians)
        evaluation = rng.choice(EVALUATION_SCORES) if status == Status.COMPLETED else None

        tickets.append(
            Ticket(
                title=title,
                date_request=requested_at,
                hour=format_hour(requested_at, tz),
                observation=observation,
                backup=backup,
                device=device,
                status=status,
                area=requester.area,
                type=ticket_type,
                assigned_by=requester.id,
                assigned_to=technician.id,
                evaluation=evaluation,
            )
        )
    return tickets


def generate_tickets(
    count: int,
    users: Sequence[User],
    technicians: Sequence[User],
    *,
    rng: SeedRandom,
    window: DateWindow,
    output: SeedOutput,
    tz: tzinfo | None = None,
) -> List[Ticket]:
    tickets = build_tickets(count, users, technicians, rng=rng, window=window, tz=tz)
    output.write_batch(TICKETS_BASENAME, [ticket.to_record() for ticket in tickets], fields=TICKET_FIELDS)
    return tickets


def build_complaints(
    count: int,
    users: Sequence[User],
    technicians: Sequence[User],
    *,
    rng: SeedRandom,
    window: DateWindow,
) -> List[Complaint]:
    _check_pools(count, users, technicians)

    complaints: List[Complaint] = []
    for _ in range(count):
        creator = rng.draw(users)
        technician = rng.draw(technicians)
        incidence = rng.datetime_between(window)
        complaints.append(
            Complaint(
                created_by=creator.id,
                date_incidence=incidence,
                technician_id=technician.id,
                created_at=incidence,
                message=rng.paragraphs(3),
                status=ComplaintStatus.READ if rng.boolean() else ComplaintStatus.UNREAD,
            )
        )
    return complaints


def generate_complaints(
    count: int,
    users: Sequence[User],
    technicians: Sequence[User],
    *,
    rng: SeedRandom,
    window: DateWindow,
    output: SeedOutput,
) -> List[Complaint]:
    complaints = build_complaints(count, users, technicians, rng=rng, window=window)
    output.write_batch(COMPLAINTS_BASENAME, [complaint.to_record() for complaint in complaints])
    return complaints
