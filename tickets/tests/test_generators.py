import json
import tempfile
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfo

from django.test import SimpleTestCase, tag

from accounts.roles import ROLE_EMPLOYEE, ROLE_TECH
from accounts.users import generate_users
from catalog.units import new_unit
from core.exporters import render_csv
from core.randomizer import DateWindow, SeedRandom
from core.storage import SeedOutput
from tickets.choices import (
    BACKUP_ELIGIBLE_DEVICES,
    TITLE_PHRASES,
    Backup,
    ComplaintStatus,
    Device,
    Status,
    TicketType,
)
from tickets.generators import (
    TICKET_FIELDS,
    build_complaints,
    build_tickets,
    build_title,
    format_hour,
    generate_complaints,
    generate_tickets,
)

LIMA = ZoneInfo("America/Lima")


class TicketFixturesMixin:
    seed = 42
    legacy = False

    def setUp(self):
        self.rng = SeedRandom(self.seed, legacy_draws=self.legacy)
        self.window = DateWindow.months_back(date(2024, 6, 15), 2, LIMA)
        units = [new_unit(self.rng, name) for name in ("Finanzas", "Operaciones", "Information Technologies")]
        self.users = generate_users(10, ROLE_EMPLOYEE, units[0], rng=self.rng) + generate_users(
            10, ROLE_EMPLOYEE, units[1], rng=self.rng
        )
        self.technicians = generate_users(5, ROLE_TECH, units[2], rng=self.rng)
        self.users_by_id = {user.id: user for user in self.users}


class BuildTicketsTests(TicketFixturesMixin, SimpleTestCase):
    @tag("unitaria")
    def test_area_matches_requester_unit(self):
        """El área de cada ticket es la unidad del usuario solicitante."""
        tickets = build_tickets(300, self.users, self.technicians, rng=self.rng, window=self.window, tz=LIMA)

        technician_ids = {tech.id for tech in self.technicians}
        for ticket in tickets:
            requester = self.users_by_id[ticket.assigned_by]
            self.assertEqual(ticket.area, requester.area)
            self.assertIn(ticket.assigned_to, technician_ids)

    @tag("unitaria")
    def test_evaluation_only_when_completed(self):
        """La evaluación existe si y solo si el estado es Completado, con valor 0..3."""
        tickets = build_tickets(400, self.users, self.technicians, rng=self.rng, window=self.window, tz=LIMA)

        self.assertTrue(any(ticket.status == Status.COMPLETED for ticket in tickets))
        for ticket in tickets:
            record = ticket.to_record()
            if ticket.status == Status.COMPLETED:
                self.assertIn(record["evaluation"], {0, 1, 2, 3})
            else:
                self.assertNotIn("evaluation", record)

    @tag("unitaria")
    def test_backup_only_drawn_for_computers(self):
        tickets = build_tickets(400, self.users, self.technicians, rng=self.rng, window=self.window, tz=LIMA)
        for ticket in tickets:
            if ticket.device not in BACKUP_ELIGIBLE_DEVICES:
                self.assertEqual(ticket.backup, Backup.NO)
        eligible = {ticket.backup for ticket in tickets if ticket.device in BACKUP_ELIGIBLE_DEVICES}
        self.assertEqual(eligible, set(Backup))

    @tag("unitaria")
    def test_hour_and_date_come_from_same_timestamp(self):
        tickets = build_tickets(50, self.users, self.technicians, rng=self.rng, window=self.window, tz=LIMA)
        for ticket in tickets:
            self.assertGreaterEqual(ticket.date_request, self.window.start)
            self.assertLessEqual(ticket.date_request, self.window.end)
            self.assertEqual(ticket.hour, ticket.date_request.astimezone(LIMA).strftime("%H:%M"))
            self.assertRegex(ticket.hour, r"^\d{2}:\d{2}$")

    @tag("unitaria")
    def test_uniform_draws_reach_every_type_and_device(self):
        tickets = build_tickets(600, self.users, self.technicians, rng=self.rng, window=self.window, tz=LIMA)
        self.assertEqual({ticket.type for ticket in tickets}, set(TicketType))
        self.assertEqual({ticket.device for ticket in tickets}, set(Device))

    @tag("unitaria")
    def test_title_adds_phrase_for_other_device(self):
        title = build_title(Device.OTHER, self.rng)
        self.assertTrue(title.startswith("Otro "))
        self.assertIn(title[len("Otro"):], TITLE_PHRASES)
        self.assertEqual(build_title(Device.MONITOR, self.rng), "Monitor")

    @tag("unitaria")
    def test_format_hour_uses_local_timezone(self):
        moment = self.window.start
        self.assertEqual(format_hour(moment, LIMA), "00:00")

    @tag("unitaria")
    def test_empty_pools_are_rejected(self):
        with self.assertRaises(ValueError):
            build_tickets(1, [], self.technicians, rng=self.rng, window=self.window)
        with self.assertRaises(ValueError):
            build_complaints(1, self.users, [], rng=self.rng, window=self.window)


class LegacyTicketDrawsTests(TicketFixturesMixin, SimpleTestCase):
    legacy = True

    @tag("unitaria")
    def test_legacy_mode_never_draws_last_entries(self):
        """En modo histórico nunca aparecen el último dispositivo, estado, respaldo ni usuario."""
        tickets = build_tickets(600, self.users, self.technicians, rng=self.rng, window=self.window, tz=LIMA)

        self.assertNotIn(Device.OTHER, {ticket.device for ticket in tickets})
        self.assertNotIn(Status.CANCELLED, {ticket.status for ticket in tickets})
        self.assertNotIn(Backup.UNKNOWN, {ticket.backup for ticket in tickets})
        self.assertNotIn(self.users[-1].id, {ticket.assigned_by for ticket in tickets})
        self.assertNotIn(self.technicians[-1].id, {ticket.assigned_to for ticket in tickets})
        self.assertTrue({ticket.type for ticket in tickets} <= set(TicketType))
        self.assertTrue(all(ticket.title == ticket.device.value for ticket in tickets))


class BuildComplaintsTests(TicketFixturesMixin, SimpleTestCase):
    @tag("unitaria")
    def test_complaints_reference_pools(self):
        complaints = build_complaints(100, self.users, self.technicians, rng=self.rng, window=self.window)

        technician_ids = {tech.id for tech in self.technicians}
        for complaint in complaints:
            self.assertIn(complaint.created_by, self.users_by_id)
            self.assertIn(complaint.technician_id, technician_ids)
            self.assertEqual(complaint.created_at, complaint.date_incidence)
            self.assertEqual(complaint.message.count("\n"), 2)
        self.assertEqual({complaint.status for complaint in complaints}, set(ComplaintStatus))

    @tag("unitaria")
    def test_complaint_record_shape(self):
        complaint = build_complaints(1, self.users, self.technicians, rng=self.rng, window=self.window)[0]
        self.assertEqual(
            list(complaint.to_record().keys()),
            ["createdBy", "dateIncidence", "technicianId", "createdAt", "message", "status"],
        )


class TicketFilesTests(TicketFixturesMixin, SimpleTestCase):
    @tag("integral")
    def test_json_round_trip_reproduces_csv(self):
        """Releer el JSON y serializarlo otra vez produce exactamente el mismo CSV."""
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            output = SeedOutput(root)
            generate_tickets(80, self.users, self.technicians, rng=self.rng, window=self.window, output=output, tz=LIMA)
            generate_complaints(20, self.users, self.technicians, rng=self.rng, window=self.window, output=output)

            tickets_json = json.loads((root / "tickets.json").read_text(encoding="utf-8"))
            tickets_csv = (root / "tickets.csv").read_text(encoding="utf-8")
            complaints_json = json.loads((root / "complaints.json").read_text(encoding="utf-8"))
            complaints_csv = (root / "complaints.csv").read_text(encoding="utf-8")

        self.assertEqual(render_csv(tickets_json, fields=TICKET_FIELDS), tickets_csv)
        self.assertEqual(render_csv(complaints_json), complaints_csv)
        self.assertEqual(tickets_csv.split("\n")[0], ",".join(TICKET_FIELDS))
        self.assertEqual(len(tickets_json), 80)
        self.assertEqual(len(complaints_json), 20)
