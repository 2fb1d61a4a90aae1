from django.test import SimpleTestCase, tag

from accounts.roles import ROLE_EMPLOYEE, ROLE_TECH, Role, parse_role
from accounts.users import generate_users
from catalog.units import new_unit
from core.randomizer import SeedRandom


class GenerateUsersTests(SimpleTestCase):
    def setUp(self):
        self.rng = SeedRandom(7)
        self.unit = new_unit(self.rng, "Human Resources")

    @tag("unitaria")
    def test_users_share_unit_reference(self):
        """20 usuarios generados para una unidad apuntan todos a su identificador."""
        users = generate_users(20, ROLE_EMPLOYEE, self.unit, rng=self.rng)

        self.assertEqual(len(users), 20)
        self.assertTrue(all(user.area == self.unit.id for user in users))
        self.assertTrue(all(user.active for user in users))
        self.assertEqual(len({user.id for user in users}), 20)

    @tag("unitaria")
    def test_record_shape_does_not_include_role(self):
        user = generate_users(1, ROLE_TECH, self.unit, rng=self.rng)[0]
        record = user.to_record()

        self.assertEqual(list(record.keys()), ["_id", "forename", "surname", "email", "password", "active", "area"])
        self.assertTrue(record["email"].endswith("@esprezza.com"))
        self.assertEqual(len(record["password"]), 12)
        self.assertEqual(user.to_login_record(), {"email": user.email, "password": user.password})

    @tag("unitaria")
    def test_custom_domain_and_password_length(self):
        user = generate_users(1, "employee", self.unit, rng=self.rng, domain="demo.local", password_length=16)[0]
        self.assertTrue(user.email.endswith("@demo.local"))
        self.assertEqual(len(user.password), 16)

    @tag("unitaria")
    def test_unknown_role_is_rejected(self):
        with self.assertRaises(ValueError):
            generate_users(1, "admin", self.unit, rng=self.rng)

    @tag("unitaria")
    def test_parse_role_accepts_values(self):
        self.assertIs(parse_role("technician"), Role.TECHNICIAN)
        self.assertIs(parse_role(Role.EMPLOYEE), Role.EMPLOYEE)
