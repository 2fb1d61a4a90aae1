"""Generación de usuarios semilla asociados a una unidad de negocio."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List
from uuid import UUID

from catalog.units import BusinessUnit
from core.randomizer import SeedRandom

from .roles import Role, parse_role


@dataclass(frozen=True, slots=True)
class User:
    id: UUID
    forename: str
    surname: str
    email: str
    password: str
    active: bool
    area: UUID

    def to_record(self) -> dict:
        return {
            "_id": self.id,
            "forename": self.forename,
            "surname": self.surname,
            "email": self.email,
            "password": self.password,
            "active": self.active,
            "area": self.area,
        }

    def to_login_record(self) -> dict:
        return {"email": self.email, "password": self.password}

    def with_password(self, password: str) -> "User":
        return replace(self, password=password)


def generate_users(
    count: int,
    role: Role | str,
    unit: BusinessUnit,
    *,
    rng: SeedRandom,
    domain: str = "esprezza.com",
    password_length: int = 12,
    password_pattern: str = "aA0!",
) -> List[User]:
    """Genera ``count`` usuarios activos de ``unit`` con contraseña en texto plano.

    ``role`` solo se valida: la partición empleados/técnicos la lleva el llamador.
    """

    parse_role(role)
    if count < 0:
        raise ValueError("La cantidad de usuarios no puede ser negativa")

    users: List[User] = []
    for _ in range(count):
        forename = rng.forename()
        surname = rng.surname()
        users.append(
            User(
                id=rng.new_id(),
                forename=forename,
                surname=surname,
                email=rng.email(forename, surname, domain),
                password=rng.password(password_length, password_pattern),
                active=True,
                area=unit.id,
            )
        )
    return users
