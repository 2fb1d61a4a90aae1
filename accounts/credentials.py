"""
Propósito:
    Reemplazar las contraseñas en texto plano por su hash y escribir los
    archivos de usuarios y de login de un pool.
API pública:
    ``hash_passwords``, ``generate_user_files`` y ``credential_filenames``.
Flujo de datos:
    usuarios con contraseña plana → ``make_password`` (Argon2 según
    ``PASSWORD_HASHERS``) en un pool de hilos → ``{prefix}users.*`` y
    ``{prefix}users-login.*``.
Decisiones de diseño:
    ``Executor.map`` conserva el orden de entrada aunque los hashes terminen en
    otro orden. El CSV de login se construye con la proyección email/hash, igual
    que su JSON.
Riesgos:
    Un error de hashing aborta la escritura del pool completo.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from django.contrib.auth.hashers import make_password

from core.storage import SeedOutput

from .users import User

logger = logging.getLogger(__name__)


def credential_filenames(prefix: str) -> List[str]:
    return [
        f"{prefix}users.json",
        f"{prefix}users.csv",
        f"{prefix}users-login.json",
        f"{prefix}users-login.csv",
    ]


def hash_passwords(users: Sequence[User], *, workers: int = 4) -> List[User]:
    """Devuelve copias de ``users`` con la contraseña hasheada, en el mismo orden."""

    if not users:
        return []
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        hashes = list(executor.map(make_password, [user.password for user in users]))
    logger.info(
        "Contraseñas hasheadas",
        extra={"users": len(users), "workers": workers, "duration_seconds": round(time.perf_counter() - start, 4)},
    )
    return [user.with_password(hashed) for user, hashed in zip(users, hashes)]


def generate_user_files(users: Sequence[User], prefix: str, *, output: SeedOutput, workers: int = 4) -> List[User]:
    """Hashea las contraseñas y escribe los cuatro archivos del pool ``prefix``."""

    hashed = hash_passwords(users, workers=workers)
    users_json, users_csv, login_json, login_csv = credential_filenames(prefix)

    user_records = [user.to_record() for user in hashed]
    login_records = [user.to_login_record() for user in hashed]

    output.write_json(users_json, user_records)
    output.write_csv(users_csv, user_records)
    output.write_json(login_json, login_records)
    output.write_csv(login_csv, login_records)
    return hashed
