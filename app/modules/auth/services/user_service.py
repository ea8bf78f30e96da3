# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/user_service.py

Servicio de usuarios: lectura por id/email, registro y autenticación
por contraseña.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from __future__ import annotations

import logging
from typing import Optional

from app.shared.database.entity_store import EntityStore, Row
from app.shared.errors import ValidationRejected
from app.shared.utils.security import hash_password, verify_password

log = logging.getLogger(__name__)

_USER_COLUMNS = "id, email, password_hash, full_name, avatar_url, role, created_at"


def _mask_email(email: str) -> str:
    """Enmascara email para logging seguro: us***@dominio.com"""
    e = (email or "").strip().lower()
    if "@" not in e:
        return "***"
    local, domain = e.split("@", 1)
    return f"{local[:2]}***@{domain}"


class UserService:
    def __init__(self, store: EntityStore):
        self.store = store

    async def get_by_id(self, user_id: int) -> Optional[Row]:
        return await self.store.query_one(
            f"SELECT {_USER_COLUMNS} FROM users WHERE id = :id", {"id": user_id}
        )

    async def get_by_email(self, email: str) -> Optional[Row]:
        return await self.store.query_one(
            f"SELECT {_USER_COLUMNS} FROM users WHERE email = :email",
            {"email": email.strip().lower()},
        )

    async def register(
        self,
        *,
        email: str,
        password: str,
        full_name: str,
        role: str,
        avatar_url: Optional[str] = None,
    ) -> Row:
        """
        Crea un usuario nuevo.

        Raises:
            ValidationRejected("email_already_registered")
        """
        normalized = email.strip().lower()
        if await self.get_by_email(normalized) is not None:
            raise ValidationRejected("email_already_registered", "Email is already registered")

        password_hash = hash_password(password)

        async def work() -> int:
            result = await self.store.execute(
                """
                INSERT INTO users (email, password_hash, full_name, avatar_url, role)
                VALUES (:email, :password_hash, :full_name, :avatar_url, :role)
                RETURNING id
                """,
                {
                    "email": normalized,
                    "password_hash": password_hash,
                    "full_name": full_name,
                    "avatar_url": avatar_url,
                    "role": role,
                },
            )
            return result.last_insert_id

        user_id = await self.store.run_in_transaction(work)
        log.info("user_registered: user_id=%s email=%s role=%s", user_id, _mask_email(normalized), role)
        return await self.get_by_id(user_id)

    async def authenticate(self, email: str, password: str) -> Optional[Row]:
        """Devuelve el usuario si email y contraseña coinciden; None en otro caso."""
        user = await self.get_by_email(email)
        if user is None or not verify_password(password, user["password_hash"]):
            log.info("login_failed: email=%s", _mask_email(email))
            return None
        return user


__all__ = ["UserService"]
