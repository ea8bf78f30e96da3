# -*- coding: utf-8 -*-
"""
backend/app/shared/auth_context.py

Contexto de identidad del request: el Principal autenticado.

Este módulo proporciona una ÚNICA FUENTE DE VERDAD para representar al
usuario que hace la petición ({id, role}) y para extraerlo de los objetos
que entrega la capa de autenticación (modelo ORM, dict de token, etc.).

El Principal es inmutable durante todo el request; las políticas de
acceso solo autorizan, nunca autentican.

Autor: Equipo FreelanceHub
Fecha: 2026-03-04
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class Role(StrEnum):
    """Roles de usuario de la plataforma."""
    client = "client"
    freelancer = "freelancer"
    admin = "admin"


@dataclass(frozen=True)
class Principal:
    """Actor autenticado del request. `role` se normaliza a Role al construir."""
    id: int
    role: Role

    def __post_init__(self) -> None:
        # ValueError si el rol no pertenece al conjunto
        object.__setattr__(self, "role", Role(self.role))

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin

    @property
    def is_client(self) -> bool:
        return self.role == Role.client

    @property
    def is_freelancer(self) -> bool:
        return self.role == Role.freelancer


def extract_principal(user: Any) -> Principal:
    """
    Construye un Principal a partir del objeto usuario autenticado.

    Acepta objetos con atributos `id`/`role` (modelo User) o dicts con
    las mismas claves (payload de token).

    Raises:
        HTTPException 401: si falta id o role, o no son válidos
    """
    if isinstance(user, Principal):
        return user

    if isinstance(user, dict):
        user_id = user.get("id")
        role = user.get("role")
    else:
        user_id = getattr(user, "id", None)
        role = getattr(user, "role", None)

    if user_id is None or role is None:
        logger.warning("Auth context missing id/role: %s", type(user).__name__)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid auth context",
        )

    try:
        return Principal(id=int(user_id), role=Role(role))
    except (TypeError, ValueError) as e:
        logger.warning("Invalid auth context values: id=%r role=%r (%s)", user_id, role, e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid auth context",
        )


__all__ = ["Role", "Principal", "extract_principal"]

# Fin del archivo backend/app/shared/auth_context.py
