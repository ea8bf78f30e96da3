# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/dependencies.py

Dependencias de identidad para FastAPI.

Provee:
- get_current_user: valida el Bearer JWT, carga el usuario y devuelve
  el Principal {id, role} del request (401 si falta o es inválido)
- require_role(*roles): compuerta de rol en la frontera HTTP (Forbidden)

Las rutas solo reciben un Principal ya resuelto; las políticas de
acceso autorizan, nunca autentican.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.services.user_service import UserService
from app.observability.metrics import record_denial
from app.shared.auth_context import Principal, Role, extract_principal
from app.shared.database import EntityStore, get_db
from app.shared.errors import Forbidden
from app.shared.utils.security import decode_access_token

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": "invalid_token", "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
) -> Principal:
    """
    Dependencia de autenticación para endpoints protegidos.

    Raises:
        HTTPException 401: token ausente, inválido, expirado o usuario inexistente
    """
    if creds is None or not creds.credentials:
        raise _unauthorized("Missing bearer token")

    payload = decode_access_token(creds.credentials)
    if not payload or not payload.get("sub"):
        raise _unauthorized("Invalid or expired token")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise _unauthorized("Token subject is not a user id")

    user = await UserService(EntityStore(db)).get_by_id(user_id)
    if user is None:
        logger.info("auth_user_not_found: user_id=%s", user_id)
        raise _unauthorized("User not found")

    return extract_principal(user)


def require_role(*roles: Role) -> Callable[..., Principal]:
    """
    Fábrica de dependencias que exige uno de `roles`.

        @router.post("/", dependencies=[Depends(require_role(Role.freelancer))])
    """
    allowed = frozenset(roles)

    async def _require_role(principal: Principal = Depends(get_current_user)) -> Principal:
        if principal.role not in allowed:
            logger.info(
                "role_gate_denied: user_id=%s role=%s required=%s",
                principal.id, principal.role, sorted(r.value for r in allowed),
            )
            record_denial("role", "gate")
            raise Forbidden(f"This action requires role: {', '.join(sorted(r.value for r in allowed))}")
        return principal

    return _require_role


__all__ = ["get_current_user", "require_role"]

# Fin del archivo backend/app/modules/auth/dependencies.py
