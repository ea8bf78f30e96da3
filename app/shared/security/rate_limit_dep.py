# -*- coding: utf-8 -*-
"""
backend/app/shared/security/rate_limit_dep.py

Dependencias FastAPI para el limitador de login.

El limitador es propiedad de la app (app.state.rate_limiter, creado en el
lifespan); estas dependencias solo lo localizan y le pasan la clave.

Autor: Equipo FreelanceHub
Actualizado: 2026-03-06
"""
# Note: NOT using 'from __future__ import annotations' to ensure FastAPI
# can properly resolve Request type annotation for dependency injection

import logging

from fastapi import Depends, Request

from app.observability.metrics import login_rate_limited_total
from app.shared.errors import RateLimited
from app.shared.http_utils.request_meta import get_client_ip
from app.shared.security.rate_limit_service import AttemptOutcome, LoginRateLimiter

logger = logging.getLogger(__name__)


def get_login_rate_limiter(request: Request) -> LoginRateLimiter:
    """Devuelve el limitador creado en el lifespan."""
    limiter = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        raise RuntimeError("rate limiter not initialised; app lifespan did not run")
    return limiter


async def _email_from_body(request: Request, field: str = "email") -> str:
    """Extrae el email del JSON (Starlette cachea el body ya leído)."""
    try:
        body = await request.json()
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    return str(body.get(field) or "").strip().lower()


async def enforce_login_rate_limit(
    request: Request,
    limiter: LoginRateLimiter = Depends(get_login_rate_limiter),
) -> AttemptOutcome:
    """
    Registra el intento de login para la clave ip:email.

    Raises:
        RateLimited: intentos agotados en la ventana actual (-> 429)
    """
    ip = get_client_ip(request)
    email = await _email_from_body(request)
    try:
        return limiter.check(ip, email)
    except RateLimited:
        login_rate_limited_total.inc()
        raise


__all__ = ["get_login_rate_limiter", "enforce_login_rate_limit"]
