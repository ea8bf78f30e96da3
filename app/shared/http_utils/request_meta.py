# -*- coding: utf-8 -*-
"""
backend/app/shared/http_utils/request_meta.py

Extracción de la IP del cliente para la clave del limitador de login,
también detrás de proxies (nginx, balanceadores).

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""
from __future__ import annotations

from starlette.requests import Request

from app.shared.config import settings


def get_client_ip(request: Request) -> str:
    """
    IP del cliente.

    Con TRUST_PROXY_HEADERS=true se usa el primer valor de X-Forwarded-For
    (o X-Real-IP); si no, solo la IP del socket. Devuelve "unknown" si no
    se puede determinar.
    """
    if settings.trust_proxy_headers:
        xff = request.headers.get("x-forwarded-for")
        if xff:
            return xff.split(",")[0].strip()
        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host

    return "unknown"


__all__ = ["get_client_ip"]
