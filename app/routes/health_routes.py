# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check del backend FreelanceHub.

Autor: Equipo FreelanceHub
Fecha: 2026-03-07
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.core.settings import get_settings
from app.core.db import check_database_health

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check del backend",
    description="Estado básico del backend con verificación de conectividad a la base de datos.",
)
async def health_check(request: Request) -> dict:
    settings = get_settings()

    db_ok = await check_database_health(timeout_s=2.0)
    scheduler = getattr(request.app.state, "scheduler", None)

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {"reachable": db_ok},
        "scheduler": {"running": bool(scheduler and scheduler.is_running)},
        "service": {"name": settings.app_name, "version": "0.1.0"},
    }

# Fin del archivo backend/app/routes/health_routes.py
