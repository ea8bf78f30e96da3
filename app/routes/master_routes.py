# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro con dos capas:
  - /api/... (la que consume el SPA detrás del proxy)
  - rutas públicas sin prefijo

Ambas capas montan los mismos routers de módulo: auth, projects,
proposals y files.

Autor: Equipo FreelanceHub
Fecha: 2026-03-07
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from app.modules.auth.routes import router as auth_router
from app.modules.files.routes import get_files_routers
from app.modules.projects.routes import get_projects_router
from app.modules.proposals.routes import router as proposals_router

logger = logging.getLogger(__name__)

api = APIRouter(prefix="/api")
public = APIRouter(prefix="")

_loaded: list[str] = []


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.debug(
        "router_mounted: name=%s layer=%s router_prefix=%s",
        name, target.prefix or "/", router.prefix,
    )


def _module_routers() -> list[tuple[str, APIRouter]]:
    routers = [
        ("auth", auth_router),
        ("projects", get_projects_router()),
        ("proposals", proposals_router),
    ]
    routers.extend(("files", r) for r in get_files_routers())
    return routers


for _layer in (api, public):
    for _name, _router in _module_routers():
        _include(_layer, _router, _name)


def loaded_routers() -> list[str]:
    """Trazabilidad de montaje (capa:nombre)."""
    return list(_loaded)


__all__ = ["api", "public", "loaded_routers"]

# Fin del archivo backend/app/routes/master_routes.py
