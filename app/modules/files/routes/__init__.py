# -*- coding: utf-8 -*-
"""
backend/app/modules/files/routes/__init__.py

Ensamblador de routers del módulo Files.
"""

from .files_routes import router as files_router


def get_files_routers() -> list:
    """Devuelve los routers del módulo Files listos para montar."""
    return [files_router]


__all__ = ["get_files_routers", "files_router"]

# Fin del archivo backend/app/modules/files/routes/__init__.py
