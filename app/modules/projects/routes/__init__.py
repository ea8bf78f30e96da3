# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/__init__.py

Router principal del módulo Projects (prefijo /projects).
"""
from fastapi import APIRouter

from .projects_routes import router as projects_router


def get_projects_router() -> APIRouter:
    return projects_router


# Fin del archivo backend/app/modules/projects/routes/__init__.py
