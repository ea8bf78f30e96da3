# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Equipo FreelanceHub
Fecha: 2026-03-02
"""

from __future__ import annotations

from .base import Base, NAMING_CONVENTION, enum_check
from .database import (
    engine,
    SessionLocal,
    get_db,
    session_scope,
    init_models,
    check_database_health,
)
from .entity_store import EntityStore, ExecuteResult

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "NAMING_CONVENTION",
    "enum_check",
    "get_db",
    "session_scope",
    "init_models",
    "check_database_health",
    "EntityStore",
    "ExecuteResult",
]

# Fin del archivo backend/app/shared/database/__init__.py
