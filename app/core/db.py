# -*- coding: utf-8 -*-
"""
backend/app/core/db.py

Fachada para la capa de acceso a datos basada en SQLAlchemy async.
Envuelve el módulo `app.shared.database` para exponer un conjunto claro
de primitivas de acceso a la base de datos.

Autor: Equipo FreelanceHub
Fecha: 2026-03-02
"""

from app.shared.database.database import (
    engine,
    SessionLocal,
    Base,
    get_db,
    session_scope,
    init_models,
    check_database_health,
)


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "session_scope",
    "init_models",
    "check_database_health",
]

# Fin del archivo backend/app/core/db.py
