# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/project_status_enum.py

Enum de estado de negocio de un proyecto publicado por un cliente.
Se guarda como texto con CHECK constraint (ver app.shared.database.base.enum_check).

Ciclo de vida:
- open        → publicado, aceptando propuestas
- in_progress → propuesta aceptada, trabajo en curso
- completed   → trabajo entregado
- cancelled   → cancelado por el cliente (también es el "borrado" lógico)

Autor: Equipo FreelanceHub
Fecha: 2026-03-04
"""

from enum import StrEnum


class ProjectStatus(StrEnum):
    open = "open"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


__all__ = ["ProjectStatus"]
# Fin del archivo backend/app/modules/projects/enums/project_status_enum.py
