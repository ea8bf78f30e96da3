# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/project_status_transitions.py

Mapa de transiciones válidas para ProjectStatus.

Reglas de transición (solo hacia adelante):
- open        → in_progress | completed | cancelled
- in_progress → completed | cancelled
- completed   → cancelled
- cancelled   → (estado terminal, sin transiciones)

Quedarse en el mismo estado no es una transición y siempre se permite.

Autor: Equipo FreelanceHub
Fecha: 2026-03-04
"""

from typing import Dict, Set

from .project_status_enum import ProjectStatus


# Mapa de transiciones válidas: estado_origen → {estados_destino_permitidos}
VALID_STATUS_TRANSITIONS: Dict[ProjectStatus, Set[ProjectStatus]] = {
    ProjectStatus.open: {
        ProjectStatus.in_progress,
        ProjectStatus.completed,
        ProjectStatus.cancelled,
    },
    ProjectStatus.in_progress: {
        ProjectStatus.completed,
        ProjectStatus.cancelled,
    },
    ProjectStatus.completed: {
        ProjectStatus.cancelled,
    },
    ProjectStatus.cancelled: set(),
}


def is_valid_status_transition(
    from_status: ProjectStatus,
    to_status: ProjectStatus,
) -> bool:
    """
    Valida si una transición de estado es permitida.

    Returns:
        True si la transición es válida (o no hay cambio), False en caso contrario.
    """
    if from_status == to_status:
        return True
    return to_status in VALID_STATUS_TRANSITIONS.get(from_status, set())


__all__ = ["VALID_STATUS_TRANSITIONS", "is_valid_status_transition"]
# Fin del archivo backend/app/modules/projects/enums/project_status_transitions.py
