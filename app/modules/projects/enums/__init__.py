# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/enums/__init__.py

Export central de enums del módulo de proyectos.
"""

from .project_status_enum import ProjectStatus
from .project_status_transitions import (
    VALID_STATUS_TRANSITIONS,
    is_valid_status_transition,
)

__all__ = [
    "ProjectStatus",
    "VALID_STATUS_TRANSITIONS",
    "is_valid_status_transition",
]
