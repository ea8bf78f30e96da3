# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/__init__.py

Schemas públicos del módulo projects.
"""

from .project_schemas import (
    ProjectCreateIn,
    ProjectUpdateIn,
    ProjectSearchIn,
    ProjectRead,
    ProjectDetailRead,
    ProjectDeletedResponse,
)

__all__ = [
    "ProjectCreateIn",
    "ProjectUpdateIn",
    "ProjectSearchIn",
    "ProjectRead",
    "ProjectDetailRead",
    "ProjectDeletedResponse",
]

# Fin del archivo backend/app/modules/projects/schemas/__init__.py
