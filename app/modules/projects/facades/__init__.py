# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/__init__.py

Política de acceso del módulo projects.
"""

from .project_access import ProjectAccessPolicy

__all__ = ["ProjectAccessPolicy"]

# Fin del archivo backend/app/modules/projects/facades/__init__.py
