# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/__init__.py
"""

from .project_models import Project, Skill, ProjectSkill

__all__ = ["Project", "Skill", "ProjectSkill"]
