# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/deps.py

Dependencias inyectables para las rutas de Projects.
Los tests pueden overridear get_project_policy o get_db.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database import EntityStore, get_db
from app.modules.projects.facades import ProjectAccessPolicy


async def get_project_policy(db: AsyncSession = Depends(get_db)) -> ProjectAccessPolicy:
    return ProjectAccessPolicy(EntityStore(db))


# Fin del archivo backend/app/modules/projects/routes/deps.py
