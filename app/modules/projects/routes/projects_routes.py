# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/projects_routes.py

Rutas de Proyectos:
- Búsqueda pública y listado propio
- Crear (clientes)
- Obtener detalle con control de acceso
- Actualizar (patch parcial, solo dueño)
- Cancelar (soft delete, solo dueño)

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.modules.auth.dependencies import get_current_user
from app.modules.projects.facades import ProjectAccessPolicy
from app.modules.projects.routes.deps import get_project_policy
from app.modules.projects.schemas import (
    ProjectCreateIn,
    ProjectDeletedResponse,
    ProjectDetailRead,
    ProjectRead,
    ProjectSearchIn,
    ProjectUpdateIn,
)
from app.shared.auth_context import Principal

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    responses={404: {"description": "No encontrado"}},
)


@router.get("/search", response_model=List[ProjectRead], summary="Buscar proyectos")
async def search_projects(
    query: Optional[str] = Query(None, description="Texto en título o descripción"),
    status_: Optional[str] = Query(None, alias="status"),
    min_budget: Optional[str] = Query(None),
    max_budget: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, description="budget | (default) fecha"),
    policy: ProjectAccessPolicy = Depends(get_project_policy),
):
    """Los filtros numéricos inválidos se ignoran; nunca devuelve error por la consulta."""
    criteria = ProjectSearchIn(
        query=query,
        status=status_,
        min_budget=min_budget,
        max_budget=max_budget,
        sort_by=sort_by,
    )
    return await policy.search(criteria)


@router.get("/mine", response_model=List[ProjectRead], summary="Proyectos del cliente autenticado")
async def list_my_projects(
    principal: Principal = Depends(get_current_user),
    policy: ProjectAccessPolicy = Depends(get_project_policy),
):
    return await policy.list_for_client(principal.id)


@router.post(
    "",
    response_model=ProjectDetailRead,
    status_code=status.HTTP_201_CREATED,
    summary="Crear proyecto",
)
async def create_project(
    payload: ProjectCreateIn,
    principal: Principal = Depends(get_current_user),
    policy: ProjectAccessPolicy = Depends(get_project_policy),
):
    return await policy.create(principal, payload.model_dump())


@router.get("/{project_id}", response_model=ProjectDetailRead, summary="Obtener proyecto por ID")
async def get_project(
    project_id: int,
    principal: Principal = Depends(get_current_user),
    policy: ProjectAccessPolicy = Depends(get_project_policy),
):
    return await policy.view(project_id, principal)


@router.patch("/{project_id}", response_model=ProjectDetailRead, summary="Actualizar proyecto")
async def update_project(
    project_id: int,
    payload: ProjectUpdateIn,
    principal: Principal = Depends(get_current_user),
    policy: ProjectAccessPolicy = Depends(get_project_policy),
):
    """Solo los campos enviados se escriben."""
    return await policy.update(project_id, principal, payload.model_dump(exclude_unset=True))


@router.delete("/{project_id}", response_model=ProjectDeletedResponse, summary="Cancelar proyecto")
async def delete_project(
    project_id: int,
    principal: Principal = Depends(get_current_user),
    policy: ProjectAccessPolicy = Depends(get_project_policy),
):
    await policy.delete(project_id, principal)
    return ProjectDeletedResponse(project_id=project_id)


# Fin del archivo backend/app/modules/projects/routes/projects_routes.py
