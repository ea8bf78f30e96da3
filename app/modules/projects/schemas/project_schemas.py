# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/project_schemas.py

Schemas Pydantic para creación, actualización, búsqueda y respuesta de
proyectos.

ProjectUpdateIn es un patch parcial: la ruta lo convierte con
`model_dump(exclude_unset=True)` y solo los campos presentes llegan a la
política. `skills=[]` está presente (borra los skills); omitir `skills`
no toca los existentes.

Autor: Equipo FreelanceHub
Fecha: 2026-03-05
"""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from app.shared.utils.base_models import ApiModel
from app.modules.projects.enums import ProjectStatus


# ========== REQUEST SCHEMAS ==========

class ProjectCreateIn(ApiModel):
    """Request para publicar un proyecto (solo clientes)."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    budget_min: Optional[float] = Field(None, ge=0)
    budget_max: Optional[float] = Field(None, ge=0)
    duration_days: Optional[int] = Field(None, ge=1)
    skills: Optional[List[str]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Landing page para cafetería",
                "description": "Sitio estático con menú y formulario de contacto",
                "category": "web",
                "budget_min": 100,
                "budget_max": 500,
                "duration_days": 14,
                "skills": ["html", "css"],
            }
        }
    )


class ProjectUpdateIn(ApiModel):
    """Patch parcial de un proyecto; solo el cliente dueño puede aplicarlo."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    budget_min: Optional[float] = Field(None, ge=0)
    budget_max: Optional[float] = Field(None, ge=0)
    duration_days: Optional[int] = Field(None, ge=1)
    status: Optional[ProjectStatus] = None
    skills: Optional[List[str]] = None

    @field_validator("skills")
    @classmethod
    def skills_not_null(cls, v: Optional[List[str]]) -> List[str]:
        # skills: null se trata igual que una lista vacía
        return v or []


class ProjectSearchIn(ApiModel):
    """
    Criterios de búsqueda.

    Los presupuestos llegan como texto: un valor no numérico se ignora en
    lugar de rechazar la petición.
    """

    query: Optional[str] = None
    status: Optional[str] = None
    min_budget: Optional[str] = None
    max_budget: Optional[str] = None
    sort_by: Optional[str] = None


# ========== RESPONSE SCHEMAS ==========

class ProjectRead(ApiModel):
    id: int
    client_id: int
    title: str
    description: str
    category: str
    budget: float
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    duration_days: Optional[int] = None
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime
    client_name: Optional[str] = None
    client_avatar: Optional[str] = None


class ProjectDetailRead(ProjectRead):
    """Detalle con campos derivados calculados por la política de acceso."""

    skills: List[str] = Field(default_factory=list)
    proposals_count: int = 0
    has_submitted_proposal: bool = False


class ProjectDeletedResponse(ApiModel):
    message: str = "Project cancelled"
    project_id: int


__all__ = [
    "ProjectCreateIn",
    "ProjectUpdateIn",
    "ProjectSearchIn",
    "ProjectRead",
    "ProjectDetailRead",
    "ProjectDeletedResponse",
]
