# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/project_models.py

Modelos SQLAlchemy para proyectos publicados por clientes y su
catálogo de skills.

- Project: pertenece a exactamente un cliente (client_id).
  `budget` es una columna desnormalizada (budget_max o, en su defecto,
  budget_min) usada para búsqueda y ordenamiento.
- Skill: catálogo global de skills, único por nombre.
- ProjectSkill: asociación N:M proyecto ↔ skill.

El "borrado" de un proyecto es status=cancelled; las filas nunca se
eliminan desde la API.

Autor: Equipo FreelanceHub
Fecha: 2026-03-04
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, enum_check
from app.modules.projects.enums import ProjectStatus


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, server_default="general")

    budget: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, server_default="0")
    budget_min: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    budget_max: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    duration_days: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, server_default=ProjectStatus.open.value, index=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        enum_check("status", ProjectStatus),
        Index("idx_projects_status_budget", "status", "budget"),
    )

    def __repr__(self):
        return f"<Project(id={self.id}, title='{self.title}', status={self.status})>"


class Skill(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)


class ProjectSkill(Base):
    __tablename__ = "project_skills"

    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True
    )
    skill_id: Mapped[int] = mapped_column(
        ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True
    )


__all__ = ["Project", "Skill", "ProjectSkill"]
# Fin del archivo backend/app/modules/projects/models/project_models.py
