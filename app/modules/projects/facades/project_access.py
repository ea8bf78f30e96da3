# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/facades/project_access.py

Política de acceso y propiedad de proyectos.

Reglas:
- view: freelancers siempre (navegación libre); admin y cliente dueño
  siempre; cualquier otro principal con una propuesta en el proyecto.
  El resto recibe NotFound (no se distingue "no existe" de "prohibido").
- update/delete: solo el cliente dueño (admin incluido en la prohibición)
  -> Forbidden. delete es soft: status=cancelled, la fila nunca se borra.
- search: filtros conjuntivos; un fallo de ejecución degrada a [].

La política solo recibe un EntityStore; no abre conexiones ni crea esquema.

Autor: Equipo FreelanceHub
Fecha: 2026-03-05
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.observability.metrics import record_denial, search_degraded_total
from app.shared.auth_context import Principal
from app.shared.database.entity_store import EntityStore, Row
from app.shared.errors import Forbidden, InvalidStatusTransition, NotFound
from app.modules.projects.enums import ProjectStatus, is_valid_status_transition
from app.modules.projects.schemas import ProjectSearchIn

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"

# Columnas que un patch puede escribir directamente; las NOT NULL ignoran un null explícito
_PATCHABLE_COLUMNS = ("title", "description", "category", "duration_days", "status")
_NULLABLE_COLUMNS = frozenset({"duration_days"})

_DETAIL_SELECT = """
    SELECT p.*, u.full_name AS client_name, u.avatar_url AS client_avatar
    FROM projects p
    JOIN users u ON p.client_id = u.id
"""


def _to_number(value: Any) -> Optional[float]:
    """Convierte un filtro numérico; None si falta o no es un número finito."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _normalize_skill_names(names: Iterable[str]) -> List[str]:
    seen: dict[str, None] = {}
    for name in names:
        cleaned = (name or "").strip()
        if cleaned and cleaned not in seen:
            seen[cleaned] = None
    return list(seen)


class ProjectAccessPolicy:
    """Reglas de propiedad y rol sobre proyectos."""

    def __init__(self, store: EntityStore):
        self.store = store

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------

    async def _load(self, project_id: int) -> Optional[Row]:
        return await self.store.query_one(
            "SELECT * FROM projects WHERE id = :id", {"id": project_id}
        )

    async def _skills_of(self, project_id: int) -> List[str]:
        rows = await self.store.query(
            """
            SELECT s.name FROM skills s
            JOIN project_skills ps ON ps.skill_id = s.id
            WHERE ps.project_id = :id
            ORDER BY s.name
            """,
            {"id": project_id},
        )
        return [r["name"] for r in rows]

    async def has_proposal(self, project_id: int, user_id: int) -> bool:
        """True si existe al menos una propuesta (project_id, freelancer_id=user_id)."""
        row = await self.store.query_one(
            "SELECT id FROM proposals WHERE project_id = :pid AND freelancer_id = :uid LIMIT 1",
            {"pid": project_id, "uid": user_id},
        )
        return row is not None

    async def get(self, project_id: int) -> Row:
        """
        Detalle de un proyecto sin chequeo de acceso.

        Incluye client_name, client_avatar, skills, proposals_count y
        has_submitted_proposal=False.

        Raises:
            NotFound: si el proyecto no existe
        """
        project = await self.store.query_one(
            f"{_DETAIL_SELECT} WHERE p.id = :id", {"id": project_id}
        )
        if project is None:
            raise NotFound("Project", project_id)

        count_row = await self.store.query_one(
            "SELECT COUNT(*) AS count FROM proposals WHERE project_id = :id",
            {"id": project_id},
        )
        project["skills"] = await self._skills_of(project_id)
        project["proposals_count"] = int(count_row["count"]) if count_row else 0
        project["has_submitted_proposal"] = False
        return project

    async def view(self, project_id: int, principal: Principal) -> Row:
        """
        Detalle de un proyecto visto por `principal`.

        has_submitted_proposal solo se calcula para freelancers.

        Raises:
            NotFound: si no existe o el principal no tiene acceso
        """
        project = await self.get(project_id)

        if principal.is_freelancer:
            project["has_submitted_proposal"] = await self.has_proposal(project_id, principal.id)
            return project

        if principal.is_admin or project["client_id"] == principal.id:
            return project

        if await self.has_proposal(project_id, principal.id):
            return project

        logger.info(
            "project_view_denied: project_id=%s user_id=%s role=%s",
            project_id, principal.id, principal.role,
        )
        record_denial("project", "view")
        raise NotFound("Project", project_id)

    async def is_participant(self, project_id: int, user_id: int) -> bool:
        """
        Acceso delegado: cliente dueño o autor de alguna propuesta.

        Un proyecto inexistente devuelve False (nunca lanza).
        """
        project = await self.store.query_one(
            "SELECT client_id FROM projects WHERE id = :id", {"id": project_id}
        )
        if project is not None and project["client_id"] == user_id:
            return True
        return await self.has_proposal(project_id, user_id)

    async def search(self, criteria: ProjectSearchIn) -> List[Row]:
        """
        Búsqueda con filtros conjuntivos construidos incrementalmente.

        Orden por defecto: más recientes primero; sort_by=budget ordena por
        presupuesto descendente. Un error de ejecución devuelve [].
        """
        sql = f"{_DETAIL_SELECT} WHERE 1=1"
        params: dict[str, Any] = {}

        if criteria.query:
            sql += (
                " AND (LOWER(p.title) LIKE :pattern ESCAPE '\\'"
                " OR LOWER(p.description) LIKE :pattern ESCAPE '\\')"
            )
            params["pattern"] = f"%{_escape_like(criteria.query.lower())}%"

        if criteria.status:
            sql += " AND p.status = :status"
            params["status"] = criteria.status

        min_budget = _to_number(criteria.min_budget)
        if min_budget is not None:
            sql += " AND p.budget >= :min_budget"
            params["min_budget"] = min_budget

        max_budget = _to_number(criteria.max_budget)
        if max_budget is not None:
            sql += " AND p.budget <= :max_budget"
            params["max_budget"] = max_budget

        if criteria.sort_by == "budget":
            sql += " ORDER BY p.budget DESC, p.id DESC"
        else:
            sql += " ORDER BY p.created_at DESC, p.id DESC"

        try:
            return await self.store.query(sql, params)
        except SQLAlchemyError as e:
            logger.error("project_search_failed: %s", e)
            search_degraded_total.inc()
            await self.store.rollback()
            return []

    async def list_for_client(self, client_id: int) -> List[Row]:
        return await self.store.query(
            "SELECT * FROM projects WHERE client_id = :cid ORDER BY created_at DESC, id DESC",
            {"cid": client_id},
        )

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------

    async def _relink_skills(self, project_id: int, names: Iterable[str]) -> None:
        """Reemplaza todos los skills del proyecto (upsert de skills por nombre)."""
        await self.store.execute(
            "DELETE FROM project_skills WHERE project_id = :id", {"id": project_id}
        )
        for name in _normalize_skill_names(names):
            skill = await self.store.query_one(
                "SELECT id FROM skills WHERE name = :name", {"name": name}
            )
            if skill is not None:
                skill_id = skill["id"]
            else:
                inserted = await self.store.execute(
                    "INSERT INTO skills (name) VALUES (:name) RETURNING id", {"name": name}
                )
                skill_id = inserted.last_insert_id
            await self.store.execute(
                "INSERT INTO project_skills (project_id, skill_id) VALUES (:pid, :sid)",
                {"pid": project_id, "sid": skill_id},
            )

    async def create(self, principal: Principal, data: Mapping[str, Any]) -> Row:
        """
        Publica un proyecto del cliente `principal`.

        budget = budget_max, o budget_min, o 0. Estado inicial: open.

        Raises:
            Forbidden: si el principal no es cliente
        """
        if not principal.is_client:
            record_denial("project", "create")
            raise Forbidden("Only clients can create projects")

        budget_min = data.get("budget_min")
        budget_max = data.get("budget_max")

        async def work() -> int:
            result = await self.store.execute(
                """
                INSERT INTO projects
                    (client_id, title, description, category, budget,
                     budget_min, budget_max, duration_days, status)
                VALUES
                    (:client_id, :title, :description, :category, :budget,
                     :budget_min, :budget_max, :duration_days, :status)
                RETURNING id
                """,
                {
                    "client_id": principal.id,
                    "title": data["title"],
                    "description": data["description"],
                    "category": data.get("category") or DEFAULT_CATEGORY,
                    "budget": budget_max or budget_min or 0,
                    "budget_min": budget_min,
                    "budget_max": budget_max,
                    "duration_days": data.get("duration_days"),
                    "status": ProjectStatus.open.value,
                },
            )
            project_id = result.last_insert_id
            if data.get("skills"):
                await self._relink_skills(project_id, data["skills"])
            return project_id

        project_id = await self.store.run_in_transaction(work)
        logger.info("project_created: project_id=%s client_id=%s", project_id, principal.id)
        return await self.get(project_id)

    async def _load_owned(self, project_id: int, principal: Principal, action: str) -> Row:
        project = await self._load(project_id)
        if project is None:
            raise NotFound("Project", project_id)
        if project["client_id"] != principal.id:
            logger.warning(
                "project_%s_forbidden: project_id=%s user_id=%s role=%s",
                action, project_id, principal.id, principal.role,
            )
            record_denial("project", action)
            raise Forbidden(f"You can only {action} your own projects")
        return project

    async def update(self, project_id: int, principal: Principal, patch: Mapping[str, Any]) -> Row:
        """
        Aplica un patch parcial.

        - Solo se escriben los campos presentes en `patch`.
        - Si viene budget_max o budget_min, budget se reescribe con
          budget_max (si vino) o budget_min.
        - status debe ser una transición válida hacia adelante.
        - skills presente (aunque vacío) reemplaza todos los anteriores.
        - Columnas y skills se escriben en una sola transacción.

        Raises:
            NotFound, Forbidden, InvalidStatusTransition
        """
        project = await self._load_owned(project_id, principal, "update")

        assignments: list[str] = []
        params: dict[str, Any] = {"id": project_id}

        for column in _PATCHABLE_COLUMNS:
            if column in patch and (patch[column] is not None or column in _NULLABLE_COLUMNS):
                assignments.append(f"{column} = :{column}")
                params[column] = patch[column]

        if patch.get("status") is not None:
            new_status = ProjectStatus(patch["status"])
            if not is_valid_status_transition(project["status"], new_status):
                raise InvalidStatusTransition(project["status"], new_status.value)
            params["status"] = new_status.value

        if "budget_max" in patch or "budget_min" in patch:
            budget = patch["budget_max"] if patch.get("budget_max") is not None else patch.get("budget_min")
            if budget is not None:
                assignments.append("budget = :budget")
                params["budget"] = budget
            for bound in ("budget_min", "budget_max"):
                if bound in patch:
                    assignments.append(f"{bound} = :{bound}")
                    params[bound] = patch[bound]

        replace_skills = "skills" in patch

        async def work() -> None:
            if assignments:
                assignments.append("updated_at = CURRENT_TIMESTAMP")
                await self.store.execute(
                    f"UPDATE projects SET {', '.join(assignments)} WHERE id = :id", params
                )
            if replace_skills:
                await self._relink_skills(project_id, patch["skills"] or [])

        await self.store.run_in_transaction(work)
        logger.info(
            "project_updated: project_id=%s fields=%s",
            project_id, sorted(k for k in patch.keys()),
        )
        return await self.get(project_id)

    async def delete(self, project_id: int, principal: Principal) -> None:
        """
        Soft delete: mueve el proyecto a cancelled. La fila se conserva.

        Un proyecto ya cancelado no se modifica.
        """
        project = await self._load_owned(project_id, principal, "delete")
        if project["status"] == ProjectStatus.cancelled.value:
            return

        async def work() -> None:
            await self.store.execute(
                "UPDATE projects SET status = :status, updated_at = CURRENT_TIMESTAMP WHERE id = :id",
                {"status": ProjectStatus.cancelled.value, "id": project_id},
            )

        await self.store.run_in_transaction(work)
        logger.info("project_cancelled: project_id=%s client_id=%s", project_id, principal.id)


__all__ = ["ProjectAccessPolicy", "DEFAULT_CATEGORY"]

# Fin del archivo backend/app/modules/projects/facades/project_access.py
