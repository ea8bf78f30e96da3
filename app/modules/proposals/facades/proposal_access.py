# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/facades/proposal_access.py

Política de acceso de propuestas.

- view: el freelancer autor o el cliente dueño del proyecto referenciado;
  cualquier otro principal -> Forbidden. Inexistente -> NotFound.
- update/delete: solo el freelancer autor (además de la compuerta de rol
  en la ruta).
- list_by_project / list_by_freelancer: sin restricción en esta capa; el
  llamador decide si acota el acceso.

No se impone unicidad (project_id, freelancer_id): un freelancer puede
enviar varias propuestas al mismo proyecto.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from app.observability.metrics import record_denial
from app.shared.auth_context import Principal
from app.shared.database.entity_store import EntityStore, Row
from app.shared.errors import Forbidden, NotFound, ValidationRejected
from app.modules.projects.enums import ProjectStatus
from app.modules.proposals.enums import ProposalStatus

logger = logging.getLogger(__name__)

_UPDATABLE_COLUMNS = ("cover_letter", "bid_amount", "delivery_days")

_LIST_SELECT = """
    SELECT pr.*, p.title AS project_title,
           u.full_name AS freelancer_name, u.avatar_url AS freelancer_avatar
    FROM proposals pr
    LEFT JOIN projects p ON pr.project_id = p.id
    LEFT JOIN users u ON pr.freelancer_id = u.id
"""


class ProposalAccessPolicy:
    def __init__(self, store: EntityStore):
        self.store = store

    async def _load(self, proposal_id: int) -> Optional[Row]:
        return await self.store.query_one(
            "SELECT * FROM proposals WHERE id = :id", {"id": proposal_id}
        )

    async def _project_client_id(self, project_id: int) -> Optional[int]:
        project = await self.store.query_one(
            "SELECT client_id FROM projects WHERE id = :id", {"id": project_id}
        )
        return project["client_id"] if project is not None else None

    async def get(self, proposal_id: int) -> Row:
        proposal = await self.store.query_one(
            f"{_LIST_SELECT} WHERE pr.id = :id", {"id": proposal_id}
        )
        if proposal is None:
            raise NotFound("Proposal", proposal_id)
        return proposal

    async def is_party(self, proposal_id: int, user_id: int) -> bool:
        """
        Acceso delegado: freelancer autor o cliente del proyecto.

        Una propuesta (o proyecto) inexistente devuelve False.
        """
        proposal = await self._load(proposal_id)
        if proposal is None:
            return False
        if proposal["freelancer_id"] == user_id:
            return True
        return await self._project_client_id(proposal["project_id"]) == user_id

    async def view(self, proposal_id: int, principal: Principal) -> Row:
        """
        Raises:
            NotFound: la propuesta no existe
            Forbidden: el principal no es el autor ni el cliente del proyecto
        """
        proposal = await self.get(proposal_id)
        if proposal["freelancer_id"] == principal.id:
            return proposal

        if await self._project_client_id(proposal["project_id"]) == principal.id:
            return proposal

        logger.info(
            "proposal_view_denied: proposal_id=%s user_id=%s role=%s",
            proposal_id, principal.id, principal.role,
        )
        record_denial("proposal", "view")
        raise Forbidden("You do not have permission to view this proposal")

    async def _load_authored(self, proposal_id: int, principal: Principal, action: str) -> Row:
        proposal = await self._load(proposal_id)
        if proposal is None:
            raise NotFound("Proposal", proposal_id)
        if proposal["freelancer_id"] != principal.id:
            logger.warning(
                "proposal_%s_forbidden: proposal_id=%s user_id=%s",
                action, proposal_id, principal.id,
            )
            record_denial("proposal", action)
            raise Forbidden(f"You can only {action} your own proposals")
        return proposal

    async def create(self, principal: Principal, data: Mapping[str, Any]) -> Row:
        """
        Envía una propuesta sobre un proyecto abierto.

        Raises:
            Forbidden: el principal no es freelancer
            NotFound: el proyecto no existe
            ValidationRejected("project_not_open"): el proyecto no acepta propuestas
        """
        if not principal.is_freelancer:
            record_denial("proposal", "create")
            raise Forbidden("Only freelancers can submit proposals")

        project_id = data["project_id"]
        project = await self.store.query_one(
            "SELECT id, status FROM projects WHERE id = :id", {"id": project_id}
        )
        if project is None:
            raise NotFound("Project", project_id)
        if project["status"] != ProjectStatus.open.value:
            raise ValidationRejected("project_not_open", "Project is not accepting proposals")

        async def work() -> int:
            result = await self.store.execute(
                """
                INSERT INTO proposals
                    (project_id, freelancer_id, cover_letter, bid_amount, delivery_days, status)
                VALUES
                    (:project_id, :freelancer_id, :cover_letter, :bid_amount, :delivery_days, :status)
                RETURNING id
                """,
                {
                    "project_id": project_id,
                    "freelancer_id": principal.id,
                    "cover_letter": data["cover_letter"],
                    "bid_amount": data["bid_amount"],
                    "delivery_days": data.get("delivery_days"),
                    "status": ProposalStatus.pending.value,
                },
            )
            return result.last_insert_id

        proposal_id = await self.store.run_in_transaction(work)
        logger.info(
            "proposal_created: proposal_id=%s project_id=%s freelancer_id=%s",
            proposal_id, project_id, principal.id,
        )
        return await self.get(proposal_id)

    async def update(self, proposal_id: int, principal: Principal, patch: Mapping[str, Any]) -> Row:
        await self._load_authored(proposal_id, principal, "update")

        assignments: list[str] = []
        params: dict[str, Any] = {"id": proposal_id}
        for column in _UPDATABLE_COLUMNS:
            if column in patch and (patch[column] is not None or column == "delivery_days"):
                assignments.append(f"{column} = :{column}")
                params[column] = patch[column]

        if assignments:
            assignments.append("updated_at = CURRENT_TIMESTAMP")

            async def work() -> None:
                await self.store.execute(
                    f"UPDATE proposals SET {', '.join(assignments)} WHERE id = :id", params
                )

            await self.store.run_in_transaction(work)
            logger.info("proposal_updated: proposal_id=%s fields=%s", proposal_id, sorted(patch))

        return await self.get(proposal_id)

    async def delete(self, proposal_id: int, principal: Principal) -> None:
        await self._load_authored(proposal_id, principal, "delete")

        async def work() -> None:
            await self.store.execute("DELETE FROM proposals WHERE id = :id", {"id": proposal_id})

        await self.store.run_in_transaction(work)
        logger.info("proposal_deleted: proposal_id=%s freelancer_id=%s", proposal_id, principal.id)

    async def list_by_project(self, project_id: int) -> List[Row]:
        return await self.store.query(
            f"{_LIST_SELECT} WHERE pr.project_id = :pid ORDER BY pr.created_at DESC, pr.id DESC",
            {"pid": project_id},
        )

    async def list_by_freelancer(self, freelancer_id: int) -> List[Row]:
        return await self.store.query(
            f"{_LIST_SELECT} WHERE pr.freelancer_id = :fid ORDER BY pr.created_at DESC, pr.id DESC",
            {"fid": freelancer_id},
        )


__all__ = ["ProposalAccessPolicy"]

# Fin del archivo backend/app/modules/proposals/facades/proposal_access.py
