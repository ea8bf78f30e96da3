# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/routes/proposals_routes.py

Rutas de Propuestas.

Crear, listar las propias, editar y borrar exigen rol freelancer en la
frontera; la política además verifica autoría.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.modules.auth.dependencies import get_current_user, require_role
from app.modules.proposals.facades import ProposalAccessPolicy
from app.modules.proposals.routes.deps import get_proposal_policy
from app.modules.proposals.schemas import (
    MessageResponse,
    ProposalCreateIn,
    ProposalRead,
    ProposalUpdateIn,
)
from app.shared.auth_context import Principal, Role

router = APIRouter(prefix="/proposals", tags=["proposals"])

require_freelancer = require_role(Role.freelancer)


@router.post(
    "",
    response_model=ProposalRead,
    status_code=status.HTTP_201_CREATED,
    summary="Enviar propuesta",
)
async def create_proposal(
    payload: ProposalCreateIn,
    principal: Principal = Depends(require_freelancer),
    policy: ProposalAccessPolicy = Depends(get_proposal_policy),
):
    return await policy.create(principal, payload.model_dump())


@router.get("/mine", response_model=List[ProposalRead], summary="Propuestas del freelancer autenticado")
async def list_my_proposals(
    principal: Principal = Depends(require_freelancer),
    policy: ProposalAccessPolicy = Depends(get_proposal_policy),
):
    return await policy.list_by_freelancer(principal.id)


@router.get(
    "/project/{project_id}",
    response_model=List[ProposalRead],
    summary="Propuestas de un proyecto",
)
async def list_project_proposals(
    project_id: int,
    _principal: Principal = Depends(get_current_user),
    policy: ProposalAccessPolicy = Depends(get_proposal_policy),
):
    return await policy.list_by_project(project_id)


@router.get("/{proposal_id}", response_model=ProposalRead, summary="Obtener propuesta")
async def get_proposal(
    proposal_id: int,
    principal: Principal = Depends(get_current_user),
    policy: ProposalAccessPolicy = Depends(get_proposal_policy),
):
    return await policy.view(proposal_id, principal)


@router.put("/{proposal_id}", response_model=ProposalRead, summary="Editar propuesta")
async def update_proposal(
    proposal_id: int,
    payload: ProposalUpdateIn,
    principal: Principal = Depends(require_freelancer),
    policy: ProposalAccessPolicy = Depends(get_proposal_policy),
):
    return await policy.update(proposal_id, principal, payload.model_dump(exclude_unset=True))


@router.delete("/{proposal_id}", response_model=MessageResponse, summary="Borrar propuesta")
async def delete_proposal(
    proposal_id: int,
    principal: Principal = Depends(require_freelancer),
    policy: ProposalAccessPolicy = Depends(get_proposal_policy),
):
    await policy.delete(proposal_id, principal)
    return MessageResponse(message="Proposal deleted successfully")


# Fin del archivo backend/app/modules/proposals/routes/proposals_routes.py
