# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/schemas/proposal_schemas.py

Schemas Pydantic de propuestas.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.shared.utils.base_models import ApiModel
from app.modules.proposals.enums import ProposalStatus


class ProposalCreateIn(ApiModel):
    project_id: int
    cover_letter: str = Field(..., min_length=1)
    bid_amount: float = Field(..., gt=0)
    delivery_days: Optional[int] = Field(None, ge=1)


class ProposalUpdateIn(ApiModel):
    """Patch parcial: solo el freelancer autor puede aplicarlo."""

    cover_letter: Optional[str] = Field(None, min_length=1)
    bid_amount: Optional[float] = Field(None, gt=0)
    delivery_days: Optional[int] = Field(None, ge=1)


class ProposalRead(ApiModel):
    id: int
    project_id: int
    freelancer_id: int
    cover_letter: str
    bid_amount: float
    delivery_days: Optional[int] = None
    status: ProposalStatus
    created_at: datetime
    updated_at: datetime
    project_title: Optional[str] = None
    freelancer_name: Optional[str] = None
    freelancer_avatar: Optional[str] = None


class MessageResponse(ApiModel):
    message: str


__all__ = ["ProposalCreateIn", "ProposalUpdateIn", "ProposalRead", "MessageResponse"]
