# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/models/proposal_models.py

Modelo SQLAlchemy para propuestas de freelancers sobre proyectos.

Nota: no hay UNIQUE(project_id, freelancer_id). La UI espera una
propuesta por freelancer y proyecto (has_submitted_proposal), pero la
BD no lo impone.

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
from app.modules.proposals.enums import ProposalStatus


class Proposal(Base):
    __tablename__ = "proposals"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    freelancer_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    cover_letter: Mapped[str] = mapped_column(Text, nullable=False)
    bid_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    delivery_days: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, server_default=ProposalStatus.pending.value
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        enum_check("status", ProposalStatus),
        Index("idx_proposals_project_freelancer", "project_id", "freelancer_id"),
    )

    def __repr__(self):
        return (
            f"<Proposal(id={self.id}, project_id={self.project_id}, "
            f"freelancer_id={self.freelancer_id}, status={self.status})>"
        )


__all__ = ["Proposal"]
# Fin del archivo backend/app/modules/proposals/models/proposal_models.py
