# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/routes/deps.py

Dependencias inyectables para las rutas de Proposals.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database import EntityStore, get_db
from app.modules.proposals.facades import ProposalAccessPolicy


async def get_proposal_policy(db: AsyncSession = Depends(get_db)) -> ProposalAccessPolicy:
    return ProposalAccessPolicy(EntityStore(db))
