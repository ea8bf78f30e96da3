# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/schemas/__init__.py
"""

from .proposal_schemas import ProposalCreateIn, ProposalUpdateIn, ProposalRead, MessageResponse

__all__ = ["ProposalCreateIn", "ProposalUpdateIn", "ProposalRead", "MessageResponse"]
