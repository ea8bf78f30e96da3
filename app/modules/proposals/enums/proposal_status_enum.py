# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/enums/proposal_status_enum.py

Estados de una propuesta enviada por un freelancer.
"""

from enum import StrEnum


class ProposalStatus(StrEnum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    withdrawn = "withdrawn"


__all__ = ["ProposalStatus"]
