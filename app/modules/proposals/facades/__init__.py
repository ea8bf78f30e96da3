# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/facades/__init__.py
"""

from .proposal_access import ProposalAccessPolicy

__all__ = ["ProposalAccessPolicy"]
