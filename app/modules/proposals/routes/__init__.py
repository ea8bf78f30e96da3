# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/routes/__init__.py
"""

from .proposals_routes import router

__all__ = ["router"]
